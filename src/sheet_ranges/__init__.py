"""A1 notation coordinate model for spreadsheets, with a thin Google Sheets reader."""

from sheet_ranges.coordinates import (
    Anchor,
    CoordinateError,
    ParseError,
    PreconditionError,
    SheetRange,
    column_from_lettering,
    column_lettering,
)

__all__ = [
    "Anchor",
    "SheetRange",
    "column_lettering",
    "column_from_lettering",
    "CoordinateError",
    "ParseError",
    "PreconditionError",
]
