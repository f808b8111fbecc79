"""A1 notation coordinate model: anchors, sheet ranges and column lettering."""

from sheet_ranges.coordinates.anchor import Anchor, column_from_lettering, column_lettering
from sheet_ranges.coordinates.exceptions import CoordinateError, ParseError, PreconditionError
from sheet_ranges.coordinates.sheet_range import SheetRange

__all__ = [
    "Anchor",
    "SheetRange",
    "column_lettering",
    "column_from_lettering",
    "CoordinateError",
    "ParseError",
    "PreconditionError",
]
