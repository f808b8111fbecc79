"""Rectangular regions on a named sheet, in A1 notation.

Example:
    >>> sheet_range = SheetRange.from_a1("'My Sheet'!B2:D10")
    >>> sheet_range.sheet_title
    'My Sheet'
    >>> sheet_range.row_count, sheet_range.column_count
    (8, 2)
    >>> sheet_range.a1
    'My Sheet!B2:D10'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sheet_ranges.coordinates.anchor import Anchor
from sheet_ranges.coordinates.exceptions import ParseError, PreconditionError

logger = logging.getLogger(__name__)

QUOTE = "'"
SHEET_SEPARATOR = "!"
ANCHOR_SEPARATOR = ":"


def _split_sheet_title(text: str) -> tuple[str, str]:
    """Split ``text`` into (sheet title, anchor part) at the sheet separator.

    A quoted title may hold any character; ``''`` inside it is a literal quote.
    """
    if text.startswith(QUOTE):
        chars: list[str] = []
        index = 1
        while index < len(text):
            char = text[index]
            if char == QUOTE:
                if text.startswith(QUOTE, index + 1):
                    chars.append(QUOTE)
                    index += 2
                    continue
                break
            chars.append(char)
            index += 1
        else:
            raise ParseError(text, "unterminated quoted sheet title")
        rest = text[index + 1 :]
        if not rest.startswith(SHEET_SEPARATOR):
            raise ParseError(text, f"expected {SHEET_SEPARATOR!r} after quoted sheet title")
        title = "".join(chars)
        remainder = rest[1:]
    else:
        title, separator, remainder = text.partition(SHEET_SEPARATOR)
        if not separator:
            raise ParseError(text, "missing sheet title")

    if not title:
        raise ParseError(text, "empty sheet title")
    return title, remainder


def _quote_sheet_title(title: str) -> str:
    """Quote a title only when the bare form would not parse back."""
    if QUOTE in title or SHEET_SEPARATOR in title:
        return QUOTE + title.replace(QUOTE, QUOTE * 2) + QUOTE
    return title


@dataclass(frozen=True)
class SheetRange:
    """A region on a named sheet bounded by two corner anchors.

    When ``second_anchor`` is omitted it becomes a copy of ``first_anchor``,
    so a single cell is a range whose corners are equal.

    Geometry properties need both corners to carry the queried axis and raise
    ``PreconditionError`` otherwise. ``row_count`` and ``column_count`` are
    ``max - min``; use ``row_span`` and ``column_span`` for inclusive counts.
    """

    sheet_title: str
    first_anchor: Anchor
    second_anchor: Anchor | None = None

    def __post_init__(self):
        if self.second_anchor is None:
            object.__setattr__(self, "second_anchor", self.first_anchor.clone())

    @classmethod
    def from_a1(cls, text: str) -> SheetRange:
        """Parse a range such as ``"Sheet1!B2:D10"``, ``"Sheet1!B2"`` or ``"Sheet1!"``.

        An empty or missing second anchor defaults to the first one.

        Raises:
            ParseError: If the sheet title or an anchor cannot be read.
        """
        title, remainder = _split_sheet_title(text)
        first_token, _, second_token = remainder.partition(ANCHOR_SEPARATOR)
        try:
            first_anchor = Anchor.from_a1(first_token)
            second_anchor = Anchor.from_a1(second_token) if second_token else None
        except ParseError as e:
            raise ParseError(text, e.reason) from e

        logger.debug(f"Parsed {text!r} as sheet {title!r} [{first_token}:{second_token}]")
        return cls(title, first_anchor, second_anchor)

    def _corner_values(self, axis: str) -> tuple[int, int]:
        first = getattr(self.first_anchor, axis)
        second = getattr(self.second_anchor, axis)
        if first is None or second is None:
            raise PreconditionError(
                f"Range {self.a1!r} has a corner without a {axis}; "
                f"{axis} geometry needs both corners to set it"
            )
        return first, second

    @property
    def minimum_row(self) -> int:
        return min(self._corner_values("row"))

    @property
    def maximum_row(self) -> int:
        return max(self._corner_values("row"))

    @property
    def minimum_column(self) -> int:
        return min(self._corner_values("column"))

    @property
    def maximum_column(self) -> int:
        return max(self._corner_values("column"))

    @property
    def row_count(self) -> int:
        """Rows between the corners, exclusive (equal corners give 0)."""
        return self.maximum_row - self.minimum_row

    @property
    def column_count(self) -> int:
        """Columns between the corners, exclusive (equal corners give 0)."""
        return self.maximum_column - self.minimum_column

    @property
    def row_span(self) -> int:
        """Number of rows covered, inclusive."""
        return self.row_count + 1

    @property
    def column_span(self) -> int:
        """Number of columns covered, inclusive."""
        return self.column_count + 1

    @property
    def cell_count(self) -> int:
        return self.row_span * self.column_span

    @property
    def a1(self) -> str:
        """Full A1 form; always lists both corners."""
        title = _quote_sheet_title(self.sheet_title)
        corners = f"{self.first_anchor.a1}{ANCHOR_SEPARATOR}{self.second_anchor.a1}"
        return f"{title}{SHEET_SEPARATOR}{corners}"

    def __str__(self) -> str:
        return self.a1
