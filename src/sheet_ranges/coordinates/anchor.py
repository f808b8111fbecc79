"""Single row/column references and the column lettering codec."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from sheet_ranges.coordinates.exceptions import ParseError

_ANCHOR_PATTERN = re.compile(r"(?P<letters>[A-Za-z]*)(?P<digits>[0-9]*)")
_LETTERING_PATTERN = re.compile(r"[A-Za-z]+")


def column_lettering(number: int) -> str:
    """Convert a 1-based column number to its letters (1 -> A, 27 -> AA)."""
    if number < 1:
        raise ValueError(f"Column number must be positive, got {number}")
    sequence: list[str] = []
    while number > 0:
        remainder = (number - 1) % 26
        sequence.append(chr(ord("A") + remainder))
        number = (number - remainder) // 26
    return "".join(reversed(sequence))


def column_from_lettering(lettering: str) -> int:
    """Convert column letters to a 1-based column number (A -> 1, AA -> 27).

    Letters are case-insensitive.
    """
    if not _LETTERING_PATTERN.fullmatch(lettering):
        raise ParseError(lettering, "column lettering must be one or more letters A-Z")
    result = 0
    for position, char in enumerate(reversed(lettering.upper())):
        result += 26**position * (ord(char) - ord("A") + 1)
    return result


@dataclass(frozen=True)
class Anchor:
    """A reference to a row, a column, both, or neither.

    ``Anchor(column=2)`` is all of column B, ``Anchor(row=5)`` is all of row 5
    and ``Anchor()`` is unanchored. Values are stored as given.
    """

    row: int | None = None
    column: int | None = None

    @classmethod
    def from_a1(cls, token: str) -> Anchor:
        """Parse a token such as ``"B2"``, ``"B"``, ``"2"`` or ``""``.

        Raises:
            ParseError: If the token is not letters followed by digits.
        """
        match = _ANCHOR_PATTERN.fullmatch(token)
        if match is None:
            raise ParseError(token, "expected column letters followed by row digits")
        letters = match.group("letters")
        digits = match.group("digits")
        return cls(
            row=int(digits) if digits else None,
            column=column_from_lettering(letters) if letters else None,
        )

    @property
    def a1(self) -> str:
        """A1 form of this anchor, empty when unanchored."""
        if self.row is None and self.column is None:
            return ""
        if self.row is None:
            return column_lettering(self.column)
        if self.column is None:
            return str(self.row)
        return f"{column_lettering(self.column)}{self.row}"

    @property
    def is_cell(self) -> bool:
        """True when both row and column are set."""
        return self.row is not None and self.column is not None

    def clone(self) -> Anchor:
        return replace(self)

    def __str__(self) -> str:
        return self.a1
