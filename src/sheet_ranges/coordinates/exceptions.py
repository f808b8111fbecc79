"""A1 notation exceptions."""


class CoordinateError(Exception):
    """Base exception for spreadsheet coordinate errors."""

    pass


class ParseError(CoordinateError, ValueError):
    """Raised when a string cannot be read as A1 notation."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid A1 notation {text!r}: {reason}")


class PreconditionError(CoordinateError):
    """Raised when a geometry query needs a row or column that a corner lacks."""

    pass
