"""Stylesheet walker error types."""


class ParseError(Exception):
    """Raised when stylesheet source cannot be split into rules."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
