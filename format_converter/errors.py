from __future__ import annotations


class ConversionError(Exception):
    """Base error for a failed conversion attempt.

    The message is shown to the user as-is, so it should read as a sentence.
    """

    severity = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(ConversionError, ValueError):
    """Input text is not valid for the selected input format."""


class RowLengthError(ParseError):
    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row} has {actual} columns, expected {expected}")


class CSVShapeError(ConversionError, TypeError):
    """Value cannot be laid out as CSV rows."""


class UnsupportedFormatError(ConversionError, ValueError):
    def __init__(self, fmt):
        self.format = fmt
        super().__init__(f"Unsupported format: {fmt}")


class UploadError(ValueError):
    """Uploaded file could not be read as text."""
