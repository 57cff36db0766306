"""Exception hierarchy for tabula.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TabulaError for easy catching of any tabula-specific error.
"""

from __future__ import annotations


class TabulaError(Exception):
    """Base exception for all tabula errors."""

    pass


class SchemaError(TabulaError):
    """Raised when a column list is invalid.

    Examples:
        - An entry of the column list is not a Column
    """

    pass


class EncodeError(TabulaError):
    """Raised when encoding a header or a row fails.

    Examples:
        - A string cannot be represented as UTF-8
        - Row arity does not match the schema
        - A cell does not match its column type
    """

    pass


class InvalidRecordLengthError(EncodeError):
    """Raised when a row has a different number of cells than the schema has columns.

    Nothing is written to the sink when this is raised.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Invalid record length: expected {expected} cells, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidCellTypeError(EncodeError):
    """Raised when a cell's variant does not match its column's declared type.

    Cells before the offending one have already been written; the sink is left
    at an indeterminate row boundary.
    """

    def __init__(self, column: str, expected: str, actual: str) -> None:
        super().__init__(f"Column {column}: expected {expected} cell, got {actual}")
        self.column = column
        self.expected = expected
        self.actual = actual


class WriteFailedError(EncodeError):
    """Raised when the underlying sink rejects a seek or write.

    Examples:
        - Sink is not seekable
        - Sink is closed
        - Short write
        - Writer already left a partial row in the sink
    """

    pass


class DecodeError(TabulaError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Varint overflowing 64 bits
        - Invalid UTF-8
        - Unknown column type tag
    """

    pass


class MalformedStreamError(DecodeError):
    """Raised when the byte stream ends mid-structure or holds an invalid value."""

    pass


class InvalidColumnTypeError(DecodeError):
    """Raised when a header holds an unrecognized column type tag."""

    def __init__(self, tag: int) -> None:
        super().__init__(f"Invalid column type tag: 0x{tag:02x}")
        self.tag = tag


class EndOfStream(TabulaError, EOFError):
    """Raised by readers when the stream is exhausted exactly at a row boundary.

    This is the normal end of a file, not a corruption.
    """

    def __init__(self, message: str = "End of stream") -> None:
        super().__init__(message)
