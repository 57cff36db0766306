"""Encoded size calculation utilities.

This module provides functions to calculate how many bytes a header or a row
takes on the wire without writing it anywhere.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..codec.cells import encode_cell
from ..codec.primitives import NUMBER_SIZE
from ..codec.schema import encode_schema, validate_columns
from ..exceptions import InvalidRecordLengthError
from ..models.column import Column, ColumnType


def varint_size(value: int) -> int:
    """Calculate the encoded size of a varint in bytes.

    Args:
        value: Unsigned integer

    Returns:
        ceil(bit_length / 7), and 1 for zero

    Raises:
        ValueError: If value is negative

    Example:
        >>> varint_size(127), varint_size(128), varint_size(16384)
        (1, 2, 3)
    """
    if value < 0:
        raise ValueError(f"varint_size requires non-negative value, got {value}")
    return max(1, (value.bit_length() + 6) // 7)


def header_size(columns: Iterable[Column]) -> int:
    """Calculate the encoded size of a header in bytes.

    Example:
        >>> header_size([Column.text("Column1"), Column.number("Column2")])
        19
    """
    return len(encode_schema(columns))


def record_size(columns: Iterable[Column], cells: Sequence[Any]) -> int:
    """Calculate the encoded size of one row in bytes.

    The row is validated exactly as TabulaWriter.write_record() would.

    Args:
        columns: Ordered columns
        cells: One cell per column

    Returns:
        Row size in bytes

    Raises:
        InvalidRecordLengthError: If len(cells) != number of columns
        InvalidCellTypeError: If a cell does not match its column
    """
    frozen = validate_columns(columns)
    if len(cells) != len(frozen):
        raise InvalidRecordLengthError(len(frozen), len(cells))

    return sum(len(encode_cell(column, value)) for column, value in zip(frozen, cells))


def fixed_record_size(columns: Iterable[Column]) -> int | None:
    """Return the row size if every column has a fixed width, else None.

    Example:
        >>> fixed_record_size([Column.number("x"), Column.number("y")])
        16
    """
    frozen = validate_columns(columns)
    if any(column.type is not ColumnType.NUMBER for column in frozen):
        return None
    return NUMBER_SIZE * len(frozen)
