"""Column and header encoding.

Wire layout:

    HEADER := VARINT(column_count) COLUMN*
    COLUMN := TYPE_TAG(1 byte) VARINT(name_len) UTF8_BYTES(name_len)
"""

from __future__ import annotations

from typing import Iterable

from ..config import TabulaConfig
from ..exceptions import InvalidColumnTypeError, MalformedStreamError, SchemaError
from ..models.column import Column, ColumnType
from .primitives import decode_string, encode_string
from .stream import StreamReader
from .varint import decode_varint, encode_varint


def encode_column(column: Column) -> bytes:
    """Encode a column descriptor as type tag + length-prefixed name.

    Args:
        column: Column to encode

    Returns:
        Encoded column bytes

    Example:
        >>> encode_column(Column.number("Column2"))
        b'\\x02\\x07Column2'
    """
    return bytes([column.type.value]) + encode_string(column.name)


def decode_column(reader: StreamReader, config: TabulaConfig | None = None) -> Column:
    """Decode a column descriptor.

    Args:
        reader: StreamReader positioned at the type tag
        config: Optional decode limits

    Returns:
        Decoded Column

    Raises:
        InvalidColumnTypeError: If the type tag is unknown
        MalformedStreamError: If the data is truncated or the name is invalid
    """
    tag = reader.read_byte()
    try:
        column_type = ColumnType(tag)
    except ValueError as e:
        raise InvalidColumnTypeError(tag) from e

    max_bytes = config.max_string_bytes if config is not None else None
    name = decode_string(reader, max_bytes=max_bytes)
    return Column(name=name, type=column_type)


def validate_columns(columns: Iterable[Column]) -> tuple[Column, ...]:
    """Freeze a column list, checking every entry is a Column.

    Args:
        columns: Ordered columns

    Returns:
        Columns as a tuple, in the same order

    Raises:
        SchemaError: If an entry is not a Column
    """
    frozen = tuple(columns)
    for index, column in enumerate(frozen):
        if not isinstance(column, Column):
            raise SchemaError(
                f"Column {index}: expected Column, got {type(column).__name__}"
            )
    return frozen


def encode_schema(columns: Iterable[Column]) -> bytes:
    """Encode a header: column count followed by each column in order.

    Args:
        columns: Ordered columns (may be empty)

    Returns:
        Encoded header bytes

    Raises:
        SchemaError: If an entry is not a Column
    """
    frozen = validate_columns(columns)

    result = bytearray(encode_varint(len(frozen)))
    for column in frozen:
        result.extend(encode_column(column))
    return bytes(result)


def decode_schema(reader: StreamReader, config: TabulaConfig | None = None) -> tuple[Column, ...]:
    """Decode a header.

    Args:
        reader: StreamReader positioned at the start of the stream
        config: Optional decode limits

    Returns:
        Columns in header order

    Raises:
        MalformedStreamError: If the stream ends before all columns are read,
            or the column count exceeds config.max_columns
        InvalidColumnTypeError: If a column has an unknown type tag
    """
    count = decode_varint(reader)
    if config is not None and config.max_columns is not None and count > config.max_columns:
        raise MalformedStreamError(
            f"Column count {count} exceeds limit of {config.max_columns}"
        )

    return tuple(decode_column(reader, config) for _ in range(count))
