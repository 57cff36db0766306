"""Cell encoding, dispatched on column type.

    CELL(Text)   := VARINT(byte_len) UTF8_BYTES(byte_len)
    CELL(Number) := 8 bytes, IEEE-754 double, little-endian

A new column type needs an entry in both tables below.
"""

from __future__ import annotations

from typing import Any, Callable

from ..config import TabulaConfig
from ..exceptions import InvalidCellTypeError
from ..models.cells import Cell, Number, Text
from ..models.column import Column, ColumnType
from .primitives import decode_number, decode_string, encode_number, encode_string
from .stream import StreamReader


def _encode_text(value: Cell) -> bytes:
    return encode_string(value.value)  # type: ignore[arg-type]


def _encode_number(value: Cell) -> bytes:
    return encode_number(value.value)  # type: ignore[arg-type]


def _decode_text(reader: StreamReader, config: TabulaConfig | None) -> Cell:
    max_bytes = config.max_string_bytes if config is not None else None
    return Text(decode_string(reader, max_bytes=max_bytes))


def _decode_number(reader: StreamReader, config: TabulaConfig | None) -> Cell:
    return Number(decode_number(reader))


_ENCODERS: dict[ColumnType, Callable[[Cell], bytes]] = {
    ColumnType.TEXT: _encode_text,
    ColumnType.NUMBER: _encode_number,
}

_DECODERS: dict[ColumnType, Callable[[StreamReader, TabulaConfig | None], Cell]] = {
    ColumnType.TEXT: _decode_text,
    ColumnType.NUMBER: _decode_number,
}

assert set(_ENCODERS) == set(ColumnType) == set(_DECODERS), "cell codec table incomplete"


def encode_cell(column: Column, value: Any) -> bytes:
    """Encode one cell for the given column.

    Args:
        column: Column the cell belongs to
        value: Cell whose variant must match column.type

    Returns:
        Encoded cell bytes

    Raises:
        InvalidCellTypeError: If value is not the column's cell variant
        EncodeError: If the cell value cannot be encoded
    """
    expected = column.type.cell_class
    if type(value) is not expected:
        raise InvalidCellTypeError(column.name, expected.__name__, type(value).__name__)

    return _ENCODERS[column.type](value)


def decode_cell(
    reader: StreamReader, column: Column, config: TabulaConfig | None = None
) -> Cell:
    """Decode one cell for the given column.

    Args:
        reader: StreamReader positioned at the cell
        column: Column the cell belongs to
        config: Optional decode limits

    Returns:
        Text or Number cell

    Raises:
        MalformedStreamError: If the data is truncated or invalid
    """
    return _DECODERS[column.type](reader, config)
