"""Binary codec for tabula.

This module provides the varint, string, number and header encodings shared by
TabulaWriter and TabulaReader.
"""

from __future__ import annotations

from .cells import decode_cell, encode_cell
from .primitives import decode_number, decode_string, encode_number, encode_string
from .schema import decode_column, decode_schema, encode_column, encode_schema
from .stream import StreamReader
from .varint import decode_varint, encode_varint

__all__ = [
    "StreamReader",
    "encode_varint",
    "decode_varint",
    "encode_string",
    "decode_string",
    "encode_number",
    "decode_number",
    "encode_column",
    "decode_column",
    "encode_schema",
    "decode_schema",
    "encode_cell",
    "decode_cell",
]
