"""Length-prefixed strings and fixed-width numbers.

Strings are framed as ``varint(byte_length)`` followed by UTF-8 bytes.
Numbers are 8-byte IEEE-754 doubles in little-endian byte order; a double's
bit pattern has no compact small-value case, so it is not varint framed.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError, MalformedStreamError
from .stream import StreamReader
from .varint import decode_varint, encode_varint

NUMBER_FORMAT = struct.Struct("<d")
NUMBER_SIZE = NUMBER_FORMAT.size


def encode_string(value: str) -> bytes:
    """Encode a string as varint length + UTF-8 bytes.

    Args:
        value: String to encode

    Returns:
        Length-prefixed UTF-8 bytes

    Raises:
        EncodeError: If value is not a str or cannot be encoded as UTF-8

    Example:
        >>> encode_string("Column1")
        b'\\x07Column1'
    """
    if not isinstance(value, str):
        raise EncodeError(f"expected str, got {type(value).__name__}")

    try:
        data = value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodeError(f"String is not representable as UTF-8: {e}") from e

    return encode_varint(len(data)) + data


def decode_string(reader: StreamReader, max_bytes: int | None = None) -> str:
    """Decode a length-prefixed UTF-8 string.

    Args:
        reader: StreamReader positioned at the length prefix
        max_bytes: Largest accepted encoded length, or None for no limit

    Returns:
        Decoded string

    Raises:
        MalformedStreamError: If the data is truncated, too long, or not valid UTF-8
    """
    length = decode_varint(reader)
    if max_bytes is not None and length > max_bytes:
        raise MalformedStreamError(f"String length {length} exceeds limit of {max_bytes} bytes")

    raw_bytes = reader.read_exact(length)
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedStreamError(f"Invalid UTF-8 encoding: {e}") from e


def encode_number(value: float) -> bytes:
    """Encode a number as an 8-byte little-endian IEEE-754 double.

    Args:
        value: Float (ints are converted)

    Returns:
        8 bytes

    Raises:
        EncodeError: If value is not a real number

    Example:
        >>> encode_number(1.0)
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\xf0?'
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EncodeError(f"expected float, got {type(value).__name__}")

    try:
        return NUMBER_FORMAT.pack(value)
    except (OverflowError, struct.error) as e:
        raise EncodeError(f"Number {value!r} is not representable as a double: {e}") from e


def decode_number(reader: StreamReader) -> float:
    """Decode an 8-byte little-endian IEEE-754 double.

    Args:
        reader: StreamReader positioned at the first byte of the number

    Returns:
        Decoded float

    Raises:
        MalformedStreamError: If fewer than 8 bytes remain
    """
    value: float = NUMBER_FORMAT.unpack(reader.read_exact(NUMBER_SIZE))[0]
    return value
