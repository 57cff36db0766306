"""Base-128 variable-length unsigned integers.

Each byte carries 7 value bits in its low bits; the high bit is set on every
byte except the last. Groups are ordered least significant first, the same
layout protocol buffers use. Column counts and string lengths are usually
small, so most varints take a single byte.
"""

from __future__ import annotations

from ..exceptions import MalformedStreamError
from .stream import StreamReader

# Values are bounded to unsigned 64 bits, so a varint is at most 10 bytes
MAX_VARINT_VALUE = (1 << 64) - 1
MAX_VARINT_BYTES = 10


def encode_varint(value: int) -> bytes:
    """Encode an unsigned integer as a varint.

    Args:
        value: Unsigned integer (0 to 2**64 - 1)

    Returns:
        Encoded bytes (1 to 10 bytes)

    Raises:
        ValueError: If value is negative or wider than 64 bits

    Example:
        >>> encode_varint(300)
        b'\\xac\\x02'
    """
    if value < 0:
        raise ValueError(f"encode_varint requires non-negative value, got {value}")
    if value > MAX_VARINT_VALUE:
        raise ValueError(f"Value {value} requires more than 64 bits")

    result = bytearray()
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)

    return bytes(result)


def decode_varint(reader: StreamReader) -> int:
    """Decode a varint from a stream.

    Args:
        reader: StreamReader positioned at the first varint byte

    Returns:
        Decoded unsigned integer

    Raises:
        MalformedStreamError: If the stream ends before the last byte, or the
            value overflows 64 bits
    """
    value = 0
    for index in range(MAX_VARINT_BYTES):
        byte = reader.read_byte()
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            if value > MAX_VARINT_VALUE:
                raise MalformedStreamError(f"Varint overflows 64 bits: {value}")
            return value

    raise MalformedStreamError(f"Varint longer than {MAX_VARINT_BYTES} bytes")
