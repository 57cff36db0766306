"""Byte-level reading from a binary source.

This module wraps any object with a ``read(n)`` method (files, sockets made
file-like, ``io.BytesIO``) and turns short reads into decode errors.
"""

from __future__ import annotations

from typing import BinaryIO

from ..exceptions import MalformedStreamError

# Large length prefixes are read incrementally instead of allocated up front
READ_CHUNK_SIZE = 64 * 1024


class StreamReader:
    """Reads bytes from a binary source one structure at a time.

    The reader keeps at most one byte of look-ahead so that the end of the
    source can be detected without consuming the next structure.

    Example:
        >>> reader = StreamReader(io.BytesIO(b"\\x07abc"))
        >>> reader.read_byte()
        7
        >>> reader.read_exact(3)
        b'abc'
        >>> reader.at_end()
        True
    """

    def __init__(self, source: BinaryIO) -> None:
        """Initialize a stream reader over the given source.

        Args:
            source: Binary readable positioned at the first byte to decode
        """
        self._source = source
        self._pending = b""
        self._position = 0

    def _read(self, num_bytes: int) -> bytes:
        """Read up to num_bytes, looping over short reads until EOF."""
        chunks = []
        remaining = num_bytes
        while remaining > 0:
            chunk = self._source.read(min(remaining, READ_CHUNK_SIZE))
            # Non-blocking raw streams return None when no data is available
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def at_end(self) -> bool:
        """Return True if the source holds no more bytes.

        Returns:
            True when the next read would hit end of stream
        """
        if not self._pending:
            self._pending = self._read(1)
        return not self._pending

    def read_byte(self) -> int:
        """Read a single byte.

        Returns:
            Byte value (0-255)

        Raises:
            MalformedStreamError: If the source is exhausted
        """
        return self.read_exact(1)[0]

    def read_exact(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the source

        Raises:
            MalformedStreamError: If fewer than num_bytes bytes remain
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        if num_bytes == 0:
            return b""

        data = self._pending
        self._pending = b""
        if len(data) < num_bytes:
            data += self._read(num_bytes - len(data))

        self._position += len(data)
        if len(data) < num_bytes:
            raise MalformedStreamError(
                f"Unexpected end of stream: need {num_bytes} bytes, got {len(data)}"
            )
        return data

    def position(self) -> int:
        """Return the number of bytes consumed so far.

        Returns:
            Bytes consumed, not counting look-ahead
        """
        return self._position
