"""Whole-table helpers.

These wrap TabulaWriter and TabulaReader for the common case of writing or
reading a full table at once.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Iterable, Sequence

from .config import TabulaConfig
from .models.cells import Cell
from .models.column import Column
from .reader import TabulaReader
from .writer import TabulaWriter


def dump(columns: Iterable[Column], rows: Iterable[Sequence[Any]], sink: BinaryIO) -> int:
    """Write a header and rows to a seekable sink.

    Args:
        columns: Ordered columns
        rows: Rows matching the columns
        sink: Binary writable that supports seek()

    Returns:
        Number of rows written
    """
    writer = TabulaWriter(columns, sink)
    count = writer.write_records(rows)
    writer.flush()
    return count


def dumps(columns: Iterable[Column], rows: Iterable[Sequence[Any]]) -> bytes:
    """Encode a header and rows to bytes.

    Example:
        >>> dumps([Column.text("Column1")], [[Text("a")]])
        b'\\x01\\x01\\x07Column1\\x01a'
    """
    buffer = io.BytesIO()
    dump(columns, rows, buffer)
    return buffer.getvalue()


def load(
    source: BinaryIO, config: TabulaConfig | None = None
) -> tuple[list[Column], list[list[Cell]]]:
    """Read a header and every row from a source.

    Args:
        source: Binary readable positioned at the start of the header
        config: Optional decode limits

    Returns:
        Tuple of (columns, rows)
    """
    reader = TabulaReader(source, config=config)
    return reader.columns(), list(reader)


def loads(
    data: bytes, config: TabulaConfig | None = None
) -> tuple[list[Column], list[list[Cell]]]:
    """Decode a header and every row from bytes."""
    return load(io.BytesIO(data), config=config)
