"""tabula: Typed Row Stream Format

A Python library for a compact, self-describing binary format for tabular
data: a header of named, typed columns followed by a stream of typed rows.

Key Features:
- Varint-framed header and strings, fixed 8-byte numbers
- Streaming writer and reader over any binary file object
- Pydantic-based column and cell models
- Pure Python implementation

Quick Start:
    >>> import io
    >>> from tabula import Column, Number, TabulaReader, TabulaWriter, Text
    >>>
    >>> sink = io.BytesIO()
    >>> writer = TabulaWriter([Column.text("Column1"), Column.number("Column2")], sink)
    >>> writer.write_record([Text("hello, world!"), Number(1.0)])
    >>>
    >>> sink.seek(0)
    >>> reader = TabulaReader(sink)
    >>> reader.read_record()
    [Text(value='hello, world!'), Number(value=1.0)]

Wire format:
    FILE   := VARINT(column_count) COLUMN* ROW*
    COLUMN := TYPE_TAG(1 byte) VARINT(name_len) UTF8_BYTES(name_len)
    ROW    := CELL*  (one per column, in column order)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import TabulaConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    EndOfStream,
    InvalidCellTypeError,
    InvalidColumnTypeError,
    InvalidRecordLengthError,
    MalformedStreamError,
    SchemaError,
    TabulaError,
    WriteFailedError,
)
from .models import Cell, Column, ColumnType, Number, Text, cell
from .reader import TabulaReader
from .table import dump, dumps, load, loads
from .utils import fixed_record_size, header_size, record_size, varint_size
from .writer import TabulaWriter

__all__ = [
    # Core API
    "TabulaWriter",
    "TabulaReader",
    "TabulaConfig",
    "dump",
    "dumps",
    "load",
    "loads",
    # Models
    "Column",
    "ColumnType",
    "Cell",
    "Text",
    "Number",
    "cell",
    # Exceptions
    "TabulaError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "InvalidRecordLengthError",
    "InvalidCellTypeError",
    "WriteFailedError",
    "MalformedStreamError",
    "InvalidColumnTypeError",
    "EndOfStream",
    # Sizing
    "varint_size",
    "header_size",
    "record_size",
    "fixed_record_size",
    # Version
    "__version__",
]
