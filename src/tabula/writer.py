"""Row writer.

TabulaWriter owns one output stream: it writes the header once when
constructed and appends one row per write_record() call.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Iterable, Sequence

from .codec.cells import encode_cell
from .codec.schema import encode_schema, validate_columns
from .exceptions import EncodeError, InvalidRecordLengthError, WriteFailedError
from .models.column import Column

logger = logging.getLogger(__name__)


class TabulaWriter:
    """Serializes rows against a fixed schema.

    The sink is rewound to position 0 before the header is written, so a
    writer can be created over a buffer that was pre-sized or written before.
    One writer owns its sink exclusively; a second writer over the same sink
    would overwrite the header.

    After a row-level failure that left part of a row in the sink, the stream
    is untrustworthy: the writer refuses further rows.

    Example:
        >>> sink = io.BytesIO()
        >>> writer = TabulaWriter([Column.text("name"), Column.number("score")], sink)
        >>> writer.write_record([Text("alice"), Number(9.5)])
        >>> writer.rows_written
        1
    """

    def __init__(self, columns: Iterable[Column], sink: BinaryIO) -> None:
        """Rewind the sink and write the header.

        Args:
            columns: Ordered columns (may be empty)
            sink: Binary writable that supports seek()

        Raises:
            SchemaError: If an entry of columns is not a Column
            WriteFailedError: If the sink cannot seek or rejects the write
        """
        self._columns = validate_columns(columns)
        self._sink = sink
        self._rows_written = 0
        self._failed = False

        try:
            self._sink.seek(0)
        except (AttributeError, OSError, ValueError) as e:
            raise WriteFailedError(f"Failed to seek sink to start: {e}") from e

        header = encode_schema(self._columns)
        self._write(header)
        logger.debug("Wrote header: %d columns, %d bytes", len(self._columns), len(header))

    def columns(self) -> list[Column]:
        """Return the schema as constructed.

        Returns:
            Columns in order
        """
        return list(self._columns)

    @property
    def rows_written(self) -> int:
        """Number of rows fully written."""
        return self._rows_written

    def _write(self, data: bytes) -> None:
        try:
            written = self._sink.write(data)
        except (OSError, ValueError) as e:
            raise WriteFailedError(f"Failed to write {len(data)} bytes: {e}") from e

        # Raw streams may accept fewer bytes than offered
        if written is not None and written != len(data):
            raise WriteFailedError(f"Short write: {written} of {len(data)} bytes")

    def write_record(self, cells: Sequence[Any]) -> None:
        """Append one row.

        Cells are encoded and written one at a time in column order. If a cell
        does not match its column's type, the cells before it stay in the sink
        and the stream is left mid-row.

        Args:
            cells: One Text/Number cell per column

        Raises:
            InvalidRecordLengthError: If len(cells) != number of columns;
                nothing is written
            InvalidCellTypeError: If a cell's variant does not match its column
            WriteFailedError: If the sink rejects a write, or a previous row
                was left partially written
        """
        if self._failed:
            raise WriteFailedError("Writer holds a partially written row; stream is untrustworthy")

        if len(cells) != len(self._columns):
            raise InvalidRecordLengthError(len(self._columns), len(cells))

        for index, (column, value) in enumerate(zip(self._columns, cells)):
            try:
                data = encode_cell(column, value)
            except EncodeError:
                if index > 0:
                    self._poison(index, column)
                raise

            try:
                self._write(data)
            except WriteFailedError:
                self._poison(index, column)
                raise

        self._rows_written += 1

    def _poison(self, index: int, column: Column) -> None:
        self._failed = True
        logger.warning(
            "Row %d aborted at column %d (%s); stream left mid-row",
            self._rows_written,
            index,
            column.name,
        )

    def write_records(self, rows: Iterable[Sequence[Any]]) -> int:
        """Append rows in order.

        Args:
            rows: Iterable of rows

        Returns:
            Number of rows written by this call

        Raises:
            Same as write_record(); rows before the failing one stay written
        """
        count = 0
        for row in rows:
            self.write_record(row)
            count += 1
        return count

    def flush(self) -> None:
        """Flush the sink if it buffers writes.

        Raises:
            WriteFailedError: If flushing fails
        """
        flush = getattr(self._sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as e:
            raise WriteFailedError(f"Failed to flush sink: {e}") from e
