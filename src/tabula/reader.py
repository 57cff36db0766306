"""Row reader.

TabulaReader parses the header when constructed and decodes one row per
read_record() call, using only what is in the byte stream.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator

from .codec.cells import decode_cell
from .codec.schema import decode_schema
from .codec.stream import StreamReader
from .config import TabulaConfig
from .exceptions import EndOfStream, MalformedStreamError
from .models.cells import Cell
from .models.column import Column

logger = logging.getLogger(__name__)


class TabulaReader:
    """Deserializes rows from a tabula stream.

    A decode failure inside a row leaves the reader at an undefined position;
    do not keep reading from it afterwards.

    Example:
        >>> reader = TabulaReader(io.BytesIO(data))
        >>> [column.name for column in reader.columns()]
        ['Column1', 'Column2']
        >>> for row in reader:
        ...     print(row)
        [Text(value='hello, world!'), Number(value=1.0)]
    """

    def __init__(self, source: BinaryIO, config: TabulaConfig | None = None) -> None:
        """Parse the header.

        Args:
            source: Binary readable positioned at the start of the header
            config: Optional decode limits

        Raises:
            MalformedStreamError: If the header is truncated, holds invalid
                UTF-8, or exceeds the configured limits
            InvalidColumnTypeError: If a column has an unknown type tag
        """
        self._config = config
        self._reader = StreamReader(source)
        self._columns = decode_schema(self._reader, config)
        self._rows_read = 0
        logger.debug(
            "Parsed header: %d columns, %d bytes", len(self._columns), self._reader.position()
        )

    def columns(self) -> list[Column]:
        """Return the parsed schema.

        Returns:
            Columns in header order
        """
        return list(self._columns)

    @property
    def rows_read(self) -> int:
        """Number of rows fully decoded."""
        return self._rows_read

    def read_record(self) -> list[Cell]:
        """Decode the next row.

        Returns:
            One cell per column, in column order

        Raises:
            EndOfStream: If the stream ends exactly at a row boundary
            MalformedStreamError: If the stream ends or is invalid mid-row
        """
        if self._reader.at_end():
            raise EndOfStream(f"End of stream after {self._rows_read} rows")

        if not self._columns:
            raise MalformedStreamError(
                f"Unexpected data at byte {self._reader.position()}: schema has no columns"
            )

        row = [decode_cell(self._reader, column, self._config) for column in self._columns]
        self._rows_read += 1
        return row

    def __iter__(self) -> Iterator[list[Cell]]:
        """Yield rows until the end of the stream."""
        while True:
            try:
                yield self.read_record()
            except EndOfStream:
                return
