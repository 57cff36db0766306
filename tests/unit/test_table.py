"""Unit tests for whole-table helpers."""

from __future__ import annotations

import io

import pytest

from tabula import (
    Column,
    InvalidCellTypeError,
    MalformedStreamError,
    Number,
    TabulaConfig,
    Text,
    dump,
    dumps,
    load,
    loads,
)


class TestTableHelpers:
    """Test dump/dumps/load/loads."""

    def test_dumps(
        self,
        sample_columns: list[Column],
        sample_row: list[Text | Number],
        sample_header: bytes,
        sample_row_bytes: bytes,
    ) -> None:
        """Test dumps produces header then rows."""
        assert dumps(sample_columns, [sample_row]) == sample_header + sample_row_bytes

    def test_loads(
        self,
        sample_columns: list[Column],
        sample_row: list[Text | Number],
        sample_header: bytes,
        sample_row_bytes: bytes,
    ) -> None:
        """Test loads returns columns and rows."""
        columns, rows = loads(sample_header + sample_row_bytes * 2)
        assert columns == sample_columns
        assert rows == [sample_row, sample_row]

    def test_dump_to_file(self, tmp_path, sample_columns: list[Column]) -> None:
        """Test writing to and reading from a real file."""
        path = tmp_path / "table.tab"
        rows = [[Text("a"), Number(1.5)], [Text("b"), Number(-2.0)]]
        with path.open("wb") as f:
            assert dump(sample_columns, rows, f) == 2
        with path.open("rb") as f:
            columns, decoded = load(f)
        assert columns == sample_columns
        assert decoded == rows

    def test_dump_propagates_errors(self, sample_columns: list[Column]) -> None:
        """Test row errors surface to the caller."""
        with pytest.raises(InvalidCellTypeError):
            dump(sample_columns, [[Number(1.0), Number(1.0)]], io.BytesIO())

    def test_loads_config(self, sample_columns: list[Column]) -> None:
        """Test config is passed to the reader."""
        data = dumps(sample_columns, [])
        with pytest.raises(MalformedStreamError, match="exceeds limit"):
            loads(data, config=TabulaConfig(max_columns=0))
