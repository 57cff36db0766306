"""End-to-end integration tests."""

from __future__ import annotations

import io
import math
import struct

import pytest

from tabula import (
    Column,
    ColumnType,
    EndOfStream,
    InvalidCellTypeError,
    InvalidRecordLengthError,
    Number,
    TabulaReader,
    TabulaWriter,
    Text,
    cell,
    header_size,
    record_size,
)


class TestEndToEndWorkflow:
    """Test complete write-then-read workflows."""

    def test_two_column_scenario(self) -> None:
        """Test the reference Column1/Column2 file byte for byte."""
        columns = [
            Column(name="Column1", type=ColumnType.TEXT),
            Column(name="Column2", type=ColumnType.NUMBER),
        ]
        buffer = io.BytesIO()

        # 1. Write
        writer = TabulaWriter(columns, buffer)
        assert len(writer.columns()) == 2
        writer.write_record([Text("hello, world!"), Number(1.0)])

        # 2. Check the wire format
        expected = (
            b"\x02"
            + b"\x01\x07Column1"
            + b"\x02\x07Column2"
            + b"\x0dhello, world!"
            + struct.pack("<d", 1.0)
        )
        assert buffer.getvalue() == expected

        # 3. Read back
        buffer.seek(0)
        reader = TabulaReader(buffer)
        assert len(reader.columns()) == 2
        assert reader.columns() == columns
        assert reader.read_record() == [Text("hello, world!"), Number(1.0)]
        with pytest.raises(EndOfStream):
            reader.read_record()

    def test_presized_buffer(self) -> None:
        """Test writing into a zero-filled pre-allocated buffer."""
        columns = [Column.text("Column1"), Column.number("Column2")]
        buffer = io.BytesIO(bytearray(10000))
        buffer.seek(5000)

        writer = TabulaWriter(columns, buffer)
        writer.write_record([Text("hello, world!"), Number(1.0)])
        end = buffer.tell()

        buffer.seek(0)
        reader = TabulaReader(io.BytesIO(buffer.getvalue()[:end]))
        assert reader.read_record() == [Text("hello, world!"), Number(1.0)]
        assert end == header_size(columns) + record_size(columns, [Text("hello, world!"), Number(1.0)])

    def test_empty_schema(self) -> None:
        """Test zero columns: header is varint(0) and there are no rows."""
        buffer = io.BytesIO()
        TabulaWriter([], buffer)
        assert buffer.getvalue() == b"\x00"

        buffer.seek(0)
        reader = TabulaReader(buffer)
        assert reader.columns() == []
        with pytest.raises(EndOfStream):
            reader.read_record()

    def test_wide_mixed_table(self, tmp_path) -> None:
        """Test many columns and rows through a real file."""
        columns = [
            Column.text(f"t{i}") if i % 2 == 0 else Column.number(f"n{i}") for i in range(200)
        ]
        rows = [
            [cell(f"r{r}c{i}" * (i % 5)) if i % 2 == 0 else cell(r * i / 7) for i in range(200)]
            for r in range(50)
        ]

        path = tmp_path / "wide.tab"
        with path.open("wb") as f:
            writer = TabulaWriter(columns, f)
            writer.write_records(rows)
            writer.flush()

        with path.open("rb") as f:
            reader = TabulaReader(f)
            assert reader.columns() == columns
            assert list(reader) == rows

        # 200 columns need a 2-byte count
        assert path.read_bytes()[:2] == b"\xc8\x01"

    def test_special_values(self) -> None:
        """Test unicode text and extreme doubles."""
        columns = [Column.text("label"), Column.number("value")]
        rows = [
            [Text(""), Number(0.0)],
            [Text("naïve ☃ 𝄞"), Number(-0.0)],
            [Text("x" * 1000), Number(math.inf)],
            [Text("\x00\n\t"), Number(5e-324)],
        ]
        buffer = io.BytesIO()
        TabulaWriter(columns, buffer).write_records(rows)

        buffer.seek(0)
        decoded = list(TabulaReader(buffer))
        assert decoded == rows
        assert math.copysign(1.0, decoded[1][1].value) == -1.0

    def test_errors_do_not_corrupt_valid_rows(self) -> None:
        """Test rejected rows before any bytes are written leave the file readable."""
        columns = [Column.text("a"), Column.number("b")]
        buffer = io.BytesIO()
        writer = TabulaWriter(columns, buffer)

        writer.write_record([Text("ok"), Number(1.0)])
        with pytest.raises(InvalidRecordLengthError):
            writer.write_record([Text("short")])
        with pytest.raises(InvalidCellTypeError):
            writer.write_record([Number(2.0), Number(2.0)])
        writer.write_record([Text("also ok"), Number(3.0)])

        buffer.seek(0)
        assert list(TabulaReader(buffer)) == [
            [Text("ok"), Number(1.0)],
            [Text("also ok"), Number(3.0)],
        ]
