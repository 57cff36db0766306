"""Unit tests for column and header encoding."""

from __future__ import annotations

import io

import pytest

from tabula import (
    Column,
    ColumnType,
    InvalidColumnTypeError,
    MalformedStreamError,
    SchemaError,
    TabulaConfig,
)
from tabula.codec.schema import decode_column, decode_schema, encode_column, encode_schema
from tabula.codec.stream import StreamReader


def _reader(data: bytes) -> StreamReader:
    return StreamReader(io.BytesIO(data))


class TestColumnCodec:
    """Test single column encoding."""

    def test_encode_text_column(self) -> None:
        """Test tag 0x01 then name."""
        assert encode_column(Column.text("Column1")) == b"\x01\x07Column1"

    def test_encode_number_column(self) -> None:
        """Test tag 0x02 then name."""
        assert encode_column(Column.number("Column2")) == b"\x02\x07Column2"

    def test_encode_empty_name(self) -> None:
        """Test empty names are legal."""
        assert encode_column(Column.text("")) == b"\x01\x00"

    def test_decode(self) -> None:
        """Test decoding a column."""
        column = decode_column(_reader(b"\x02\x05price"))
        assert column == Column(name="price", type=ColumnType.NUMBER)

    @pytest.mark.parametrize("tag", [0x00, 0x03, 0x7F, 0xFF])
    def test_decode_invalid_tag(self, tag: int) -> None:
        """Test unknown type tags."""
        with pytest.raises(InvalidColumnTypeError) as exc_info:
            decode_column(_reader(bytes([tag]) + b"\x01a"))
        assert exc_info.value.tag == tag

    def test_decode_truncated_name(self) -> None:
        """Test header cut inside a column name."""
        with pytest.raises(MalformedStreamError):
            decode_column(_reader(b"\x01\x07Col"))

    def test_decode_invalid_utf8_name(self) -> None:
        """Test column names must be UTF-8."""
        with pytest.raises(MalformedStreamError, match="UTF-8"):
            decode_column(_reader(b"\x01\x01\xff"))

    def test_decode_name_limit(self) -> None:
        """Test max_string_bytes applies to names."""
        with pytest.raises(MalformedStreamError, match="exceeds limit"):
            decode_column(_reader(b"\x01\x07Column1"), TabulaConfig(max_string_bytes=3))


class TestSchemaCodec:
    """Test header encoding."""

    def test_encode(self, sample_columns: list[Column], sample_header: bytes) -> None:
        """Test count prefix then columns in order."""
        assert encode_schema(sample_columns) == sample_header

    def test_encode_empty(self) -> None:
        """Test zero columns is a single zero byte."""
        assert encode_schema([]) == b"\x00"

    def test_encode_rejects_non_columns(self) -> None:
        """Test column list validation."""
        with pytest.raises(SchemaError, match="Column 1"):
            encode_schema([Column.text("a"), ("b", ColumnType.TEXT)])  # type: ignore[list-item]

    def test_decode(self, sample_columns: list[Column], sample_header: bytes) -> None:
        """Test decoding preserves order, names and types."""
        reader = _reader(sample_header + b"rest")
        assert list(decode_schema(reader)) == sample_columns
        assert reader.position() == len(sample_header)

    def test_decode_empty(self) -> None:
        """Test zero columns."""
        assert decode_schema(_reader(b"\x00")) == ()

    def test_decode_missing_columns(self) -> None:
        """Test count larger than available columns."""
        with pytest.raises(MalformedStreamError, match="end of stream"):
            decode_schema(_reader(b"\x03\x01\x01a\x02\x01b"))

    def test_decode_empty_stream(self) -> None:
        """Test no header at all."""
        with pytest.raises(MalformedStreamError):
            decode_schema(_reader(b""))

    def test_decode_column_limit(self) -> None:
        """Test max_columns."""
        with pytest.raises(MalformedStreamError, match="Column count 3 exceeds limit of 2"):
            decode_schema(_reader(b"\x03"), TabulaConfig(max_columns=2))

    def test_duplicate_names_preserved(self) -> None:
        """Test the header does not deduplicate names."""
        columns = [Column.text("x"), Column.number("x")]
        assert list(decode_schema(_reader(encode_schema(columns)))) == columns
