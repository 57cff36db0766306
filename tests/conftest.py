"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tabula import Column, Number, Text


@pytest.fixture
def sample_columns() -> list[Column]:
    """Two-column schema: one Text, one Number."""
    return [Column.text("Column1"), Column.number("Column2")]


@pytest.fixture
def sample_row() -> list[Text | Number]:
    """Row matching sample_columns."""
    return [Text("hello, world!"), Number(1.0)]


@pytest.fixture
def sample_header() -> bytes:
    """Encoded header for sample_columns."""
    return b"\x02" + b"\x01\x07Column1" + b"\x02\x07Column2"


@pytest.fixture
def sample_row_bytes() -> bytes:
    """Encoded bytes for sample_row."""
    return b"\x0dhello, world!" + b"\x00\x00\x00\x00\x00\x00\xf0\x3f"
