"""Pydantic models for tabula columns and cells."""

from __future__ import annotations

from .base import TabulaModel
from .cells import Cell, Number, Text, cell
from .column import Column, ColumnType

__all__ = [
    "TabulaModel",
    "Cell",
    "Text",
    "Number",
    "cell",
    "Column",
    "ColumnType",
]
