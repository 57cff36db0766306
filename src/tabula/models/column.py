"""Column descriptors and the column type enumeration."""

from __future__ import annotations

import enum

from .base import TabulaModel
from .cells import Number, Text


class ColumnType(enum.IntEnum):
    """Column data type, valued by its one-byte wire tag.

    Tags are part of the file format: once written, a tag must keep its
    meaning. 0x00 is never a valid tag.
    """

    TEXT = 0x01
    NUMBER = 0x02

    @property
    def cell_class(self) -> type[Text] | type[Number]:
        """Cell variant stored in columns of this type."""
        return _CELL_CLASSES[self]


_CELL_CLASSES: dict[ColumnType, type[Text] | type[Number]] = {
    ColumnType.TEXT: Text,
    ColumnType.NUMBER: Number,
}


class Column(TabulaModel):
    """A named, typed column.

    Attributes:
        name: Column name (any UTF-8 string, may be empty)
        type: Column data type

    Example:
        >>> Column(name="Column1", type=ColumnType.TEXT)
        Column(name='Column1', type=<ColumnType.TEXT: 1>)
    """

    name: str
    type: ColumnType

    @classmethod
    def text(cls, name: str) -> Column:
        """Create a Text column."""
        return cls(name=name, type=ColumnType.TEXT)

    @classmethod
    def number(cls, name: str) -> Column:
        """Create a Number column."""
        return cls(name=name, type=ColumnType.NUMBER)
