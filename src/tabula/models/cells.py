"""Cell variants.

A cell is one row's value for one column, tagged by the kind of value it holds.
"""

from __future__ import annotations

from typing import Any, Union

from .base import TabulaModel


class Text(TabulaModel):
    """A UTF-8 string cell.

    Example:
        >>> Text("hello, world!")
        Text(value='hello, world!')
    """

    value: str

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)


class Number(TabulaModel):
    """A 64-bit IEEE-754 floating point cell.

    Example:
        >>> Number(1.0)
        Number(value=1.0)
    """

    value: float

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)


Cell = Union[Text, Number]


def cell(value: Any) -> Cell:
    """Build the cell variant matching a plain Python value.

    Args:
        value: A str (Text) or an int/float (Number)

    Returns:
        Text or Number cell

    Raises:
        TypeError: If value is a bool or of any other type

    Example:
        >>> [cell("a"), cell(2)]
        [Text(value='a'), Number(value=2.0)]
    """
    if isinstance(value, (Text, Number)):
        return value
    if isinstance(value, str):
        return Text(value)
    # bool is an int subclass but never a number cell
    if isinstance(value, bool):
        raise TypeError("bool values have no cell type")
    if isinstance(value, (int, float)):
        return Number(float(value))
    raise TypeError(f"No cell type for {type(value).__name__}")
