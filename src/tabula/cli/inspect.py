"""File inspection CLI command."""

from __future__ import annotations

import logging
from pathlib import Path

from ..models.cells import Cell, Text
from ..models.column import Column
from ..reader import TabulaReader
from ..utils.sizing import header_size

logger = logging.getLogger(__name__)


def inspect_file(file_path: Path, limit: int = 10) -> int:
    """Print the schema, the first rows, and the row count of a tabula file.

    Args:
        file_path: Path to a tabula file
        limit: Maximum number of rows to print

    Returns:
        Total number of rows in the file

    Raises:
        DecodeError: If the file is not a valid tabula stream
    """
    with file_path.open("rb") as f:
        reader = TabulaReader(f)
        columns = reader.columns()

        print("|" * 7, "tabula: Typed Row Stream Format", "|" * 7)
        print(f"{file_path}: {len(columns)} column{'s' if len(columns) != 1 else ''}")
        print(f"Header size: {header_size(columns)} bytes")
        print()

        print(f"{'-' * 27} Schema {'-' * 27}")
        for i, column in enumerate(columns, 1):
            print_column(i, column)
        print()

        print(f"{'-' * 28} Rows {'-' * 28}")
        total = 0
        for row in reader:
            if total < limit:
                print(f"{total + 1}. {format_row(row)}")
            total += 1
        if total > limit:
            print(f"... {total - limit} more")
        print()

    logger.debug("Inspected %s: %d rows", file_path, total)
    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Rows: {total}")
    print(f"File size: {file_path.stat().st_size} bytes")
    print()
    return total


def print_column(index: int, column: Column) -> None:
    """Print one column line with dot alignment."""
    field_desc = f"{index}. {column.name}"
    type_name = column.type.name.lower()
    dots = "." * max(1, 54 - len(field_desc) - len(type_name))
    print(f"        {field_desc}{dots}{type_name}")


def format_row(row: list[Cell]) -> str:
    """Render a row as a comma-separated line."""
    return ", ".join(
        repr(value.value) if isinstance(value, Text) else f"{value.value:g}" for value in row
    )
