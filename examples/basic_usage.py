#!/usr/bin/env python3
"""Basic usage example for tabula.

This example demonstrates:
1. Defining a schema
2. Writing rows to a file
3. Reading the schema and rows back
4. Calculating encoded sizes
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from tabula import (
    Column,
    Number,
    TabulaReader,
    TabulaWriter,
    Text,
    header_size,
    record_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("tabula Basic Usage Example")
    print("=" * 60)
    print()

    # Define the schema
    print("1. Defining a schema...")
    columns = [
        Column.text("station"),
        Column.number("temperature_c"),
        Column.number("depth_m"),
    ]
    for column in columns:
        print(f"   {column.name}: {column.type.name.lower()}")
    print(f"   Header size: {header_size(columns)} bytes")
    print()

    rows = [
        [Text("north-buoy"), Number(12.4), Number(3.0)],
        [Text("harbour"), Number(14.1), Number(0.5)],
        [Text("reef-7"), Number(9.8), Number(22.0)],
    ]

    # Write
    print("2. Writing rows...")
    path = Path(tempfile.mkdtemp()) / "readings.tab"
    with path.open("wb") as f:
        writer = TabulaWriter(columns, f)
        for row in rows:
            writer.write_record(row)
            print(f"   {row[0].value}: {record_size(columns, row)} bytes")
    print(f"   Wrote {writer.rows_written} rows to {path} ({path.stat().st_size} bytes)")
    print()

    # Read
    print("3. Reading rows back...")
    with path.open("rb") as f:
        reader = TabulaReader(f)
        print(f"   Columns: {[column.name for column in reader.columns()]}")
        for row in reader:
            print(f"   {[value.value for value in row]}")
    print()

    print("=" * 60)
    print("Done")
    print("=" * 60)


if __name__ == "__main__":
    main()
