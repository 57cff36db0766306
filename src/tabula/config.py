"""Configuration for tabula readers.

This module provides the configuration dataclass that bounds what a reader is
willing to allocate while decoding a stream it does not trust.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TabulaConfig:
    """Decode limits for a TabulaReader.

    Attributes:
        max_columns: Largest column count accepted in a header
            (default None = unlimited). A corrupted header can announce
            billions of columns; set this when reading untrusted files.

        max_string_bytes: Largest encoded length accepted for a column name or
            a Text cell, in bytes (default None = unlimited).

    Examples:
        ```python
        from tabula import TabulaConfig, TabulaReader

        config = TabulaConfig(max_columns=1024, max_string_bytes=1 << 20)
        with open("table.tab", "rb") as f:
            reader = TabulaReader(f, config=config)
        ```
    """

    max_columns: int | None = None
    max_string_bytes: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_columns is not None and self.max_columns < 0:
            raise ValueError(f"max_columns must be >= 0, got {self.max_columns}")

        if self.max_string_bytes is not None and self.max_string_bytes < 0:
            raise ValueError(f"max_string_bytes must be >= 0, got {self.max_string_bytes}")
