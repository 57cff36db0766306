"""Utility functions for tabula.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import fixed_record_size, header_size, record_size, varint_size

__all__ = [
    "varint_size",
    "header_size",
    "record_size",
    "fixed_record_size",
]
