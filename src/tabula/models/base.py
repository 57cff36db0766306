"""Base model class and tabula-specific Pydantic configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TabulaModel(BaseModel):
    """Base class for tabula value objects.

    Columns and cells are immutable once built: a schema is never altered after
    a writer or reader takes ownership of it, and a cell only exists as an
    argument or return value.
    """

    model_config = ConfigDict(
        # No implicit "1" -> 1.0 style coercions between cell kinds
        strict=True,
        frozen=True,
        extra="forbid",
    )
