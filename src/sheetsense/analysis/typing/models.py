"""Type inference models."""

from __future__ import annotations

from pydantic import BaseModel

from sheetsense.core.models.base import ColumnKind


class ColumnProfile(BaseModel):
    """Numeric/Text classification of one column from a sampled prefix.

    Derived per request, never persisted.
    """

    name: str
    kind: ColumnKind
    numeric_ratio: float  # numeric values / sampled values, 0 when nothing sampled
    sampled: int

    @property
    def is_numeric(self) -> bool:
        return self.kind is ColumnKind.NUMERIC
