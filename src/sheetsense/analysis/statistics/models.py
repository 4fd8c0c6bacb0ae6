"""Descriptive statistics models.

- NumericSummary: Statistics for numeric columns
- TextSummary: Statistics for text columns
- StatisticsResult: Result of descriptive statistics over a table
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from sheetsense.core.models.base import ColumnKind


class NumericSummary(BaseModel):
    """Statistics for a numeric column."""

    count: int
    min: float
    max: float
    sum: float
    mean: float
    median: float
    mode: float  # most frequent value, first-encountered wins ties
    std: float  # population standard deviation


class TextSummary(BaseModel):
    """Statistics for a text column."""

    count: int
    unique_count: int
    mode_value: str  # most frequent value, first-encountered wins ties
    frequency: dict[str, int] = Field(default_factory=dict)  # first-seen order


class StatisticsResult(BaseModel):
    """Descriptive statistics for a whole table.

    Columns with no usable values are absent from ``numeric`` and ``text`` but
    still listed in ``column_kinds``.
    """

    total_rows: int
    total_columns: int
    column_kinds: dict[str, ColumnKind] = Field(default_factory=dict)
    numeric: dict[str, NumericSummary] = Field(default_factory=dict)
    text: dict[str, TextSummary] = Field(default_factory=dict)
