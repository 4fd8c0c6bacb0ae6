"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (typing, statistics, correlation, aggregation, text).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# === Enums ===


class AnalysisIssue(str, Enum):
    """Why an analysis could not produce a result.

    Analysis functions report these through ``Result.fail`` instead of raising,
    so a presentation layer can show guidance.
    """

    INSUFFICIENT_DATA = "insufficient_data"  # e.g. fewer than 2 numeric columns
    INVALID_COLUMN_SELECTION = "invalid_column_selection"  # absent column, group == x
    EMPTY_TABLE = "empty_table"  # zero rows


class CellKind(str, Enum):
    """Tag of a single cell value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    NESTED = "nested"  # object/array content, serialized for display


class ColumnKind(str, Enum):
    """Column classification produced by type inference."""

    NUMERIC = "numeric"
    TEXT = "text"


class SentimentLabel(str, Enum):
    """Polarity of a lexicon sentiment score."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class CorrelationStrength(str, Enum):
    """Strength bucket for |r|."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    NONE = "none"


# === Result ===


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for structurally invalid input at the loading boundary.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    issue: AnalysisIssue | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(
        cls,
        error: str,
        issue: AnalysisIssue | None = None,
        warnings: list[str] | None = None,
    ) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error, issue=issue, warnings=warnings or [])

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self
