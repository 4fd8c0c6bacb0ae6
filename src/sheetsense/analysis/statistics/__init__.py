"""Descriptive statistics module.

Computes column-level statistics on a parsed table:
- Numeric stats (count, min, max, sum, mean, median, mode, population std)
- Text stats (count, distinct count, frequency, most frequent value)
"""

from sheetsense.analysis.statistics.models import NumericSummary, StatisticsResult, TextSummary
from sheetsense.analysis.statistics.profiler import (
    compute_descriptive_statistics,
    summarize_numeric,
    summarize_text,
)

__all__ = [
    # Main entry point
    "compute_descriptive_statistics",
    # Building blocks
    "summarize_numeric",
    "summarize_text",
    # Pydantic Models
    "NumericSummary",
    "TextSummary",
    "StatisticsResult",
]
