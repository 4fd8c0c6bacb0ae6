"""Core models: ONLY truly shared base types.

Domain models live in their respective packages:
- analysis/typing/models.py      -> Column profiles
- analysis/statistics/models.py  -> Numeric and text summaries
- analysis/correlation/models.py -> Correlation matrix and scatter regression
- analysis/aggregation/models.py -> Chart series
- analysis/text/models.py        -> Word frequencies and sentiment
"""

from sheetsense.core.models.base import (
    AnalysisIssue,
    CellKind,
    ColumnKind,
    CorrelationStrength,
    Result,
    SentimentLabel,
)

__all__ = [
    "AnalysisIssue",
    "CellKind",
    "ColumnKind",
    "CorrelationStrength",
    "Result",
    "SentimentLabel",
]
