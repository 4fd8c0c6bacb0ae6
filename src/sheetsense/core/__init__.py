"""Core module - configuration, logging, table boundary and shared models."""

from sheetsense.core.config import Settings, get_settings
from sheetsense.core.exceptions import SheetsenseError, SourceLoadError, TableStructureError
from sheetsense.core.models.base import (
    AnalysisIssue,
    CellKind,
    ColumnKind,
    CorrelationStrength,
    Result,
    SentimentLabel,
)
from sheetsense.core.table import ParsedTable, TablePage, paginate, search_rows

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "SheetsenseError",
    "SourceLoadError",
    "TableStructureError",
    # Models - enums
    "AnalysisIssue",
    "CellKind",
    "ColumnKind",
    "CorrelationStrength",
    "SentimentLabel",
    # Models - base data structures
    "Result",
    # Table
    "ParsedTable",
    "TablePage",
    "paginate",
    "search_rows",
]
