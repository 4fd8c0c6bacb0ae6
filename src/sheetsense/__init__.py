"""Sheetsense - in-memory analytics for tabular data.

Loads a CSV or JSON table and answers the usual first questions about it:
which columns are numbers, what they look like, how they move together,
how measures break down by category, and what the free text says.
"""

from sheetsense.analysis.aggregation import compute_chart_series
from sheetsense.analysis.correlation import compute_correlation_matrix, compute_scatter_regression
from sheetsense.analysis.statistics import compute_descriptive_statistics
from sheetsense.analysis.text import compute_sentiment_breakdown, compute_word_frequency
from sheetsense.analysis.typing import get_column_profiles
from sheetsense.core import AnalysisIssue, ParsedTable, Result
from sheetsense.sources import load_csv_table, load_json_table, load_table

__version__ = "0.1.0"

__all__ = [
    # Table and results
    "ParsedTable",
    "Result",
    "AnalysisIssue",
    # Loaders
    "load_csv_table",
    "load_json_table",
    "load_table",
    # Analysis
    "get_column_profiles",
    "compute_descriptive_statistics",
    "compute_correlation_matrix",
    "compute_scatter_regression",
    "compute_chart_series",
    "compute_word_frequency",
    "compute_sentiment_breakdown",
]
