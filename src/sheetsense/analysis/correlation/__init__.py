"""Correlation analysis module.

Analyzes linear relationships between numeric columns:
- Correlation matrix (Pearson r, non-numeric cells counted as 0)
- Scatter regression for one pair (non-numeric rows excluded)
- Strength classification (strong / moderate / weak / none)

Main entry points:
- compute_correlation_matrix
- compute_scatter_regression
"""

from sheetsense.analysis.correlation.algorithms import classify_strength, pearson_r
from sheetsense.analysis.correlation.models import (
    CorrelationMatrix,
    CorrelationPair,
    ScatterPoint,
    ScatterRegression,
)
from sheetsense.analysis.correlation.processor import (
    compute_correlation_matrix,
    compute_scatter_regression,
)

__all__ = [
    # Processors (main entry points)
    "compute_correlation_matrix",
    "compute_scatter_regression",
    # Algorithms
    "classify_strength",
    "pearson_r",
    # Pydantic Models
    "CorrelationMatrix",
    "CorrelationPair",
    "ScatterPoint",
    "ScatterRegression",
]
