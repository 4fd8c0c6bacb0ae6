"""Pure numeric correlation algorithms.

Computes Pearson correlation and least-squares fits on numpy arrays.
No table access - just math.
"""

from dataclasses import dataclass

import numpy as np
from scipy import stats

from sheetsense.core.models.base import CorrelationStrength


@dataclass
class LinearFit:
    """Least-squares line y = slope * x + intercept."""

    slope: float
    intercept: float


def classify_strength(r: float) -> CorrelationStrength:
    """Classify correlation strength by absolute value."""
    abs_r = abs(r)
    if abs_r >= 0.8:
        return CorrelationStrength.STRONG
    elif abs_r >= 0.5:
        return CorrelationStrength.MODERATE
    elif abs_r >= 0.3:
        return CorrelationStrength.WEAK
    return CorrelationStrength.NONE


def is_constant(values: np.ndarray) -> bool:
    """True when every value is identical (zero variance)."""
    return values.size == 0 or bool(np.all(values == values[0]))


def pearson_r(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson correlation from raw sums.

    r = (n*Sxy - Sx*Sy) / sqrt((n*Sxx - Sx^2) * (n*Syy - Sy^2))

    Returns 0 for fewer than 2 observations or when either series has zero
    variance. The result is clamped to [-1, 1].
    """
    n = len(x)
    if n < 2 or is_constant(x) or is_constant(y):
        return 0.0

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))
    sum_y2 = float(np.dot(y, y))

    numerator = n * sum_xy - sum_x * sum_y
    denominator_sq = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if denominator_sq <= 0 or not np.isfinite(denominator_sq):
        return 0.0

    r = numerator / float(np.sqrt(denominator_sq))
    return float(min(1.0, max(-1.0, r)))


def linear_fit(x: np.ndarray, y: np.ndarray) -> LinearFit | None:
    """Least-squares line through the points; None when x is constant."""
    if len(x) < 2 or is_constant(x):
        return None
    mean_x = float(x.mean())
    mean_y = float(y.mean())
    slope = float(np.dot(x - mean_x, y - mean_y) / np.dot(x - mean_x, x - mean_x))
    return LinearFit(slope=slope, intercept=mean_y - slope * mean_x)


def pearson_p_value(x: np.ndarray, y: np.ndarray) -> float | None:
    """Two-sided p-value for the Pearson r; None when undefined."""
    if len(x) < 3 or is_constant(x) or is_constant(y):
        return None
    _, p_value = stats.pearsonr(x, y)
    p = float(np.asarray(p_value).item())
    return p if np.isfinite(p) else None
