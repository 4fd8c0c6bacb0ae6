"""Pure correlation algorithms.

These functions operate on numpy arrays and return plain values/dataclasses.
No table access, no Pydantic models - just math.
"""

from sheetsense.analysis.correlation.algorithms.numeric import (
    LinearFit,
    classify_strength,
    is_constant,
    linear_fit,
    pearson_p_value,
    pearson_r,
)

__all__ = [
    "LinearFit",
    "classify_strength",
    "is_constant",
    "linear_fit",
    "pearson_p_value",
    "pearson_r",
]
