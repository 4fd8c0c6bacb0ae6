"""Correlation analysis models.

- CorrelationMatrix: Pairwise Pearson r over numeric columns
- CorrelationPair: One upper-triangle entry with its strength label
- ScatterPoint / ScatterRegression: Single-pair scatter data and fit
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from sheetsense.analysis.correlation.algorithms.numeric import classify_strength
from sheetsense.core.models.base import CorrelationStrength


class CorrelationPair(BaseModel):
    """Correlation between two distinct columns."""

    column1: str
    column2: str
    r: float
    strength: CorrelationStrength


class CorrelationMatrix(BaseModel):
    """Square, symmetric correlation matrix.

    ``values[a][b]`` is Pearson r between columns ``a`` and ``b``. Every row
    contributes, with non-numeric cells counted as 0.
    """

    columns: list[str]
    values: dict[str, dict[str, float]] = Field(default_factory=dict)
    sample_size: int  # rows used for every pair

    def get(self, column1: str, column2: str) -> float:
        return self.values[column1][column2]

    def pairs(self) -> list[CorrelationPair]:
        """Upper-triangle pairs in column order."""
        result = []
        for i, col1 in enumerate(self.columns):
            for col2 in self.columns[i + 1 :]:
                r = self.values[col1][col2]
                result.append(
                    CorrelationPair(column1=col1, column2=col2, r=r, strength=classify_strength(r))
                )
        return result


class ScatterPoint(BaseModel):
    """A point of a scatter plot; ``row`` is the 1-based source row number."""

    x: float
    y: float
    row: int


class ScatterRegression(BaseModel):
    """Scatter data and linear fit for one column pair.

    Rows where either value is not numeric are excluded rather than counted
    as 0, unlike the correlation matrix.
    """

    x_column: str
    y_column: str
    points: list[ScatterPoint] = Field(default_factory=list)
    excluded_rows: int = 0
    r: float
    r_squared: float  # coefficient of determination for a single predictor
    strength: CorrelationStrength
    slope: float | None = None
    intercept: float | None = None
    p_value: float | None = None
