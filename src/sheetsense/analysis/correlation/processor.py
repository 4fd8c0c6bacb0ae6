"""Correlation analysis processor.

Two entry points with intentionally different missing-value policies:

- compute_correlation_matrix: every row contributes; cells that are not
  numeric are coerced to 0.
- compute_scatter_regression: rows with a non-numeric value on either axis
  are excluded before computing r.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from sheetsense.analysis.correlation.algorithms.numeric import (
    classify_strength,
    is_constant,
    linear_fit,
    pearson_p_value,
    pearson_r,
)
from sheetsense.analysis.correlation.models import (
    CorrelationMatrix,
    ScatterPoint,
    ScatterRegression,
)
from sheetsense.analysis.typing.inference import (
    infer_column_profiles,
    numeric_columns,
    profile_column,
)
from sheetsense.core.coercion import coerce_number, parse_number
from sheetsense.core.logging import get_logger
from sheetsense.core.models.base import AnalysisIssue, Result
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

DEFAULT_SAMPLE_SIZE = 20
DEFAULT_NUMERIC_THRESHOLD = 0.8
MIN_COLUMNS = 2
MIN_POINTS = 2


def compute_correlation_matrix(
    table: ParsedTable,
    columns: Sequence[str] | None = None,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
) -> Result[CorrelationMatrix]:
    """Compute Pearson r for every pair of columns, including each column with itself.

    Args:
        table: Parsed table
        columns: Columns to correlate; the inferred numeric columns when omitted.
            Explicit columns must also classify as Numeric.
        sample_size: Sample size used when classifying columns
        numeric_threshold: Threshold used when classifying columns

    Returns:
        Result containing CorrelationMatrix, or EMPTY_TABLE / INVALID_COLUMN_SELECTION /
        INSUFFICIENT_DATA
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)

    if columns is None:
        columns = numeric_columns(infer_column_profiles(table, sample_size, numeric_threshold))
    else:
        missing = [c for c in columns if not table.has_column(c)]
        if missing:
            return Result.fail(
                f"Columns not in table: {missing}",
                issue=AnalysisIssue.INVALID_COLUMN_SELECTION,
            )
        columns = list(dict.fromkeys(columns))
        not_numeric = [
            c
            for c in columns
            if not profile_column(table, c, sample_size, numeric_threshold).is_numeric
        ]
        if not_numeric:
            return Result.fail(
                f"Columns are not numeric: {not_numeric}",
                issue=AnalysisIssue.INVALID_COLUMN_SELECTION,
            )

    if len(columns) < MIN_COLUMNS:
        return Result.fail(
            f"Correlation needs at least {MIN_COLUMNS} numeric columns, got {len(columns)}",
            issue=AnalysisIssue.INSUFFICIENT_DATA,
        )

    series = {
        col: np.array([coerce_number(v) for v in table.column_values(col)], dtype=float)
        for col in columns
    }

    values: dict[str, dict[str, float]] = {col: {} for col in columns}
    for i, col1 in enumerate(columns):
        x = series[col1]
        values[col1][col1] = 0.0 if table.row_count < 2 or is_constant(x) else 1.0
        for col2 in columns[i + 1 :]:
            r = pearson_r(x, series[col2])
            values[col1][col2] = r
            values[col2][col1] = r

    logger.debug("correlation_matrix_computed", columns=len(columns), rows=table.row_count)
    return Result.ok(
        CorrelationMatrix(columns=list(columns), values=values, sample_size=table.row_count)
    )


def compute_scatter_regression(
    table: ParsedTable,
    x_column: str,
    y_column: str,
) -> Result[ScatterRegression]:
    """Scatter points, Pearson r and r-squared for one column pair.

    Args:
        table: Parsed table
        x_column: Predictor column
        y_column: Response column

    Returns:
        Result containing ScatterRegression, or EMPTY_TABLE / INVALID_COLUMN_SELECTION /
        INSUFFICIENT_DATA
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)

    for column in (x_column, y_column):
        if not table.has_column(column):
            return Result.fail(
                f"Column not in table: {column}",
                issue=AnalysisIssue.INVALID_COLUMN_SELECTION,
            )
    if x_column == y_column:
        return Result.fail(
            "Scatter regression needs two different columns",
            issue=AnalysisIssue.INVALID_COLUMN_SELECTION,
        )

    points: list[ScatterPoint] = []
    for row_number, row in enumerate(table.rows, start=1):
        x = parse_number(table.cell(row, x_column))
        y = parse_number(table.cell(row, y_column))
        if x is None or y is None:
            continue
        points.append(ScatterPoint(x=x, y=y, row=row_number))

    excluded = table.row_count - len(points)
    if len(points) < MIN_POINTS:
        return Result.fail(
            f"Scatter regression needs at least {MIN_POINTS} numeric rows, got {len(points)}",
            issue=AnalysisIssue.INSUFFICIENT_DATA,
        )

    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    r = pearson_r(xs, ys)
    fit = linear_fit(xs, ys)

    warnings = []
    if excluded:
        warnings.append(f"{excluded} rows excluded for non-numeric values")

    logger.debug(
        "scatter_regression_computed",
        x_column=x_column,
        y_column=y_column,
        points=len(points),
        excluded=excluded,
    )
    return Result.ok(
        ScatterRegression(
            x_column=x_column,
            y_column=y_column,
            points=points,
            excluded_rows=excluded,
            r=r,
            r_squared=r * r,
            strength=classify_strength(r),
            slope=fit.slope if fit else None,
            intercept=fit.intercept if fit else None,
            p_value=pearson_p_value(xs, ys),
        ),
        warnings,
    )
