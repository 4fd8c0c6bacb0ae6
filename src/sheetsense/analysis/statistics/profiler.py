"""Descriptive statistics profiler.

Computes per-column summaries, branching on the column kind from type
inference:
- Numeric: count, min, max, sum, mean, median, mode, population std
- Text: count, distinct count, frequency map, most frequent value

Ties for the most frequent value go to the value encountered first.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

import numpy as np

from sheetsense.analysis.statistics.models import NumericSummary, StatisticsResult, TextSummary
from sheetsense.analysis.typing.inference import infer_column_profiles
from sheetsense.analysis.typing.models import ColumnProfile
from sheetsense.core.coercion import is_blank, parse_number, to_text
from sheetsense.core.logging import get_logger
from sheetsense.core.models.base import AnalysisIssue, ColumnKind, Result
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

DEFAULT_SAMPLE_SIZE = 20
DEFAULT_NUMERIC_THRESHOLD = 0.7


def summarize_numeric(values: Sequence[float]) -> NumericSummary | None:
    """Summarize numeric values.

    Args:
        values: Numbers in row order (order matters for the mode tie-break)

    Returns:
        NumericSummary, or None when there are no values
    """
    if not values:
        return None

    arr = np.asarray(values, dtype=float)
    count = len(values)
    total = float(arr.sum())
    mean = total / count
    # Counter keeps insertion order, so most_common breaks ties by first occurrence
    mode = Counter(values).most_common(1)[0][0]

    return NumericSummary(
        count=count,
        min=float(arr.min()),
        max=float(arr.max()),
        sum=total,
        mean=mean,
        median=float(np.median(arr)),
        mode=float(mode),
        std=float(np.sqrt(np.mean((arr - mean) ** 2))),
    )


def summarize_text(values: Sequence[str]) -> TextSummary | None:
    """Summarize text values; None when there are no values."""
    if not values:
        return None

    frequency = Counter(values)
    return TextSummary(
        count=len(values),
        unique_count=len(frequency),
        mode_value=frequency.most_common(1)[0][0],
        frequency=dict(frequency),
    )


def compute_descriptive_statistics(
    table: ParsedTable,
    profiles: Sequence[ColumnProfile] | None = None,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
) -> Result[StatisticsResult]:
    """Compute descriptive statistics for every column.

    Args:
        table: Parsed table
        profiles: Column profiles to branch on; inferred when omitted
        sample_size: Sample size used when inferring profiles
        numeric_threshold: Threshold used when inferring profiles

    Returns:
        Result containing StatisticsResult, or EMPTY_TABLE
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)

    if profiles is None:
        profiles = infer_column_profiles(table, sample_size, numeric_threshold)

    result = StatisticsResult(total_rows=table.row_count, total_columns=table.column_count)
    warnings: list[str] = []

    for profile in profiles:
        if not table.has_column(profile.name):
            warnings.append(f"Profiled column not in table: {profile.name}")
            continue

        result.column_kinds[profile.name] = profile.kind
        values = [v for v in table.column_values(profile.name) if not is_blank(v)]

        if profile.kind is ColumnKind.NUMERIC:
            numbers = [n for n in (parse_number(v) for v in values) if n is not None]
            summary = summarize_numeric(numbers)
            if summary is not None:
                result.numeric[profile.name] = summary
        else:
            text_summary = summarize_text([to_text(v) for v in values])
            if text_summary is not None:
                result.text[profile.name] = text_summary

    logger.debug(
        "descriptive_statistics_computed",
        rows=table.row_count,
        numeric_columns=len(result.numeric),
        text_columns=len(result.text),
    )
    return Result.ok(result, warnings)
