"""Column type inference from sampled values.

Each column is classified Numeric or Text by testing a bounded prefix of its
non-blank values against the shared numeric test. This is an approximation
over a prefix, not an exhaustive scan: a column whose first values are numbers
but whose tail is text is still Numeric.

IMPORTANT: Classification is based ONLY on values, NOT column names.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from sheetsense.analysis.typing.models import ColumnProfile
from sheetsense.core.coercion import is_blank, is_numeric
from sheetsense.core.logging import get_logger
from sheetsense.core.models.base import AnalysisIssue, ColumnKind, Result
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

DEFAULT_SAMPLE_SIZE = 10
DEFAULT_NUMERIC_THRESHOLD = 0.7


def sample_values(table: ParsedTable, column: str, sample_size: int) -> list[object]:
    """First ``sample_size`` non-blank values of a column, in row order."""
    non_blank = (
        value for value in (table.cell(row, column) for row in table.rows) if not is_blank(value)
    )
    return list(islice(non_blank, max(sample_size, 0)))


def profile_column(
    table: ParsedTable,
    column: str,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
) -> ColumnProfile:
    """Classify a single column.

    The column is Numeric iff the numeric fraction of the sample is strictly
    greater than ``numeric_threshold``. An empty sample is Text.
    """
    sample = sample_values(table, column, sample_size)
    if not sample:
        return ColumnProfile(name=column, kind=ColumnKind.TEXT, numeric_ratio=0.0, sampled=0)

    numeric_count = sum(1 for value in sample if is_numeric(value))
    ratio = numeric_count / len(sample)
    is_numeric_column = numeric_count > len(sample) * numeric_threshold
    kind = ColumnKind.NUMERIC if is_numeric_column else ColumnKind.TEXT
    return ColumnProfile(name=column, kind=kind, numeric_ratio=ratio, sampled=len(sample))


def infer_column_profiles(
    table: ParsedTable,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
) -> list[ColumnProfile]:
    """Classify every column in header order."""
    return [
        profile_column(table, header, sample_size, numeric_threshold) for header in table.headers
    ]


def get_column_profiles(
    table: ParsedTable,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
) -> Result[list[ColumnProfile]]:
    """Profile all columns of a table.

    Args:
        table: Parsed table
        sample_size: Non-blank values sampled per column
        numeric_threshold: Numeric fraction a column must exceed to be Numeric

    Returns:
        Result containing one ColumnProfile per header, or EMPTY_TABLE
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)

    profiles = infer_column_profiles(table, sample_size, numeric_threshold)
    logger.debug(
        "column_profiles_inferred",
        columns=len(profiles),
        numeric=len(numeric_columns(profiles)),
        sample_size=sample_size,
        threshold=numeric_threshold,
    )
    return Result.ok(profiles)


def numeric_columns(profiles: Iterable[ColumnProfile]) -> list[str]:
    """Names of Numeric columns, in profile order."""
    return [p.name for p in profiles if p.kind is ColumnKind.NUMERIC]


def text_columns(profiles: Iterable[ColumnProfile]) -> list[str]:
    """Names of Text columns, in profile order."""
    return [p.name for p in profiles if p.kind is ColumnKind.TEXT]
