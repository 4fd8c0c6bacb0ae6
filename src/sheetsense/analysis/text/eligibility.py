"""Text column eligibility.

A column qualifies for word frequency or sentiment analysis when, among its
sampled non-blank values, more than half are non-numeric and longer than a
minimum length.
"""

from __future__ import annotations

from sheetsense.analysis.typing.inference import sample_values
from sheetsense.core.coercion import is_numeric, to_text
from sheetsense.core.table import ParsedTable

DEFAULT_SAMPLE_SIZE = 10
WORD_CLOUD_MIN_LENGTH = 2
SENTIMENT_MIN_LENGTH = 5


def is_text_column(
    table: ParsedTable,
    column: str,
    min_length: int,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> bool:
    sample = sample_values(table, column, sample_size)
    if not sample:
        return False
    long_text = sum(
        1 for value in sample if not is_numeric(value) and len(to_text(value)) > min_length
    )
    return long_text > len(sample) * 0.5


def find_text_columns(
    table: ParsedTable,
    min_length: int = WORD_CLOUD_MIN_LENGTH,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> list[str]:
    """Columns eligible for text analytics, in header order."""
    return [
        header
        for header in table.headers
        if is_text_column(table, header, min_length, sample_size)
    ]
