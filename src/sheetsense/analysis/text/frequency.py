"""Word frequency ranking."""

from __future__ import annotations

from collections import Counter

from sheetsense.analysis.text.lexicon import Lexicon, load_lexicon
from sheetsense.analysis.text.models import WordCount, WordFrequencyTable
from sheetsense.analysis.text.tokenizer import tokenize
from sheetsense.core.coercion import is_blank
from sheetsense.core.logging import get_logger
from sheetsense.core.models.base import AnalysisIssue, Result
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

DEFAULT_TOP_N = 100


def compute_word_frequency(
    table: ParsedTable,
    column: str,
    top_n: int = DEFAULT_TOP_N,
    lexicon: Lexicon | None = None,
) -> Result[WordFrequencyTable]:
    """Count tokens across a column and keep the most frequent.

    Only string cells are tokenized; numbers, booleans and nulls are skipped.

    Args:
        table: Parsed table
        column: Column to tokenize
        top_n: Maximum number of tokens to return
        lexicon: Stop words to apply; the packaged lexicon when omitted

    Returns:
        Result containing WordFrequencyTable, or EMPTY_TABLE / INVALID_COLUMN_SELECTION
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)
    if not table.has_column(column):
        return Result.fail(
            f"Column not in table: {column}",
            issue=AnalysisIssue.INVALID_COLUMN_SELECTION,
        )

    lexicon = lexicon or load_lexicon()
    counts: Counter[str] = Counter()
    for value in table.column_values(column):
        if not isinstance(value, str) or is_blank(value):
            continue
        counts.update(tokenize(value, lexicon.stop_words))

    # most_common is stable, so equal counts stay in first-seen order
    entries = [WordCount(token=t, count=c) for t, c in counts.most_common(max(top_n, 0))]

    logger.debug(
        "word_frequency_computed",
        column=column,
        distinct_tokens=len(counts),
        returned=len(entries),
    )
    return Result.ok(
        WordFrequencyTable(
            column=column,
            entries=entries,
            total_tokens=sum(counts.values()),
            distinct_tokens=len(counts),
        )
    )
