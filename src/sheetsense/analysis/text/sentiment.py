"""Lexicon sentiment scoring.

A coarse heuristic, not a trained classifier. Each whitespace-separated token
scores +1 when it contains any positive word and -1 when it contains any
negative word; the sign of the total is the label. Containment is substring
matching, so ``"goodness"`` counts as positive and ``"不好"`` matches both
``"好"`` and ``"不好"``.
"""

from __future__ import annotations

from sheetsense.analysis.text.lexicon import Lexicon, load_lexicon
from sheetsense.analysis.text.models import (
    SentimentBreakdown,
    SentimentRow,
    SentimentSummary,
)
from sheetsense.core.coercion import is_blank
from sheetsense.core.logging import get_logger
from sheetsense.core.models.base import AnalysisIssue, Result, SentimentLabel
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

PREVIEW_LENGTH = 100


def score_text(text: str, lexicon: Lexicon) -> int:
    """Cumulative lexicon score of a text."""
    score = 0
    for token in text.lower().split():
        if any(word in token for word in lexicon.positive_words):
            score += 1
        if any(word in token for word in lexicon.negative_words):
            score -= 1
    return score


def label_for(score: int) -> SentimentLabel:
    if score > 0:
        return SentimentLabel.POSITIVE
    if score < 0:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def _preview(text: str) -> str:
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "..."
    return text


def compute_sentiment_breakdown(
    table: ParsedTable,
    column: str,
    lexicon: Lexicon | None = None,
) -> Result[SentimentBreakdown]:
    """Score every text cell of a column.

    Only string cells are analyzed; null, numeric, boolean and blank cells are
    skipped and do not count towards the summary total.

    Args:
        table: Parsed table
        column: Text column to score
        lexicon: Word lists; the packaged lexicon when omitted

    Returns:
        Result containing SentimentBreakdown, or EMPTY_TABLE / INVALID_COLUMN_SELECTION
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)
    if not table.has_column(column):
        return Result.fail(
            f"Column not in table: {column}",
            issue=AnalysisIssue.INVALID_COLUMN_SELECTION,
        )

    lexicon = lexicon or load_lexicon()
    breakdown = SentimentBreakdown(column=column)
    summary = breakdown.summary

    for row_number, value in enumerate(table.column_values(column), start=1):
        if not isinstance(value, str) or is_blank(value):
            continue
        score = score_text(value, lexicon)
        label = label_for(score)
        breakdown.rows.append(
            SentimentRow(
                row=row_number,
                preview=_preview(value),
                text=value,
                score=score,
                label=label,
            )
        )
        summary.total += 1
        if label is SentimentLabel.POSITIVE:
            summary.positive += 1
        elif label is SentimentLabel.NEGATIVE:
            summary.negative += 1
        else:
            summary.neutral += 1

    logger.debug(
        "sentiment_computed",
        column=column,
        total=summary.total,
        positive=summary.positive,
        negative=summary.negative,
    )
    return Result.ok(breakdown)
