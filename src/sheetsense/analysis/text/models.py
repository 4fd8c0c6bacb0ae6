"""Text analytics models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sheetsense.core.models.base import SentimentLabel


class WordCount(BaseModel):
    """A token with its occurrence count."""

    token: str
    count: int


class WordFrequencyTable(BaseModel):
    """Top-N tokens of a column, descending by count, first-seen order on ties."""

    column: str
    entries: list[WordCount] = Field(default_factory=list)
    total_tokens: int = 0  # tokens counted before truncation
    distinct_tokens: int = 0

    @property
    def max_count(self) -> int:
        return self.entries[0].count if self.entries else 0


class SentimentRow(BaseModel):
    """Sentiment of one text cell; ``row`` is the 1-based source row number."""

    row: int
    preview: str
    text: str
    score: int
    label: SentimentLabel


class SentimentSummary(BaseModel):
    """Label counts over the analyzed rows."""

    total: int = 0
    positive: int = 0
    negative: int = 0
    neutral: int = 0

    def share(self, label: SentimentLabel) -> float:
        """Percentage of rows with ``label``; 0 when nothing was analyzed."""
        if not self.total:
            return 0.0
        count = {
            SentimentLabel.POSITIVE: self.positive,
            SentimentLabel.NEGATIVE: self.negative,
            SentimentLabel.NEUTRAL: self.neutral,
        }[label]
        return count / self.total * 100


class SentimentBreakdown(BaseModel):
    """Per-row sentiment plus summary counts for one column."""

    column: str
    rows: list[SentimentRow] = Field(default_factory=list)
    summary: SentimentSummary = Field(default_factory=SentimentSummary)
