"""Text analytics module.

- Tokenization with a mixed Chinese/English stop-word list
- Word frequency ranking (top-N, first-seen tie-break)
- Lexicon sentiment scoring (substring containment)
- Text column eligibility
- Word cloud layout over a frequency table
"""

from sheetsense.analysis.text.eligibility import (
    SENTIMENT_MIN_LENGTH,
    WORD_CLOUD_MIN_LENGTH,
    find_text_columns,
    is_text_column,
)
from sheetsense.analysis.text.frequency import compute_word_frequency
from sheetsense.analysis.text.layout import COLOR_SCHEMES, PlacedWord, layout_word_cloud
from sheetsense.analysis.text.lexicon import Lexicon, load_lexicon
from sheetsense.analysis.text.models import (
    SentimentBreakdown,
    SentimentRow,
    SentimentSummary,
    WordCount,
    WordFrequencyTable,
)
from sheetsense.analysis.text.sentiment import compute_sentiment_breakdown, score_text
from sheetsense.analysis.text.tokenizer import tokenize

__all__ = [
    # Main entry points
    "compute_word_frequency",
    "compute_sentiment_breakdown",
    "find_text_columns",
    "layout_word_cloud",
    # Building blocks
    "is_text_column",
    "load_lexicon",
    "score_text",
    "tokenize",
    "COLOR_SCHEMES",
    "SENTIMENT_MIN_LENGTH",
    "WORD_CLOUD_MIN_LENGTH",
    # Models
    "Lexicon",
    "PlacedWord",
    "SentimentBreakdown",
    "SentimentRow",
    "SentimentSummary",
    "WordCount",
    "WordFrequencyTable",
]
