"""Tokenization for word frequency analysis."""

from __future__ import annotations

import re
from collections.abc import Collection

# Everything except CJK ideographs, ASCII letters and whitespace.
_NON_WORD = re.compile(r"[^\u4e00-\u9fa5a-zA-Z\s]")


def tokenize(text: str, stop_words: Collection[str] = frozenset()) -> list[str]:
    """Split text into lower-case word tokens.

    Characters outside the kept letter set become spaces, so ``"don't"``
    yields ``"don"`` and ``"t"`` (the latter dropped for length). Tokens of
    length 1 and stop words are discarded.
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) > 1 and token not in stop_words]
