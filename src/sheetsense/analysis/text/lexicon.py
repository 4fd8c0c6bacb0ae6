"""Lexicon loading for text analytics.

Stop words and sentiment word lists are defined in ``lexicon.yaml`` next to
this module. A different file with the same keys can be passed instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LEXICON_PATH = Path(__file__).with_name("lexicon.yaml")


@dataclass(frozen=True)
class Lexicon:
    """Word lists used by the tokenizer and the sentiment scorer."""

    stop_words: frozenset[str]
    positive_words: tuple[str, ...]
    negative_words: tuple[str, ...]

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Lexicon:
        """Build from a parsed YAML mapping; missing lists are empty."""
        return cls(
            stop_words=frozenset(str(w).lower() for w in config.get("stop_words") or []),
            positive_words=tuple(str(w).lower() for w in config.get("positive_words") or []),
            negative_words=tuple(str(w).lower() for w in config.get("negative_words") or []),
        )


@lru_cache(maxsize=8)
def load_lexicon(path: Path | None = None) -> Lexicon:
    """Load a lexicon from YAML.

    Args:
        path: Optional path to a lexicon file. If None, uses the packaged lexicon.

    Returns:
        Lexicon instance
    """
    with open(path or DEFAULT_LEXICON_PATH, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    return Lexicon.from_dict(config)
