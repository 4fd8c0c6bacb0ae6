"""Word cloud layout.

Turns a WordFrequencyTable into positioned, sized and coloured words for a
renderer. Placement is random with a bounded number of overlap retries; when
no free spot is found the word keeps its last random position, so the layout
is not collision-free. Pass ``seed`` for a reproducible layout.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from sheetsense.analysis.text.models import WordFrequencyTable

MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 60
DEFAULT_MAX_ATTEMPTS = 50

COLOR_SCHEMES: dict[str, tuple[str, ...]] = {
    "default": (
        "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA726", "#AB47BC", "#66BB6A", "#FF7043", "#42A5F5",
    ),
    "blue": (
        "#E3F2FD", "#BBDEFB", "#90CAF9", "#64B5F6", "#42A5F5", "#2196F3", "#1E88E5", "#1976D2",
    ),
    "green": (
        "#E8F5E8", "#C8E6C9", "#A5D6A7", "#81C784", "#66BB6A", "#4CAF50", "#43A047", "#388E3C",
    ),
    "purple": (
        "#F3E5F5", "#E1BEE7", "#CE93D8", "#BA68C8", "#AB47BC", "#9C27B0", "#8E24AA", "#7B1FA2",
    ),
    "rainbow": (
        "#FF5722", "#FF9800", "#FFC107", "#8BC34A", "#4CAF50", "#00BCD4", "#03A9F4", "#3F51B5",
    ),
}


@dataclass
class PlacedWord:
    """A word positioned on the canvas.

    ``x`` is the left edge and ``y`` the text baseline; the word occupies
    ``[x, x + width]`` horizontally and ``[y - height, y]`` vertically.
    """

    text: str
    count: int
    font_size: float
    color: str
    x: float
    y: float
    width: float
    height: float
    placed: bool  # False when every attempt overlapped another word

    def overlaps(self, other: PlacedWord) -> bool:
        return not (
            self.x + self.width < other.x
            or other.x + other.width < self.x
            or self.y - self.height > other.y
            or other.y - other.height > self.y
        )


def font_size_for(count: int, max_count: int) -> float:
    """Font size scaled to the most frequent word, clamped to [12, 60]."""
    if max_count <= 0:
        return float(MIN_FONT_SIZE)
    return float(max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, count / max_count * 50 + 10)))


def estimate_text_width(text: str, font_size: float) -> float:
    """Approximate rendered width: CJK glyphs are square, others 0.6 em."""
    return sum(font_size if "\u4e00" <= ch <= "\u9fa5" else font_size * 0.6 for ch in text)


def layout_word_cloud(
    frequencies: WordFrequencyTable,
    width: int = 800,
    height: int = 400,
    color_scheme: str = "default",
    seed: int | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> list[PlacedWord]:
    """Position every word of a frequency table on a ``width`` x ``height`` canvas.

    Args:
        frequencies: Ranked tokens; placement follows their order
        width: Canvas width
        height: Canvas height
        color_scheme: Name in COLOR_SCHEMES; unknown names use "default"
        seed: Random seed for reproducible layouts
        max_attempts: Random positions tried per word before giving up

    Returns:
        Placed words in frequency order
    """
    rng = random.Random(seed)
    colors = COLOR_SCHEMES.get(color_scheme, COLOR_SCHEMES["default"])
    max_count = frequencies.max_count

    placed: list[PlacedWord] = []
    for index, entry in enumerate(frequencies.entries):
        font_size = font_size_for(entry.count, max_count)
        word = PlacedWord(
            text=entry.token,
            count=entry.count,
            font_size=font_size,
            color=colors[index % len(colors)],
            x=0.0,
            y=0.0,
            width=estimate_text_width(entry.token, font_size),
            height=font_size,
            placed=False,
        )

        for _ in range(max(max_attempts, 1)):
            word.x = rng.random() * max(width - word.width, 0)
            word.y = rng.random() * max(height - word.height, 0) + word.height
            if not any(word.overlaps(other) for other in placed):
                word.placed = True
                break

        placed.append(word)

    return placed
