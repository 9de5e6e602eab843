"""Word count and reading-time estimate for the source manuscript."""

import math
from dataclasses import dataclass


WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class ManuscriptMetrics:
    words: int
    reading_minutes: int


def measure(text: str) -> ManuscriptMetrics:
    """
    Count words and estimate reading time.

    Words are runs of non-whitespace characters. Reading time assumes an
    average of 200 words per minute, rounded up.
    """
    stripped = text.strip()
    words = len(stripped.split()) if stripped else 0
    return ManuscriptMetrics(
        words=words,
        reading_minutes=math.ceil(words / WORDS_PER_MINUTE),
    )
