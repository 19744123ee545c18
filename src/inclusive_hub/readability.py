from __future__ import annotations

import math
import re

from .models import ReadabilityStats
from .sentences import split_into_sentences

WHITESPACE_RE = re.compile(r"\s", re.UNICODE)

SENTENCE_LENGTH_WEIGHT = 0.4
WORD_LENGTH_WEIGHT = 0.6


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like ``Math.round(value * 10**digits) / 10**digits``."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def analyze(text: str) -> ReadabilityStats:
    """
    Compute word/sentence counts and a composite readability score.

    The score weights average word length above average sentence length;
    lower values read more easily. Empty text yields zeros.
    """
    words = text.split()
    sentences = split_into_sentences(text)
    characters = len(WHITESPACE_RE.sub("", text))

    avg_sentence_length = len(words) / max(len(sentences), 1)
    avg_word_length = characters / max(len(words), 1)
    score = (
        SENTENCE_LENGTH_WEIGHT * avg_sentence_length
        + WORD_LENGTH_WEIGHT * avg_word_length
    )

    return ReadabilityStats(
        word_count=len(words),
        sentence_count=len(sentences),
        avg_sentence_length=round_half_up(avg_sentence_length),
        avg_word_length=round_half_up(avg_word_length),
        readability_score=round_half_up(score),
    )


def improvement_percent(before: ReadabilityStats, after: ReadabilityStats) -> int:
    """Relative drop in readability score, as a whole percentage."""
    if before.readability_score == 0:
        return 0
    ratio = (before.readability_score - after.readability_score) / before.readability_score
    return int(math.floor(ratio * 100 + 0.5))
