from __future__ import annotations

from typing import Iterable, List

from .models import ScoredSentence

KEY_TERMS = (
    "education",
    "learn",
    "teach",
    "student",
    "teacher",
    "school",
    "knowledge",
    "understand",
)

LONG_SENTENCE_WORDS = 30
SHORT_SENTENCE_WORDS = 8


def count_words(sentence: str) -> int:
    return len(sentence.split())


def score_sentence(sentence: str) -> int:
    """
    Additive importance score for a single sentence.

    Every sentence starts at 1. Short sentences gain a point and very long
    ones lose two; questions gain one; each key term found as a
    case-insensitive substring adds one, so "teacher" matches both
    "teach" and "teacher".
    """
    score = 1

    word_count = count_words(sentence)
    if word_count > LONG_SENTENCE_WORDS:
        score -= 2
    if word_count < SHORT_SENTENCE_WORDS:
        score += 1

    if "?" in sentence:
        score += 1

    lowered = sentence.lower()
    score += sum(1 for term in KEY_TERMS if term in lowered)
    return score


def score_sentences(sentences: Iterable[str]) -> List[ScoredSentence]:
    """Score each sentence, keeping document order."""
    scored: List[ScoredSentence] = []
    for sentence in sentences:
        text = sentence.strip()
        if not text:
            continue
        scored.append(
            ScoredSentence(
                text=text, score=score_sentence(text), word_count=count_words(text)
            )
        )
    return scored
