from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class LengthRange:
    """Target length bounds handed to remote summarizers."""

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class Profile:
    """Named bundle of simplification limits."""

    name: str
    label: str
    description: str
    max_sentences: int
    max_words_per_sentence: int
    complexity_threshold: float
    length_range: LengthRange


@dataclass(slots=True)
class ScoredSentence:
    """A sentence with its importance score and word count."""

    text: str
    score: int
    word_count: int


@dataclass(frozen=True, slots=True)
class ReadabilityStats:
    """Word/sentence/character statistics and the composite ease score."""

    word_count: int
    sentence_count: int
    avg_sentence_length: float
    avg_word_length: float
    readability_score: float

    def to_dict(self) -> dict[str, float | int]:
        return dict(asdict(self))


class ResultKind(str, Enum):
    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ProviderResult:
    """Content produced either by a remote provider or by the local fallback."""

    content: str
    source_label: str
    kind: ResultKind

    @property
    def is_fallback(self) -> bool:
        return self.kind is ResultKind.FALLBACK


@dataclass(frozen=True, slots=True)
class SummaryRequest:
    """Request sent to remote simplification providers."""

    text: str
    length_range: LengthRange


@dataclass(frozen=True, slots=True)
class TranslationRequest:
    """Request sent to remote translation providers."""

    text: str
    target_lang: str
    source_lang: str = "en"


@dataclass(frozen=True, slots=True)
class Language:
    code: str
    name: str
    flag: str


@dataclass(slots=True)
class SimplificationOptions:
    add_examples: bool = False
    show_original: bool = False


@dataclass(slots=True)
class SimplificationOutcome:
    """Everything a display layer needs after one simplify call."""

    output: str
    simplified: str
    before: ReadabilityStats
    after: ReadabilityStats
    profile: Profile
    result: ProviderResult
    improvement_percent: int = 0
    options: SimplificationOptions = field(default_factory=SimplificationOptions)

    @property
    def title(self) -> str:
        return f"Simplified Text - {self.profile.label}"

    def summary_message(self) -> str:
        return (
            f"Readability improved by {self.improvement_percent}% • "
            f"{self.after.word_count} words vs {self.before.word_count} originally"
        )


@dataclass(slots=True)
class TranslationOutcome:
    result: ProviderResult
    language: Language

    @property
    def title(self) -> str:
        suffix = " (Demo)" if self.result.is_fallback else ""
        return f"Translation to {self.language.name}{suffix}"
