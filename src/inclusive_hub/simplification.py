from __future__ import annotations

import logging
import math
import random
from typing import List, Sequence

from .errors import EmptyInput, TrivialInput
from .fallback import Provider, with_fallback
from .models import (
    Profile,
    ProviderResult,
    ResultKind,
    SimplificationOptions,
    SimplificationOutcome,
    SummaryRequest,
)
from .profiles import get_profile
from .readability import analyze, improvement_percent
from .scoring import score_sentences
from .sentences import split_into_sentences
from .sinks import NotificationSink, NullProgressSink, ProgressSink, Severity

logger = logging.getLogger(__name__)

UNABLE_TO_SIMPLIFY = "Unable to simplify this text."
RULE_BASED_LABEL = "Rule-based simplification"
TERMINAL_PUNCTUATION = (".", "!", "?")
MIN_INPUT_LENGTH = 10

EXAMPLES = (
    "\n\n💡 Example: Like turning 'The meteorological precipitation is substantial' "
    "into 'It's raining a lot'.",
    "\n\n💡 Example: Similar to changing 'Utilize' to 'Use' for easier understanding.",
    "\n\n💡 Example: Think of it as explaining something to a friend in simple words.",
)


def rule_based_simplification(text: str, profile: Profile) -> str:
    """
    Extractive simplification: keep the highest scoring short sentences.

    Sentences longer than the profile's word cap are dropped before ranking.
    Ranking is a stable sort on score, so equal scores keep document order.
    When every sentence is over the cap the first ``max_sentences`` are used
    unfiltered.
    """
    sentences = split_into_sentences(text)
    eligible = [
        item
        for item in score_sentences(sentences)
        if item.word_count <= profile.max_words_per_sentence
    ]
    ranked = sorted(eligible, key=lambda item: item.score, reverse=True)
    selected: List[str] = [item.text for item in ranked[: profile.max_sentences]]

    if not selected and sentences:
        selected = sentences[: profile.max_sentences]

    simplified = ". ".join(selected)
    if simplified and not simplified.endswith("."):
        simplified += "."
    return simplified or UNABLE_TO_SIMPLIFY


def post_process_remote_text(text: str) -> str:
    """Capitalize and terminate a remote summary."""
    processed = text.strip()
    if processed:
        processed = processed[0].upper() + processed[1:]
    if not processed.endswith(TERMINAL_PUNCTUATION):
        processed += "."
    return processed


def add_example(simplified: str, rng: random.Random) -> str:
    return simplified + rng.choice(EXAMPLES)


def shrinkage_percent(original: str, simplified: str) -> int:
    if not original:
        return 0
    return int(math.floor((1 - len(simplified) / len(original)) * 100 + 0.5))


def format_with_original(original: str, simplified: str) -> str:
    return (
        f"📖 ORIGINAL TEXT:\n{original}\n\n"
        f"🎯 SIMPLIFIED VERSION:\n{simplified}\n\n"
        f"---\n*The simplified version is {shrinkage_percent(original, simplified)}% "
        "shorter and easier to understand.*"
    )


class SimplificationEngine:
    """Remote summary first, extractive rule-based simplification as the fallback."""

    def __init__(
        self,
        providers: Sequence[Provider[SummaryRequest]] = (),
        *,
        rng: random.Random | None = None,
        progress: ProgressSink | None = None,
        notifier: NotificationSink | None = None,
        min_input_length: int = MIN_INPUT_LENGTH,
    ) -> None:
        self._providers = list(providers)
        self._rng = rng or random.Random()
        self._progress = progress or NullProgressSink()
        self._notifier = notifier
        self._min_input_length = min_input_length

    def simplify(
        self,
        text: str,
        profile_name: str,
        options: SimplificationOptions | None = None,
    ) -> SimplificationOutcome:
        """Simplify text under the named profile; rejects blank or trivial input."""
        options = options or SimplificationOptions()
        text = (text or "").strip()
        if not text:
            raise EmptyInput("simplify")
        if len(text) < self._min_input_length:
            raise TrivialInput(len(text), self._min_input_length)
        profile = get_profile(profile_name)

        self._progress.set_visible(True, "Simplifying text...")
        try:
            self._progress.set_percent(30)
            result = self._simplify_text(text, profile)
            self._progress.set_percent(80 if result.kind is ResultKind.REMOTE else 70)

            simplified = result.content
            displayed = simplified
            if options.add_examples:
                displayed = add_example(displayed, self._rng)
            output = displayed
            if options.show_original:
                output = format_with_original(text, displayed)
            self._progress.set_percent(100)
        finally:
            self._progress.set_visible(False)

        before = analyze(text)
        after = analyze(simplified)
        outcome = SimplificationOutcome(
            output=output,
            simplified=simplified,
            before=before,
            after=after,
            profile=profile,
            result=result,
            improvement_percent=improvement_percent(before, after),
            options=options,
        )
        logger.info(
            "Simplified with %s (%s): score %.1f -> %.1f, %d -> %d words",
            result.source_label,
            profile.name,
            before.readability_score,
            after.readability_score,
            before.word_count,
            after.word_count,
        )
        if self._notifier is not None:
            self._notifier.report("Text simplified successfully!", Severity.SUCCESS)
        return outcome

    def _simplify_text(self, text: str, profile: Profile) -> ProviderResult:
        request = SummaryRequest(text=text, length_range=profile.length_range)
        result = with_fallback(
            self._providers,
            request,
            lambda req: rule_based_simplification(req.text, profile),
            RULE_BASED_LABEL,
        )
        if result.kind is ResultKind.REMOTE:
            return ProviderResult(
                content=post_process_remote_text(result.content),
                source_label=result.source_label,
                kind=result.kind,
            )
        return result
