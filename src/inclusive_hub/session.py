from __future__ import annotations

import itertools
import logging
import random
import re
import threading
from dataclasses import dataclass

import requests

from .config import HubConfig
from .errors import InputRejected, UnknownProfile, UnsupportedLanguage
from .models import SimplificationOptions, SimplificationOutcome, TranslationOutcome
from .providers import build_summarizers_from_config, build_translators_from_config
from .simplification import SimplificationEngine
from .sinks import (
    LoggingNotificationSink,
    NotificationSink,
    NullProgressSink,
    ProgressSink,
    Severity,
)
from .translation import TranslationService

logger = logging.getLogger(__name__)

STATUS_SENTENCE_RE = re.compile(r"[.!?]+")


@dataclass(frozen=True, slots=True)
class TextStats:
    """Live counters shown next to the input box."""

    characters: int
    words: int
    sentences: int

    @classmethod
    def from_text(cls, text: str) -> "TextStats":
        stripped = text.strip()
        if not stripped:
            return cls(characters=len(text), words=0, sentences=0)
        sentences = [s for s in STATUS_SENTENCE_RE.split(text) if s.strip()]
        return cls(
            characters=len(text), words=len(stripped.split()), sentences=len(sentences)
        )


def validate_input(text: str, max_chars: int, notifier: NotificationSink) -> bool:
    """Warn when text is over the character limit; True when it fits."""
    if len(text) > max_chars:
        notifier.report(
            "Text exceeds character limit. Please shorten your text.", Severity.WARNING
        )
        return False
    return True


@dataclass(frozen=True, slots=True)
class PublishedOutput:
    ticket: int
    content: str
    title: str
    output_type: str


class OutputSlot:
    """
    Single visible output shared by overlapping invocations.

    Each invocation takes a ticket from begin(). A completion is published only
    if no invocation that started later has already published, so the most
    recently started call always wins regardless of completion order.
    """

    def __init__(self) -> None:
        self._tickets = itertools.count(1)
        self._lock = threading.Lock()
        self._current: PublishedOutput | None = None

    def begin(self) -> int:
        with self._lock:
            return next(self._tickets)

    def publish(self, ticket: int, content: str, title: str, output_type: str) -> bool:
        with self._lock:
            if self._current is not None and ticket < self._current.ticket:
                logger.debug(
                    "Discarding stale %s output (ticket %d < %d)",
                    output_type,
                    ticket,
                    self._current.ticket,
                )
                return False
            self._current = PublishedOutput(ticket, content, title, output_type)
            return True

    def clear(self) -> None:
        with self._lock:
            self._current = None

    @property
    def current(self) -> PublishedOutput | None:
        return self._current


class HubSession:
    """Caller-owned context tying engines, sinks and the output slot together."""

    def __init__(
        self,
        engine: SimplificationEngine,
        translator: TranslationService,
        *,
        notifier: NotificationSink | None = None,
        max_input_chars: int = 5000,
    ) -> None:
        self.engine = engine
        self.translator = translator
        self.notifier = notifier or LoggingNotificationSink()
        self.max_input_chars = max_input_chars
        self.slot = OutputSlot()

    @classmethod
    def from_config(
        cls,
        config: HubConfig,
        *,
        notifier: NotificationSink | None = None,
        progress: ProgressSink | None = None,
        rng: random.Random | None = None,
        http: requests.Session | None = None,
    ) -> "HubSession":
        notifier = notifier or LoggingNotificationSink()
        progress = progress or NullProgressSink()
        engine = SimplificationEngine(
            build_summarizers_from_config(config, session=http),
            rng=rng,
            progress=progress,
            notifier=notifier,
            min_input_length=config.simplification.min_input_length,
        )
        translator = TranslationService(
            build_translators_from_config(config, session=http),
            progress=progress,
            notifier=notifier,
            max_input_length=config.translation.max_input_length,
            source_lang=config.translation.source_lang,
        )
        return cls(
            engine, translator, notifier=notifier, max_input_chars=config.max_input_chars
        )

    def text_stats(self, text: str) -> TextStats:
        return TextStats.from_text(text)

    def simplify(
        self,
        text: str,
        profile_name: str,
        options: SimplificationOptions | None = None,
    ) -> SimplificationOutcome | None:
        """Run the engine, reporting caller errors instead of raising them."""
        ticket = self.slot.begin()
        try:
            outcome = self.engine.simplify(text, profile_name, options)
        except InputRejected as exc:
            self.notifier.report(str(exc), Severity(exc.severity))
            return None
        except UnknownProfile as exc:
            self.notifier.report(str(exc), Severity.ERROR)
            return None
        self.slot.publish(ticket, outcome.output, outcome.title, "simplification")
        return outcome

    def translate(self, text: str, target_code: str) -> TranslationOutcome | None:
        ticket = self.slot.begin()
        try:
            outcome = self.translator.translate(text, target_code)
        except InputRejected as exc:
            self.notifier.report(str(exc), Severity(exc.severity))
            return None
        except UnsupportedLanguage as exc:
            self.notifier.report(str(exc), Severity.ERROR)
            return None
        self.slot.publish(ticket, outcome.result.content, outcome.title, "translation")
        return outcome

    @property
    def last_output(self) -> str:
        current = self.slot.current
        return current.content if current else ""

    @property
    def output_type(self) -> str:
        current = self.slot.current
        return current.output_type if current else ""

    @property
    def output_title(self) -> str:
        current = self.slot.current
        return current.title if current else ""

    def clear_output(self) -> None:
        self.slot.clear()
        self.notifier.report("Output cleared", Severity.INFO)
