from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from .errors import NarrationError
from .sinks import NotificationSink, Severity

logger = logging.getLogger(__name__)

MAX_NARRATION_CHARS = 5000
MIN_RATE = 0.1
MAX_RATE = 10.0


class NarrationState(str, Enum):
    IDLE = "idle"
    SPEAKING = "speaking"
    PAUSED = "paused"


class SpeechBackend(Protocol):
    """Platform speech API; playback and voice lookup live behind it."""

    def speak(self, text: str, rate: float, voice_id: str | None) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def cancel(self) -> None: ...


class NarrationController:
    """Play/pause/stop state machine for read-aloud narration."""

    def __init__(
        self,
        backend: SpeechBackend,
        notifier: NotificationSink,
        *,
        max_chars: int = MAX_NARRATION_CHARS,
    ) -> None:
        self._backend = backend
        self._notifier = notifier
        self._max_chars = max_chars
        self._state = NarrationState.IDLE

    @property
    def state(self) -> NarrationState:
        return self._state

    def play(self, text: str, rate: float = 1.0, voice_id: str | None = None) -> bool:
        """Start narration, or resume it when paused. Returns True when audio runs."""
        text = (text or "").strip()
        if not text:
            self._notifier.report("Please enter some text to read aloud", Severity.WARNING)
            return False
        if len(text) > self._max_chars:
            self._notifier.report("Text too long for speech synthesis", Severity.WARNING)
            return False

        if self._state is NarrationState.PAUSED:
            self._backend.resume()
            self._state = NarrationState.SPEAKING
            self._notifier.report("Resumed speaking", Severity.INFO)
            return True

        self.stop()
        rate = min(max(rate, MIN_RATE), MAX_RATE)
        try:
            self._backend.speak(text, rate, voice_id)
        except NarrationError as exc:
            logger.error("Speech backend failed: %s", exc)
            self._state = NarrationState.IDLE
            self._notifier.report("Speech synthesis failed", Severity.ERROR)
            return False
        self._state = NarrationState.SPEAKING
        self._notifier.report("Started speaking", Severity.INFO)
        return True

    def pause(self) -> None:
        if self._state is not NarrationState.SPEAKING:
            return
        self._backend.pause()
        self._state = NarrationState.PAUSED
        self._notifier.report("Speech paused", Severity.INFO)

    def stop(self) -> None:
        if self._state is NarrationState.IDLE:
            return
        self._backend.cancel()
        self._state = NarrationState.IDLE

    def toggle(self, text: str, rate: float = 1.0, voice_id: str | None = None) -> None:
        """Pause while speaking, otherwise play."""
        if self._state is NarrationState.SPEAKING:
            self.pause()
        else:
            self.play(text, rate, voice_id)

    def finished(self) -> None:
        """Backend callback for the end of an utterance."""
        self._state = NarrationState.IDLE
        self._notifier.report("Finished speaking", Severity.SUCCESS)

    def failed(self, reason: str = "") -> None:
        """Backend callback for an error raised mid-utterance."""
        logger.error("Speech synthesis error: %s", reason or "unknown")
        self._state = NarrationState.IDLE
        self._notifier.report("Speech synthesis error", Severity.ERROR)
