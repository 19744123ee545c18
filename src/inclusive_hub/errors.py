from __future__ import annotations

from typing import Sequence


class InclusiveHubError(Exception):
    """Base class for errors raised by inclusive_hub."""


class InputRejected(InclusiveHubError):
    """Caller input that cannot be processed; reported to the user, never retried."""

    severity = "warning"


class EmptyInput(InputRejected):
    """Raised when the input text is blank after trimming."""

    def __init__(self, action: str = "process") -> None:
        super().__init__(f"Please enter some text to {action}")


class TrivialInput(InputRejected):
    """Raised when the input is too short to be worth simplifying."""

    severity = "info"

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__("Text is already very short")
        self.length = length
        self.minimum = minimum


class TextTooLong(InputRejected):
    """Raised when the input exceeds the configured character limit."""

    def __init__(self, length: int, maximum: int, action: str = "processing") -> None:
        super().__init__(
            f"Text too long for {action} ({length} > {maximum} characters). "
            "Please use shorter text."
        )
        self.length = length
        self.maximum = maximum


class UnknownProfile(InclusiveHubError, ValueError):
    """Raised when a simplification profile name has no match."""

    def __init__(self, name: str, known: Sequence[str]) -> None:
        super().__init__(
            f"Unknown simplification profile '{name}'. Choose one of: {', '.join(known)}."
        )
        self.name = name


class UnsupportedLanguage(InclusiveHubError, ValueError):
    """Raised when a translation target code is not in the language table."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Invalid language selected: '{code}'")
        self.code = code


class RemoteProviderFailure(InclusiveHubError):
    """A remote provider could not produce a usable response."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class MalformedRemoteResponse(RemoteProviderFailure):
    """The provider answered, but the body lacked the expected field."""


class ProvidersExhausted(RemoteProviderFailure):
    """Every provider in an ordered list failed."""

    def __init__(self, failures: Sequence[RemoteProviderFailure]) -> None:
        names = ", ".join(f.provider for f in failures) or "none configured"
        super().__init__("all providers", f"every provider failed ({names})")
        self.failures = list(failures)


class NarrationError(InclusiveHubError):
    """Raised by speech backends when playback cannot start."""
