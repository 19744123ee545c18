from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Sequence, TypeVar

import requests

from .errors import ProvidersExhausted, RemoteProviderFailure
from .models import ProviderResult, ResultKind

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")


class Provider(ABC, Generic[RequestT]):
    """A remote service that turns a request into text, or fails."""

    name: str = "provider"

    @abstractmethod
    def fetch(self, request: RequestT) -> str:
        """Return the provider's text or raise RemoteProviderFailure."""
        raise NotImplementedError


class CallableProvider(Provider[RequestT]):
    """Adapt an arbitrary callable into the Provider interface."""

    def __init__(self, func: Callable[[RequestT], str], name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", "callable")

    def fetch(self, request: RequestT) -> str:
        return self._func(request)


def try_providers(
    providers: Sequence[Provider[RequestT]], request: RequestT
) -> ProviderResult:
    """
    Call providers strictly in order and return the first usable answer.

    Each provider gets exactly one attempt. Any exception raised by a
    provider, including network errors, failure statuses and malformed bodies,
    counts as failure, as does blank text. Raises ProvidersExhausted when
    none succeeds.
    """
    failures: List[RemoteProviderFailure] = []
    for provider in providers:
        try:
            content = provider.fetch(request)
        except RemoteProviderFailure as exc:
            failure = exc
        except requests.RequestException as exc:
            failure = RemoteProviderFailure(provider.name, str(exc) or type(exc).__name__)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Provider %s raised unexpectedly", provider.name, exc_info=True)
            failure = RemoteProviderFailure(provider.name, str(exc) or type(exc).__name__)
        else:
            if content and content.strip():
                logger.debug("Provider %s succeeded", provider.name)
                return ProviderResult(
                    content=content, source_label=provider.name, kind=ResultKind.REMOTE
                )
            failure = RemoteProviderFailure(provider.name, "empty response")
        logger.info("Provider %s failed, trying next: %s", provider.name, failure.reason)
        failures.append(failure)
    raise ProvidersExhausted(failures)


def with_fallback(
    providers: Sequence[Provider[RequestT]],
    request: RequestT,
    fallback: Callable[[RequestT], str],
    fallback_label: str,
) -> ProviderResult:
    """Run try_providers and substitute locally generated text on exhaustion."""
    try:
        return try_providers(providers, request)
    except ProvidersExhausted as exc:
        logger.info("Using %s after %d failed provider(s)", fallback_label, len(exc.failures))
    return ProviderResult(
        content=fallback(request), source_label=fallback_label, kind=ResultKind.FALLBACK
    )
