from __future__ import annotations

import importlib
import logging
import os
from typing import Any, Callable

from ..config import OpenAISettings
from ..errors import MalformedRemoteResponse, RemoteProviderFailure
from ..fallback import Provider
from ..models import SummaryRequest

logger = logging.getLogger(__name__)

# Replaced on first use, or by tests.
OpenAI: Callable[..., Any] | None = None

SYSTEM_PROMPT = (
    "You simplify English passages for readers who need plain language.\n"
    "- Keep the key facts and drop side details.\n"
    "- Use short sentences and everyday words.\n"
    "- Output plain text only (no Markdown, no quotes, no commentary)."
)

USER_PROMPT_TEMPLATE = (
    "Summarize the following text in {min_words} to {max_words} words.\n"
    "-----\n"
    "{text}\n"
    "-----\n"
    "Return only the simplified passage."
)


class OpenAISummarizer(Provider[SummaryRequest]):
    """Summarizer backed by the OpenAI Responses API; one attempt per call."""

    name = "OpenAI summarizer"

    def __init__(self, settings: OpenAISettings, api_key: str) -> None:
        if not api_key:
            raise ValueError("OpenAI API key is required when the OpenAI summarizer is enabled.")
        factory = _openai_client_class()
        self._settings = settings
        self._client = factory(
            api_key=api_key,
            base_url=settings.base_url,
            organization=settings.organization,
        )

    def fetch(self, request: SummaryRequest) -> str:
        user_prompt = USER_PROMPT_TEMPLATE.format(
            min_words=request.length_range.min,
            max_words=request.length_range.max,
            text=request.text.strip(),
        )
        try:
            response = self._client.responses.create(
                model=self._settings.model,
                input=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._settings.temperature,
                max_output_tokens=self._settings.max_output_tokens,
                timeout=self._settings.request_timeout,
            )
        except Exception as exc:  # noqa: BLE001
            raise RemoteProviderFailure(self.name, str(exc)) from exc
        text = summary_text(response)
        logger.debug("OpenAI summary: model=%s chars=%d", self._settings.model, len(text))
        return text


def summary_text(response: Any) -> str:
    """Return the first text segment of a Responses API result."""
    for item in getattr(response, "output", None) or ():
        for segment in _part(item, "content") or ():
            text = _part(segment, "text")
            if text:
                return text
    raise MalformedRemoteResponse(OpenAISummarizer.name, "response carried no text segment")


def _part(item: Any, key: str) -> Any:
    # SDK objects expose attributes; raw JSON payloads are plain dicts.
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, key, None)


def _openai_client_class() -> Callable[..., Any]:
    """Import the OpenAI client class on first use so the extra stays optional."""
    global OpenAI
    if OpenAI is None:
        try:
            OpenAI = importlib.import_module("openai").OpenAI
        except ImportError as exc:
            raise RuntimeError(
                "openai package is not installed. Install extras via 'pip install .[llm-openai]'."
            ) from exc
    return OpenAI


def resolve_openai_api_key(settings: OpenAISettings) -> str | None:
    """Return the explicit key or the one found in the configured environment variable."""
    if settings.api_key:
        return settings.api_key
    return os.environ.get(settings.api_key_env or "OPENAI_API_KEY")
