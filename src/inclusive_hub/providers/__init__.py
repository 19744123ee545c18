from __future__ import annotations

from typing import TYPE_CHECKING, List

import requests

from ..fallback import Provider
from ..models import SummaryRequest, TranslationRequest
from .http import JsonHttpProvider
from .openai_summarizer import OpenAISummarizer, resolve_openai_api_key
from .summarizers import HuggingFaceSummarizer
from .translators import LibreTranslateTranslator, MyMemoryTranslator

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import HubConfig

__all__ = [
    "JsonHttpProvider",
    "HuggingFaceSummarizer",
    "OpenAISummarizer",
    "MyMemoryTranslator",
    "LibreTranslateTranslator",
    "build_summarizers_from_config",
    "build_translators_from_config",
]


def build_summarizers_from_config(
    config: "HubConfig", session: requests.Session | None = None
) -> List[Provider[SummaryRequest]]:
    """Ordered remote simplification providers for the given configuration."""
    if not config.simplification.remote_enabled:
        return []
    providers: List[Provider[SummaryRequest]] = [
        HuggingFaceSummarizer(
            config.huggingface.model_url,
            api_token=config.huggingface.resolve_token(),
            session=session,
            timeout=config.request_timeout,
        )
    ]
    if config.openai.enabled:
        api_key = resolve_openai_api_key(config.openai)
        if not api_key:
            raise RuntimeError(
                "OpenAI summarizer enabled but no API key found. "
                f"Set {config.openai.api_key_env} or openai.api_key."
            )
        providers.append(OpenAISummarizer(config.openai, api_key=api_key))
    return providers


def build_translators_from_config(
    config: "HubConfig", session: requests.Session | None = None
) -> List[Provider[TranslationRequest]]:
    """MyMemory first, then LibreTranslate."""
    if not config.translation.remote_enabled:
        return []
    shared = session or requests.Session()
    return [
        MyMemoryTranslator(
            config.translation.mymemory_url,
            session=shared,
            timeout=config.request_timeout,
        ),
        LibreTranslateTranslator(
            config.translation.libretranslate_url,
            session=shared,
            timeout=config.request_timeout,
        ),
    ]
