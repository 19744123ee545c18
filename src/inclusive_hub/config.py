from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class HuggingFaceSettings:
    """Remote summarization endpoint used for simplification."""

    model_url: str = (
        "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"
    )
    api_token: str | None = None
    api_token_env: str = "HF_API_TOKEN"

    def resolve_token(self) -> str | None:
        if self.api_token:
            return self.api_token
        return os.environ.get(self.api_token_env) if self.api_token_env else None


@dataclass(slots=True)
class OpenAISettings:
    """Optional OpenAI-backed summarizer tried after the Hugging Face model."""

    enabled: bool = False
    model: str = "gpt-4.1-mini"
    api_key: str | None = None
    api_key_env: str = "OPENAI_API_KEY"
    base_url: str | None = None
    organization: str | None = None
    temperature: float = 0.3
    max_output_tokens: int = 400
    request_timeout: float = 30.0


@dataclass(slots=True)
class SimplificationSettings:
    remote_enabled: bool = True
    default_profile: str = "medium"
    min_input_length: int = 10


@dataclass(slots=True)
class TranslationSettings:
    remote_enabled: bool = True
    max_input_length: int = 2000
    source_lang: str = "en"
    mymemory_url: str = "https://api.mymemory.translated.net/get"
    libretranslate_url: str = "https://libretranslate.de/translate"


@dataclass(slots=True)
class HubConfig:
    """Configuration options for the accessibility toolkit."""

    request_timeout: float = 15.0
    max_input_chars: int = 5000
    simplification: SimplificationSettings = field(
        default_factory=SimplificationSettings
    )
    translation: TranslationSettings = field(default_factory=TranslationSettings)
    huggingface: HuggingFaceSettings = field(default_factory=HuggingFaceSettings)
    openai: OpenAISettings = field(default_factory=OpenAISettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


_SECTIONS: dict[str, type] = {
    "simplification": SimplificationSettings,
    "translation": TranslationSettings,
    "huggingface": HuggingFaceSettings,
    "openai": OpenAISettings,
}


def _build_section(cls: type, value: Any) -> Any:
    if isinstance(value, cls):
        return value
    if not isinstance(value, Mapping):
        raise ValueError(f"Configuration section for {cls.__name__} must be a mapping.")
    allowed = {f.name for f in fields(cls)}
    return cls(**{key: value[key] for key in value if key in allowed})


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {f.name for f in fields(HubConfig)}
    kwargs = {key: data[key] for key in data if key in allowed and key not in _SECTIONS}
    for name, cls in _SECTIONS.items():
        if name in data and data[name] is not None:
            kwargs[name] = _build_section(cls, data[name])
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> HubConfig:
    """Build a HubConfig from a dictionary-like input."""
    if data is None:
        return HubConfig()
    return HubConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> HubConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> HubConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return HubConfig()
    return config_from_yaml(path)
