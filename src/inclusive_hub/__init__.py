"""
inclusive_hub package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import HubConfig, config_from_dict, config_from_yaml, load_config
from .fallback import CallableProvider, Provider, try_providers, with_fallback
from .profiles import PROFILES, get_profile
from .readability import analyze
from .scoring import score_sentence
from .sentences import split_into_sentences
from .session import HubSession
from .simplification import SimplificationEngine, rule_based_simplification
from .translation import TranslationService

__all__ = [
    "HubConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "CallableProvider",
    "Provider",
    "try_providers",
    "with_fallback",
    "PROFILES",
    "get_profile",
    "analyze",
    "score_sentence",
    "split_into_sentences",
    "HubSession",
    "SimplificationEngine",
    "rule_based_simplification",
    "TranslationService",
]

__version__ = "0.1.0"
