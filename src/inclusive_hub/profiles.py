from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from .errors import UnknownProfile
from .models import LengthRange, Profile

DEFAULT_PROFILE = "medium"

PROFILES: Mapping[str, Profile] = MappingProxyType(
    {
        "light": Profile(
            name="light",
            label="Light Simplification",
            description="Keeps most details while improving readability",
            max_sentences=8,
            max_words_per_sentence=20,
            complexity_threshold=0.7,
            length_range=LengthRange(min=50, max=150),
        ),
        "medium": Profile(
            name="medium",
            label="Medium Simplification",
            description="Balanced approach for general understanding",
            max_sentences=6,
            max_words_per_sentence=15,
            complexity_threshold=0.5,
            length_range=LengthRange(min=30, max=120),
        ),
        "heavy": Profile(
            name="heavy",
            label="Heavy Simplification",
            description="Maximum simplicity for easy reading",
            max_sentences=4,
            max_words_per_sentence=12,
            complexity_threshold=0.3,
            length_range=LengthRange(min=20, max=80),
        ),
    }
)


def profile_names() -> List[str]:
    return list(PROFILES)


def get_profile(name: str) -> Profile:
    """Look up a profile by name (case-insensitive)."""
    normalized = (name or "").lower().strip()
    try:
        return PROFILES[normalized]
    except KeyError:
        raise UnknownProfile(name, profile_names()) from None
