from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Sequence

from .errors import EmptyInput, TextTooLong, UnsupportedLanguage
from .fallback import Provider, with_fallback
from .models import Language, TranslationOutcome, TranslationRequest
from .sinks import NotificationSink, NullProgressSink, ProgressSink, Severity

logger = logging.getLogger(__name__)

MAX_TRANSLATION_LENGTH = 2000
DEMO_LABEL = "Demo translation"

LANGUAGES: Mapping[str, Language] = MappingProxyType(
    {
        code: Language(code=code, name=name, flag=flag)
        for code, name, flag in (
            ("es", "Spanish", "🇪🇸"),
            ("fr", "French", "🇫🇷"),
            ("de", "German", "🇩🇪"),
            ("it", "Italian", "🇮🇹"),
            ("pt", "Portuguese", "🇵🇹"),
            ("ru", "Russian", "🇷🇺"),
            ("ja", "Japanese", "🇯🇵"),
            ("ko", "Korean", "🇰🇷"),
            ("zh", "Chinese", "🇨🇳"),
            ("ar", "Arabic", "🇸🇦"),
            ("hi", "Hindi", "🇮🇳"),
            ("sw", "Swahili", "🇹🇿"),
        )
    }
)

DEMO_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        "es": "[ESPAÑOL] {text}\n\n*Esta es una traducción de demostración. En una "
        "implementación real, se utilizaría un servicio de traducción profesional.*",
        "fr": "[FRANÇAIS] {text}\n\n*Ceci est une traduction de démonstration. Dans une "
        "implémentation réelle, un service de traduction professionnel serait utilisé.*",
        "de": "[DEUTSCH] {text}\n\n*Dies ist eine Demo-Übersetzung. In einer echten "
        "Implementierung würde ein professioneller Übersetzungsdienst verwendet werden.*",
        "it": "[ITALIANO] {text}\n\n*Questa è una traduzione dimostrativa. In "
        "un'implementazione reale, verrebbe utilizzato un servizio di traduzione "
        "professionale.*",
        "pt": "[PORTUGUÊS] {text}\n\n*Esta é uma tradução demonstrativa. Em uma "
        "implementação real, um serviço de tradução profissional seria usado.*",
        "sw": "[KISWAHILI] {text}\n\n*Huu ni tafsiri ya onyesho. Katika utekelezaji "
        "halisi, huduma ya kitaalamu ya tafsiri ingetumika.*",
    }
)

GENERIC_DEMO_TEMPLATE = (
    "[{name}] {text}\n\n*This is a demo translation. In a real implementation, "
    "a professional translation service would be used.*"
)

COMMON_WORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "en": ("the", "and", "is", "in", "to", "of"),
        "es": ("el", "la", "de", "que", "y", "en"),
        "fr": ("le", "la", "de", "et", "à", "dans"),
    }
)


def get_language(code: str) -> Language:
    normalized = (code or "").lower().strip()
    try:
        return LANGUAGES[normalized]
    except KeyError:
        raise UnsupportedLanguage(code) from None


def get_language_name(code: str) -> str:
    language = LANGUAGES.get(code)
    return language.name if language else code


def get_language_flag(code: str) -> str:
    language = LANGUAGES.get(code)
    return language.flag if language else "🌐"


def demo_translation(text: str, target_code: str) -> str:
    """Deterministic placeholder shown when every translation provider failed."""
    template = DEMO_TEMPLATES.get(target_code)
    if template is not None:
        return template.format(text=text)
    return GENERIC_DEMO_TEMPLATE.format(
        name=get_language_name(target_code).upper(), text=text
    )


def detect_language(text: str) -> str:
    """
    Guess en/es/fr by counting common words found as substrings.

    Ties keep the earlier language, so English wins when nothing matches.
    """
    lowered = text.lower()
    detected = "en"
    best = 0
    for code, words in COMMON_WORDS.items():
        matches = sum(1 for word in words if word in lowered)
        if matches > best:
            best = matches
            detected = code
    return detected


class TranslationService:
    """Ordered remote translators with a demo-text fallback."""

    def __init__(
        self,
        providers: Sequence[Provider[TranslationRequest]] = (),
        *,
        progress: ProgressSink | None = None,
        notifier: NotificationSink | None = None,
        max_input_length: int = MAX_TRANSLATION_LENGTH,
        source_lang: str = "en",
    ) -> None:
        self._providers = list(providers)
        self._progress = progress or NullProgressSink()
        self._notifier = notifier
        self._max_input_length = max_input_length
        self._source_lang = source_lang

    def translate(self, text: str, target_code: str) -> TranslationOutcome:
        """Translate text; provider failures degrade to the demo template."""
        text = (text or "").strip()
        if not text:
            raise EmptyInput("translate")
        if len(text) > self._max_input_length:
            raise TextTooLong(len(text), self._max_input_length, "translation")
        language = get_language(target_code)

        request = TranslationRequest(
            text=text, target_lang=language.code, source_lang=self._source_lang
        )
        self._progress.set_visible(True, f"Translating to {language.name}...")
        try:
            result = with_fallback(
                self._providers,
                request,
                lambda req: demo_translation(req.text, req.target_lang),
                DEMO_LABEL,
            )
        finally:
            self._progress.set_visible(False)

        if self._notifier is not None:
            if result.is_fallback:
                self._notifier.report(
                    "Demo translation shown - API services might be busy", Severity.INFO
                )
            else:
                self._notifier.report(
                    f"Successfully translated to {language.name}", Severity.SUCCESS
                )
        logger.info("Translated to %s via %s", language.code, result.source_label)
        return TranslationOutcome(result=result, language=language)
