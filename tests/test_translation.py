import pytest
import requests

from inclusive_hub.errors import EmptyInput, TextTooLong, UnsupportedLanguage
from inclusive_hub.fallback import CallableProvider
from inclusive_hub.models import ResultKind
from inclusive_hub.providers import LibreTranslateTranslator, MyMemoryTranslator
from inclusive_hub.sinks import RecordingNotificationSink, RecordingProgressSink, Severity
from inclusive_hub.translation import (
    DEMO_LABEL,
    LANGUAGES,
    TranslationService,
    demo_translation,
    detect_language,
    get_language_flag,
    get_language_name,
)
from tests.utils import DummyResponse, DummySession, failing_session


def _service(session: DummySession, notifier=None, progress=None) -> TranslationService:
    return TranslationService(
        [
            MyMemoryTranslator("https://mymemory.test/get", session=session),
            LibreTranslateTranslator("https://libre.test/translate", session=session),
        ],
        notifier=notifier,
        progress=progress,
    )


def test_both_providers_failing_returns_demo_template():
    notifier = RecordingNotificationSink()
    progress = RecordingProgressSink()
    session = failing_session(503)

    outcome = _service(session, notifier, progress).translate("Hello world", "es")

    assert outcome.result.kind is ResultKind.FALLBACK
    assert outcome.result.source_label == DEMO_LABEL
    assert outcome.result.content == demo_translation("Hello world", "es")
    assert outcome.result.content.startswith("[ESPAÑOL] Hello world")
    assert outcome.title == "Translation to Spanish (Demo)"
    assert [call["method"] for call in session.calls] == ["GET", "POST"]
    assert notifier.of(Severity.INFO) == ["Demo translation shown - API services might be busy"]
    assert progress.visible is False


def test_first_provider_success_skips_second():
    notifier = RecordingNotificationSink()
    session = DummySession(
        get=[
            DummyResponse(
                200, {"responseStatus": 200, "responseData": {"translatedText": "Bonjour"}}
            )
        ]
    )

    outcome = _service(session, notifier).translate("Hello", "fr")

    assert outcome.result.content == "Bonjour"
    assert outcome.result.source_label == "MyMemory"
    assert [call["method"] for call in session.calls] == ["GET"]
    assert notifier.of(Severity.SUCCESS) == ["Successfully translated to French"]


def test_second_provider_used_after_network_error():
    session = DummySession(
        get=[requests.ConnectionError("offline")],
        post=[DummyResponse(200, {"translatedText": "Hallo"})],
    )

    outcome = _service(session).translate("Hello", "de")

    assert outcome.result.kind is ResultKind.REMOTE
    assert outcome.result.source_label == "LibreTranslate"
    assert outcome.result.content == "Hallo"


def test_generic_demo_template_for_languages_without_custom_text():
    text = demo_translation("Good morning", "ja")
    assert text.startswith("[JAPANESE] Good morning\n\n*This is a demo translation.")


def test_translate_rejections():
    service = TranslationService()
    with pytest.raises(EmptyInput):
        service.translate("   ", "es")
    with pytest.raises(TextTooLong):
        service.translate("a" * 2001, "es")
    with pytest.raises(UnsupportedLanguage):
        service.translate("Hello", "xx")


def test_translate_without_providers_is_demo_only():
    outcome = TranslationService().translate("Hello", "SW")
    assert outcome.language.code == "sw"
    assert outcome.result.content.startswith("[KISWAHILI] Hello")


def test_language_helpers():
    assert len(LANGUAGES) == 12
    assert get_language_name("hi") == "Hindi"
    assert get_language_name("xx") == "xx"
    assert get_language_flag("xx") == "🌐"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("the cat and the dog is in the house", "en"),
        ("el perro y la casa que", "es"),
        ("", "en"),
    ],
)
def test_detect_language_heuristic(text, expected):
    assert detect_language(text) == expected


def test_translator_raising_unexpectedly_still_yields_demo():
    def broken(request):
        raise TypeError("unexpected payload")

    service = TranslationService([CallableProvider(broken, name="broken")])

    outcome = service.translate("Hello world", "fr")

    assert outcome.result.kind is ResultKind.FALLBACK
    assert outcome.result.content == demo_translation("Hello world", "fr")
