from inclusive_hub.config import HubConfig
from inclusive_hub.models import ResultKind
from inclusive_hub.session import HubSession, OutputSlot, TextStats, validate_input
from inclusive_hub.simplification import SimplificationEngine
from inclusive_hub.sinks import RecordingNotificationSink, Severity
from inclusive_hub.translation import TranslationService
from tests.utils import failing_session

TEXT = "Education helps everyone. Students learn in many ways. Some listen. Some read."


def _session(notifier: RecordingNotificationSink) -> HubSession:
    return HubSession(SimplificationEngine(), TranslationService(), notifier=notifier)


def test_text_stats_counts():
    stats = TextStats.from_text("Hello world. How are you?")
    assert stats == TextStats(characters=25, words=5, sentences=2)
    assert TextStats.from_text("   ") == TextStats(characters=3, words=0, sentences=0)


def test_validate_input_warns_over_limit():
    notifier = RecordingNotificationSink()
    assert validate_input("abc", 5, notifier)
    assert not validate_input("abcdef", 5, notifier)
    assert notifier.of(Severity.WARNING) == [
        "Text exceeds character limit. Please shorten your text."
    ]


def test_output_slot_discards_stale_completion():
    slot = OutputSlot()
    older = slot.begin()
    newer = slot.begin()

    assert slot.publish(newer, "new", "New", "translation")
    assert not slot.publish(older, "old", "Old", "simplification")
    assert slot.current is not None
    assert slot.current.content == "new"


def test_output_slot_later_invocation_overwrites_earlier():
    slot = OutputSlot()
    first = slot.begin()
    second = slot.begin()

    assert slot.publish(first, "first", "First", "simplification")
    assert slot.publish(second, "second", "Second", "simplification")
    assert slot.current is not None
    assert slot.current.content == "second"


def test_session_reports_rejections_instead_of_raising():
    notifier = RecordingNotificationSink()
    session = _session(notifier)

    assert session.simplify("Hi.", "medium") is None
    assert session.simplify("", "medium") is None
    assert session.simplify(TEXT, "extreme") is None
    assert session.translate("Hello", "xx") is None

    assert notifier.of(Severity.INFO) == ["Text is already very short"]
    assert notifier.of(Severity.WARNING) == ["Please enter some text to simplify"]
    assert len(notifier.of(Severity.ERROR)) == 2
    assert session.last_output == ""


def test_session_publishes_latest_output():
    notifier = RecordingNotificationSink()
    session = _session(notifier)

    outcome = session.simplify(TEXT, "heavy")
    assert outcome is not None
    assert session.last_output == outcome.output
    assert session.output_type == "simplification"
    assert session.output_title == "Simplified Text - Heavy Simplification"

    translated = session.translate("Hello", "fr")
    assert translated is not None
    assert session.output_type == "translation"
    assert session.output_title == "Translation to French (Demo)"

    session.clear_output()
    assert session.last_output == ""
    assert session.output_type == ""


def test_session_from_config_degrades_when_every_remote_call_fails():
    notifier = RecordingNotificationSink()
    session = HubSession.from_config(
        HubConfig(), notifier=notifier, http=failing_session(500)
    )

    simplified = session.simplify(TEXT, "medium")
    translated = session.translate("Hello", "it")

    assert simplified is not None and simplified.result.kind is ResultKind.FALLBACK
    assert translated is not None and translated.result.kind is ResultKind.FALLBACK
    assert notifier.of(Severity.ERROR) == []
