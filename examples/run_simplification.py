"""Minimal example showing the session API with injected sinks."""

from __future__ import annotations

import random

from inclusive_hub.config import load_config
from inclusive_hub.models import SimplificationOptions
from inclusive_hub.session import HubSession
from inclusive_hub.sinks import RecordingNotificationSink


def main() -> None:
    config = load_config()
    # Keep the example offline; remove this line to try the remote summarizer first.
    config.simplification.remote_enabled = False
    notifier = RecordingNotificationSink()
    session = HubSession.from_config(config, notifier=notifier, rng=random.Random(4))

    sample_text = (
        "Education is the most powerful weapon which you can use to change the world. "
        "Quality education should be accessible to everyone, regardless of their "
        "abilities, language, or learning preferences. Students with visual "
        "impairments can listen to text. Those who speak different languages can get "
        "translations, and anyone struggling with complex content can get simplified "
        "versions."
    )
    outcome = session.simplify(
        sample_text, "heavy", SimplificationOptions(add_examples=True)
    )
    if outcome is None:
        print(notifier.messages)
        return
    print(outcome.title)
    print(outcome.output)
    print(outcome.summary_message())

    translated = session.translate("Learning never stops.", "sw")
    if translated is not None:
        print(f"\n{translated.title}\n{translated.result.content}")


if __name__ == "__main__":
    main()
