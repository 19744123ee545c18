from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import NoReturn, TypedDict

import click
import typer
import yaml

from .config import HubConfig, load_config
from .models import ReadabilityStats, SimplificationOptions
from .profiles import PROFILES, profile_names
from .readability import analyze as analyze_text
from .session import HubSession
from .sinks import RecordingNotificationSink, Severity
from .translation import LANGUAGES

app = typer.Typer(help="Inclusive Hub accessibility text CLI.", no_args_is_help=True)


class SimplifyPayload(TypedDict):
    output: str
    simplified: str
    profile: str
    source: str
    kind: str
    improvement_percent: int
    before: dict[str, float | int]
    after: dict[str, float | int]


class TranslatePayload(TypedDict):
    output: str
    language: str
    source: str
    kind: str


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log provider attempts and fallbacks."
    ),
) -> None:
    """Read-aloud, translation and simplification helpers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def simplify(
    text: str | None = typer.Argument(None, help="Text to simplify."),
    input_path: Path | None = typer.Option(
        None, "--input-path", "-i", exists=True, readable=True, dir_okay=False
    ),
    profile: str | None = typer.Option(
        None,
        "--profile",
        "-p",
        click_type=click.Choice(profile_names(), case_sensitive=False),
        help="Simplification profile (defaults to the configured one).",
    ),
    add_examples: bool = typer.Option(
        False, "--add-examples", help="Append an illustrative example."
    ),
    show_original: bool = typer.Option(
        False, "--show-original", help="Show original and simplified side by side."
    ),
    no_remote: bool = typer.Option(
        False, "--no-remote", help="Skip remote summarizers; rule-based only."
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for example selection."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON payload."),
) -> None:
    """Simplify text and report readability before and after."""
    cfg = load_config(config)
    if no_remote:
        cfg.simplification.remote_enabled = False
    notices = RecordingNotificationSink()
    session = _build_session(cfg, seed, notices)
    source_text = _resolve_text(text, input_path)
    options = SimplificationOptions(add_examples=add_examples, show_original=show_original)

    outcome = session.simplify(
        source_text, profile or cfg.simplification.default_profile, options
    )
    if outcome is None:
        _exit_with_notices(notices)

    if as_json:
        payload: SimplifyPayload = {
            "output": outcome.output,
            "simplified": outcome.simplified,
            "profile": outcome.profile.name,
            "source": outcome.result.source_label,
            "kind": outcome.result.kind.value,
            "improvement_percent": outcome.improvement_percent,
            "before": outcome.before.to_dict(),
            "after": outcome.after.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    typer.echo(outcome.output)
    typer.echo(f"\n{outcome.title} ({outcome.result.source_label})")
    typer.echo(outcome.summary_message())


@app.command()
def translate(
    text: str | None = typer.Argument(None, help="English text to translate."),
    target: str = typer.Option(
        ...,
        "--target",
        "-t",
        click_type=click.Choice(list(LANGUAGES), case_sensitive=False),
        help="Target language code.",
    ),
    input_path: Path | None = typer.Option(
        None, "--input-path", "-i", exists=True, readable=True, dir_okay=False
    ),
    no_remote: bool = typer.Option(
        False, "--no-remote", help="Skip remote translators; demo output only."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON payload."),
) -> None:
    """Translate text, falling back to demo output when providers fail."""
    cfg = load_config(config)
    if no_remote:
        cfg.translation.remote_enabled = False
    notices = RecordingNotificationSink()
    session = _build_session(cfg, None, notices)
    source_text = _resolve_text(text, input_path)

    outcome = session.translate(source_text, target)
    if outcome is None:
        _exit_with_notices(notices)

    if as_json:
        payload: TranslatePayload = {
            "output": outcome.result.content,
            "language": outcome.language.code,
            "source": outcome.result.source_label,
            "kind": outcome.result.kind.value,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    typer.echo(outcome.result.content)
    typer.echo(f"\n{outcome.title}")


@app.command()
def analyze(
    text: str | None = typer.Argument(None, help="Text to analyze."),
    input_path: Path | None = typer.Option(
        None, "--input-path", "-i", exists=True, readable=True, dir_okay=False
    ),
) -> None:
    """Print readability statistics as JSON."""
    stats: ReadabilityStats = analyze_text(_resolve_text(text, input_path))
    typer.echo(json.dumps(stats.to_dict(), indent=2))


@app.command()
def profiles() -> None:
    """List simplification profiles."""
    for profile in PROFILES.values():
        typer.echo(
            f"{profile.name:<7} {profile.label}: {profile.description} "
            f"(max {profile.max_sentences} sentences, "
            f"{profile.max_words_per_sentence} words each)"
        )


@app.command()
def languages() -> None:
    """List supported translation targets."""
    for language in LANGUAGES.values():
        typer.echo(f"{language.code}  {language.flag} {language.name}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = HubConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _build_session(
    config: HubConfig, seed: int | None, notices: RecordingNotificationSink
) -> HubSession:
    rng = random.Random(seed) if seed is not None else None
    try:
        return HubSession.from_config(config, notifier=notices, rng=rng)
    except RuntimeError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _exit_with_notices(notices: RecordingNotificationSink) -> NoReturn:
    """Echo a rejected request's notices; informational ones alone exit cleanly."""
    failed = False
    for severity, message in notices.messages:
        typer.echo(message, err=True)
        failed = failed or severity in (Severity.WARNING, Severity.ERROR)
    raise typer.Exit(code=1 if failed else 0)


def _resolve_text(text: str | None, input_path: Path | None) -> str:
    """Pick the positional text or the file contents; exactly one is required."""
    if input_path is not None:
        if text is not None:
            raise typer.BadParameter("Pass either TEXT or --input-path, not both.")
        return input_path.read_text(encoding="utf-8")
    if text is None:
        raise typer.BadParameter("Provide TEXT or --input-path.")
    return text


if __name__ == "__main__":
    main()
