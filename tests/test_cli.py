import json
from pathlib import Path

from typer.testing import CliRunner

from inclusive_hub.cli import app

runner = CliRunner()

SCENARIO = (
    "The quick fact. Is this clear? A "
    + " ".join(["very"] * 30)
    + " long sentence about nothing important at all exceeding thirty words easily now."
)


def test_cli_simplify_json_uses_rule_based_path():
    """simplify --no-remote emits the extractive result and both stat blocks."""
    result = runner.invoke(
        app, ["simplify", "--no-remote", "--profile", "heavy", "--json", SCENARIO]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["kind"] == "fallback"
    assert payload["profile"] == "heavy"
    assert "very" not in payload["simplified"]
    assert payload["simplified"].endswith(".")
    assert payload["before"]["sentence_count"] == 3
    assert payload["after"]["sentence_count"] == 2


def test_cli_simplify_reads_input_file(tmp_path: Path):
    source = tmp_path / "input.txt"
    source.write_text(SCENARIO, encoding="utf-8")
    result = runner.invoke(
        app,
        ["simplify", "--no-remote", "--input-path", str(source), "--show-original"],
    )
    assert result.exit_code == 0
    assert "ORIGINAL TEXT:" in result.stdout
    assert "Readability improved by" in result.stdout


def test_cli_simplify_trivial_input_is_not_an_error():
    result = runner.invoke(app, ["simplify", "--no-remote", "Hi."])
    assert result.exit_code == 0
    assert "already very short" in result.output


def test_cli_simplify_empty_input_fails():
    result = runner.invoke(app, ["simplify", "--no-remote", "   "])
    assert result.exit_code == 1
    assert "Please enter some text" in result.output


def test_cli_simplify_rejects_unknown_profile():
    result = runner.invoke(app, ["simplify", "--profile", "extreme", SCENARIO])
    assert result.exit_code != 0


def test_cli_translate_demo_when_remote_disabled():
    result = runner.invoke(
        app, ["translate", "--no-remote", "--target", "es", "--json", "Hello world"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["kind"] == "fallback"
    assert payload["language"] == "es"
    assert payload["output"].startswith("[ESPAÑOL] Hello world")


def test_cli_translate_rejects_long_text(tmp_path: Path):
    config_path = tmp_path / "hub.yaml"
    config_path.write_text("translation:\n  max_input_length: 5\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["translate", "--no-remote", "-t", "fr", "--config", str(config_path), "Hello world"],
    )
    assert result.exit_code == 1
    assert "too long" in result.output


def test_cli_analyze_outputs_stats():
    result = runner.invoke(app, ["analyze", "The cat sat. The dog ran."])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["word_count"] == 6
    assert payload["readability_score"] == 3.2


def test_cli_listing_commands():
    profiles = runner.invoke(app, ["profiles"])
    languages = runner.invoke(app, ["languages"])
    config = runner.invoke(app, ["print-config"])

    assert profiles.exit_code == 0 and "heavy" in profiles.stdout
    assert languages.exit_code == 0 and "Swahili" in languages.stdout
    assert config.exit_code == 0 and "request_timeout" in config.stdout


def test_cli_requires_text_or_input_path():
    result = runner.invoke(app, ["analyze"])
    assert result.exit_code != 0


def test_cli_simplify_reports_bad_configured_profile(tmp_path: Path):
    config_path = tmp_path / "hub.yaml"
    config_path.write_text("simplification:\n  default_profile: extreme\n", encoding="utf-8")
    result = runner.invoke(
        app, ["simplify", "--no-remote", "--config", str(config_path), SCENARIO]
    )
    assert result.exit_code == 1
    assert "Unknown simplification profile 'extreme'" in result.output
