"""Tests for the command line entry point."""
import logging
from unittest.mock import patch

import pytest

from main import THRESHOLD_ORDER_ERROR, main, parse_args, resolve_analysis_settings
from src.config import Settings, logging_setup

CONFIG_YAML = """\
analysis:
  positive_threshold: 0.05
  negative_threshold: -0.05
  include_compound: true
  include_individual: true
logging:
  level: error
  file: ""
"""


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    """Run each test from an empty directory with fresh logging state."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SENTIMENT_CONFIG", raising=False)
    monkeypatch.setattr(logging_setup, "_configured", False)
    with patch("main.load_dotenv"):
        yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_parse_args_subcommand():
    args = parse_args(["analyze-file", "notes.txt", "--config", "custom.yaml", "-v"])

    assert args.command == "analyze-file"
    assert args.input == "notes.txt"
    assert str(args.config) == "custom.yaml"
    assert args.verbose is True
    assert args.pos_threshold is None


def test_parse_args_legacy_form():
    args = parse_args(["notes.txt", "--file", "--pos-threshold", "0.2"])

    assert args.command == "analyze-file"
    assert args.input == "notes.txt"
    assert args.pos_threshold == 0.2


def test_parse_args_legacy_text():
    args = parse_args(["I love this!"])

    assert args.command == "analyze"
    assert str(args.config) == "config.yaml"


def test_parse_args_config_from_environment(monkeypatch):
    monkeypatch.setenv("SENTIMENT_CONFIG", "/etc/sentiment.yaml")

    assert str(parse_args(["analyze", "text"]).config) == "/etc/sentiment.yaml"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "sentiment 1.0" in capsys.readouterr().out


def test_analyze_positive_text(capsys):
    assert main(["analyze", "I love this!"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Positive: I love this! (")


def test_analyze_negative_text(capsys):
    assert main(["I hate this."]) == 0

    assert capsys.readouterr().out.startswith("Negative: I hate this. (-")


def test_missing_config_falls_back_to_defaults(capsys):
    assert main(["analyze", "The sky is blue.", "--config", "nope.yaml"]) == 0

    captured = capsys.readouterr()
    assert captured.out == "Neutral: The sky is blue. (0.000)\n"
    assert "nope.yaml" in captured.err
    assert "Using defaults" in captured.err


def test_config_file_enables_breakdown(tmp_path, capsys):
    (tmp_path / "config.yaml").write_text(CONFIG_YAML)

    assert main(["analyze", "I love this!"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("  pos: ")


def test_verbose_enables_breakdown(capsys):
    assert main(["analyze", "I love this!", "-v"]) == 0

    assert "  pos: " in capsys.readouterr().out


def test_analyze_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\nGreat day!\n  \nTerrible news\n")

    assert main(["analyze-file", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Line 2: Positive: Great day!")
    assert lines[1].startswith("Line 4: Negative: Terrible news")


def test_legacy_file_flag(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("Great day!\n")

    assert main([str(path), "--file"]) == 0

    assert capsys.readouterr().out.startswith("Line 1: Positive: Great day!")


def test_undecodable_line_reported_on_stderr(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_bytes(b"\xff\xfe\nGreat day!\n")

    assert main(["analyze-file", str(path)]) == 0

    captured = capsys.readouterr()
    assert "Line 1: Error reading - " in captured.err
    assert captured.out.startswith("Line 2: Positive: Great day!")


def test_missing_input_file_exits_with_error(capsys):
    assert main(["analyze-file", "missing.txt"]) == 1

    err = capsys.readouterr().err
    assert "Error: Cannot read missing.txt" in err


def test_invalid_thresholds_exit_before_analysis(capsys):
    with patch("main.SentimentAnalyzer") as mock_analyzer:
        exit_code = main(["I love this!", "--pos-threshold", "0.1", "--neg-threshold", "0.2"])

    assert exit_code == 1
    mock_analyzer.assert_not_called()
    captured = capsys.readouterr()
    assert THRESHOLD_ORDER_ERROR in captured.err
    assert captured.out == ""


def test_invalid_thresholds_from_config_exit(tmp_path, capsys):
    (tmp_path / "config.yaml").write_text(CONFIG_YAML.replace("positive_threshold: 0.05", "positive_threshold: -0.5"))

    assert main(["analyze", "I love this!"]) == 1
    assert THRESHOLD_ORDER_ERROR in capsys.readouterr().err


def test_nan_threshold_rejected(capsys):
    assert main(["analyze", "I love this!", "--pos-threshold", "nan"]) == 1

    captured = capsys.readouterr()
    assert THRESHOLD_ORDER_ERROR in captured.err
    assert captured.out == ""


def test_nan_threshold_in_config_rejected(tmp_path, capsys):
    (tmp_path / "config.yaml").write_text(CONFIG_YAML.replace("negative_threshold: -0.05", "negative_threshold: .nan"))

    assert main(["analyze", "I love this!"]) == 1
    assert THRESHOLD_ORDER_ERROR in capsys.readouterr().err


def test_successful_run_keeps_stderr_quiet(tmp_path, capsys):
    (tmp_path / "config.yaml").write_text(CONFIG_YAML.replace("level: error", "level: info"))

    assert main(["analyze", "I love this!"]) == 0

    captured = capsys.readouterr()
    assert captured.out.startswith("Positive: I love this!")
    assert captured.err == ""


def test_resolve_analysis_settings_returns_none_for_bad_order():
    args = parse_args(["analyze", "text", "--pos-threshold", "-0.2", "--neg-threshold", "0.2"])

    assert resolve_analysis_settings(Settings.default().analysis, args) is None


def test_custom_thresholds_change_label(capsys):
    assert main(["analyze", "It was okay.", "--pos-threshold", "0.9", "--neg-threshold", "-0.9"]) == 0

    assert capsys.readouterr().out.startswith("Neutral: It was okay.")
