"""Tests for the notif-format command line interface."""

import json
import locale

import pytest
from click.testing import CliRunner

from notif_format.cli import app as cli_app
from notif_format.cli import main
from notif_format.cli.validation import parse_timestamp_ms, check_output_path

NOW = 1733047200000
MINUTE = 60 * 1000


@pytest.fixture
def runner(monkeypatch):
    """CliRunner that leaves the process locale alone."""
    monkeypatch.setattr(cli_app, "activate_locale", lambda: None)
    return CliRunner()


class TestWhenCommand:
    """Tests for `notif-format when`."""

    def test_relative_label(self, runner):
        """Should print the relative time label."""
        result = runner.invoke(main, ["when", str(NOW - 5 * MINUTE), "--now", str(NOW)])
        assert result.exit_code == 0
        assert result.output == "5 mins ago\n"

    def test_default_now(self, runner):
        """Should default to the current time."""
        from notif_format.utils import current_time_ms

        result = runner.invoke(main, ["when", str(current_time_ms())])
        assert result.exit_code == 0
        assert result.output == "Just now\n"

    def test_invalid_timestamp(self, runner):
        """Should fail with an error for non-numeric input."""
        result = runner.invoke(main, ["when", "yesterday"])
        assert result.exit_code == 1
        assert "Error: invalid timestamp" in result.output


class TestCleanCommand:
    """Tests for `notif-format clean`."""

    def test_clean_argument(self, runner):
        """Should clean a body given as an argument."""
        result = runner.invoke(main, ["clean", "--app", "Google Chrome", "<a href=x>link</a>\n\nReal message"])
        assert result.exit_code == 0
        assert result.output == "Real message\n"

    def test_clean_stdin(self, runner):
        """Should read the body from stdin when no argument is given."""
        result = runner.invoke(main, ["clean", "-a", "brave"], input="<a>x</a>\n\nBody\n")
        assert result.exit_code == 0
        assert result.output == "Body\n"

    def test_without_app(self, runner):
        """Should leave the body unchanged without an app name."""
        result = runner.invoke(main, ["clean", "<a>x</a>\n\nBody"])
        assert result.exit_code == 0
        assert result.output == "<a>x</a>\n\nBody\n"


class TestShowCommand:
    """Tests for `notif-format show`."""

    def test_plain_when_piped(self, runner, sample_jsonl):
        """Should fall back to plain text when stdout is not a terminal."""
        result = runner.invoke(main, ["show", "--now", str(NOW), "--separator", "---"], input=sample_jsonl)
        assert result.exit_code == 0
        assert result.output.startswith("Google Chrome [5 mins ago]\nNew message\nHello there\n")
        assert "Slack [2 hours ago]" in result.output

    def test_jsonl_format(self, runner, sample_jsonl):
        """Should emit JSONL records."""
        result = runner.invoke(main, ["show", "--format", "jsonl", "--now", str(NOW)], input=sample_jsonl)
        assert result.exit_code == 0
        records = [json.loads(line) for line in result.output.splitlines()]
        assert records[0]["count"] == 2
        assert records[1]["body"] == "Hello there"

    def test_reads_file_and_writes_output(self, runner, sample_jsonl, tmp_path):
        """Should read a file argument and write to --output."""
        source = tmp_path / "in.jsonl"
        source.write_text(sample_jsonl, encoding="utf-8")
        target = tmp_path / "out.txt"

        result = runner.invoke(
            main, ["show", str(source), "--format", "terminal", "--now", str(NOW), "-o", str(target)]
        )
        assert result.exit_code == 0
        content = target.read_text(encoding="utf-8")
        assert "Notifications (2)" in content
        assert "Hello there" in content

    def test_reports_skipped_lines(self, runner):
        """Should mention invalid lines on stderr."""
        data = "garbage\n" + json.dumps({"timestamp": NOW, "body": "ok", "appName": "Slack"}) + "\n"
        result = runner.invoke(main, ["show", "--plain", "--now", str(NOW)], input=data)
        assert result.exit_code == 0
        assert "Skipped 1 invalid line(s)" in result.output
        assert "Slack [Just now]" in result.output

    def test_unwritable_output(self, runner, sample_jsonl, tmp_path):
        """Should fail when the output directory is missing."""
        target = tmp_path / "missing" / "out.txt"
        result = runner.invoke(main, ["show", "-o", str(target)], input=sample_jsonl)
        assert result.exit_code == 1
        assert "No such directory for output" in result.output

    def test_skips_undecodable_input(self, runner):
        """Should warn about invalid UTF-8 and still render the valid lines."""
        data = b"\xff\xfe\n" + json.dumps({"timestamp": NOW, "body": "ok", "appName": "Slack"}).encode("utf-8") + b"\n"
        result = runner.invoke(main, ["show", "--plain", "--now", str(NOW)], input=data)
        assert result.exit_code == 0
        assert "Undecodable line 1" in result.output
        assert "Slack [Just now]" in result.output

    def test_skips_non_string_fields(self, runner):
        """Should skip notifications whose body or summary is not text."""
        data = "\n".join([
            json.dumps({"timestamp": NOW, "body": 5, "appName": "Google Chrome"}),
            json.dumps({"timestamp": NOW, "body": "ok", "summary": 7}),
            json.dumps({"timestamp": NOW, "body": "fine", "appName": "Slack"}),
        ]) + "\n"
        result = runner.invoke(main, ["show", "--format", "plain", "--now", str(NOW)], input=data)
        assert result.exit_code == 0
        assert "Skipped 2 invalid line(s)" in result.output
        assert "Slack [Just now]\nfine" in result.output

    def test_invalid_now(self, runner, sample_jsonl):
        """Should reject a non-numeric --now."""
        result = runner.invoke(main, ["show", "--now", "soon"], input=sample_jsonl)
        assert result.exit_code == 1
        assert "invalid --now" in result.output


class TestActivateLocale:
    """Tests for activate_locale."""

    def test_warns_on_unknown_locale(self, monkeypatch, capsys):
        """Should warn instead of failing when the locale is unavailable."""
        def broken_setlocale(category, value=None):
            raise locale.Error("unsupported locale setting")

        monkeypatch.setattr(cli_app.locale, "setlocale", broken_setlocale)
        cli_app.activate_locale()
        assert "unsupported locale setting" in capsys.readouterr().err


class TestParseTimestampMs:
    """Tests for parse_timestamp_ms function."""

    def test_integer(self):
        """Should parse integer milliseconds."""
        assert parse_timestamp_ms("1733047200000") == (1733047200000, None)

    def test_float(self):
        """Should accept float notation."""
        assert parse_timestamp_ms("1733047200000.0") == (1733047200000, None)

    @pytest.mark.parametrize("value", ["abc", "nan", "inf"])
    def test_invalid(self, value):
        """Should return an error message for unusable values."""
        timestamp, error = parse_timestamp_ms(value)
        assert timestamp is None
        assert error


class TestCheckOutputPath:
    """Tests for check_output_path function."""

    def test_stdout(self):
        """Should accept stdout."""
        assert check_output_path("-") is None

    def test_new_file_in_existing_directory(self, tmp_path):
        """Should accept a new file in an existing directory."""
        assert check_output_path(str(tmp_path / "out.txt")) is None

    def test_existing_file(self, tmp_path):
        """Should accept overwriting an existing writable file."""
        target = tmp_path / "out.txt"
        target.write_text("old", encoding="utf-8")
        assert check_output_path(str(target)) is None

    def test_directory_rejected(self, tmp_path):
        """Should refuse to write over a directory."""
        assert "is a directory" in check_output_path(str(tmp_path))
