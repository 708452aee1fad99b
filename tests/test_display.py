"""Tests for console output helpers and the confirmation prompt."""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from ghvar_sync.auth.github_auth import mask_token
from ghvar_sync.display import truncate_value
from ghvar_sync.models import DiffResult, Entry, VariableChange
from ghvar_sync.prompt import ConsolePrompt, is_affirmative


@pytest.mark.parametrize("token,expected", [
    ("", "****"),
    ("short", "****"),
    ("12345678", "****"),
    ("123456789", "1234*6789"),
    ("ghp_abcdefghijklmnopqrstuvwxyz", "ghp_" + "*" * 22 + "wxyz"),
])
def test_mask_token(token, expected):
    assert mask_token(token) == expected


def test_truncate_value():
    assert truncate_value("short", 10) == "short"
    assert truncate_value("x" * 10, 10) == "x" * 10
    assert truncate_value("x" * 11, 10) == "x" * 7 + "..."


@pytest.mark.parametrize("answer,expected", [
    ("yes", True), ("y", True), ("YES", True), (" Y \n", True),
    ("no", False), ("", False), ("yess", False), ("ok", False),
])
def test_is_affirmative(answer, expected):
    assert is_affirmative(answer) is expected


def test_console_prompt_reads_answer():
    prompt = ConsolePrompt(Console(file=io.StringIO()))
    with patch("builtins.input", return_value="Yes"):
        assert prompt.confirm("Proceed? ")


@pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
def test_console_prompt_read_failure_declines(error):
    prompt = ConsolePrompt(Console(file=io.StringIO()))
    with patch("builtins.input", side_effect=error):
        assert prompt.confirm("Proceed? ") is False


def test_detailed_diff_truncates_values(reporter, output):
    diff = DiffResult(
        new=[Entry("LONG", "n" * 100)],
        updated=[VariableChange("CHANGED", "o" * 100, "short")],
    )

    reporter.detailed_diff(diff)

    text = output.getvalue()
    assert "+ LONG = " + "n" * 77 + "..." in text
    assert "  - " + "o" * 57 + "..." in text
    assert "  + short" in text


def test_detailed_diff_values_are_not_markup(reporter, output):
    reporter.detailed_diff(DiffResult(new=[Entry("STYLE", "[bold]x[/bold]")]))
    assert "+ STYLE = [bold]x[/bold]" in output.getvalue()


def test_summary_hides_remote_only_when_none(reporter, output):
    reporter.diff_summary(DiffResult(new=[Entry("A", "1")]))
    assert "Remote only" not in output.getvalue()


def test_summary_and_detail_show_remote_only(reporter, output):
    diff = DiffResult(remote_only=[Entry("OLD", "x")])
    reporter.diff_summary(diff)
    reporter.detailed_diff(diff)
    text = output.getvalue()
    assert "Remote only" in text
    assert "will NOT be deleted" in text
    assert "- OLD = x" in text


def test_unchanged_are_counted_not_listed(reporter, output):
    reporter.detailed_diff(DiffResult(unchanged=[Entry("SAME", "1"), Entry("ALSO", "2")]))
    text = output.getvalue()
    assert "2 variable(s) with no changes" in text
    assert "SAME" not in text
