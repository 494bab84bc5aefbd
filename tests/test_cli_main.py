"""Tests for the batch tag checker CLI."""

import io
import sys
from pathlib import Path

import pytest

from bgreflector.cli_main import EXIT_BAD_INPUT, EXIT_ISSUES, EXIT_OK, main


@pytest.fixture
def files(tmp_path: Path):
    def _make(source: str, target: str):
        src = tmp_path / "source.txt"
        dst = tmp_path / "target.txt"
        src.write_text(source, encoding="utf-8")
        dst.write_text(target, encoding="utf-8")
        return [str(src), str(dst), "--config", str(tmp_path / "config.json")]
    return _make


def test_clean_pair_exits_ok(files, capsys: pytest.CaptureFixture) -> None:
    args = files("<Icon KeyAction='A'/> 공격", "<Icon KeyAction='A'/> Attack")
    assert main(args) == EXIT_OK
    assert "PASS" in capsys.readouterr().out


def test_missing_icon_exits_with_issues(files, capsys: pytest.CaptureFixture) -> None:
    args = files("<Icon KeyAction='A'/>", "Attack")
    assert main(args + ["--stats"]) == EXIT_ISSUES
    out = capsys.readouterr().out
    assert "Line 1: <Icon> tag missing or damaged in target → <Icon KeyAction='A'/>" in out
    assert "Source tags: Icon 1" in out


def test_truncated_policy_flag(files) -> None:
    args = files("<Icon KeyAction='A'/>", "<Icon KeyAction='A'/ >")
    # the target tag is complete but spelled differently; suppressed by default
    assert main(args) == EXIT_OK
    assert main(args + ["--no-truncated-policy"]) == EXIT_ISSUES


def test_family_option(files) -> None:
    args = files("<param Name='n'/>", "")
    assert main(args) == EXIT_OK
    assert main(args + ["--family", "param"]) == EXIT_ISSUES
    assert main(args + ["--family", "bogus"]) == EXIT_BAD_INPUT


def test_unreadable_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "nope2.txt")]) == EXIT_BAD_INPUT


def test_output_survives_non_utf8_console(files, monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.BytesIO()
    console = io.TextIOWrapper(buffer, encoding="cp1252", errors="strict")
    monkeypatch.setattr(sys, "stdout", console)

    assert main(files("<Icon KeyAction='A'/>", "Attack")) == EXIT_ISSUES
    console.flush()
    assert "• Line 1:" in buffer.getvalue().decode("utf-8")
