"""Tests for tolerant file reading."""

from pathlib import Path

from bgreflector.utils.encoding import read_text_safely


def test_reads_utf8_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes("\ufeff<PlayerName/>님".encode("utf-8"))
    assert read_text_safely(path) == "<PlayerName/>님"


def test_reads_utf16_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "b.txt"
    path.write_bytes("번역 <Icon/>".encode("utf-16"))
    assert read_text_safely(path) == "번역 <Icon/>"


def test_undecodable_bytes_do_not_raise(tmp_path: Path) -> None:
    path = tmp_path / "c.txt"
    path.write_bytes(b"abc \xff\xfe\xfd def")
    assert isinstance(read_text_safely(path), str)


def test_missing_file_returns_none(tmp_path: Path) -> None:
    assert read_text_safely(tmp_path / "missing.txt") is None
