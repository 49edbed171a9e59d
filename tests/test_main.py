"""Tests for the command line entry point."""

from editcore.__main__ import main
from editcore.core.highlighting import HighlightType


def test_prints_highlighted_file(tmp_path, capsys):
    path = tmp_path / "main.rs"
    path.write_text("fn main() {}\nlet x = 1;\n", encoding="utf-8")

    assert main([str(path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].startswith(HighlightType.PRIMARY_KEYWORDS.to_escape() + "fn")


def test_find_prints_matching_rows(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbeta\nalphabet\n", encoding="utf-8")

    assert main([str(path), "--find", "alpha", "--line-numbers"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].startswith("     1 ")
    assert out[1].startswith("     3 ")
    assert HighlightType.MATCH.to_escape() in out[1]


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1

    assert "Error loading" in capsys.readouterr().err


def test_file_that_is_not_utf8(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ok\n\xff\xfe bad\n")

    assert main([str(path)]) == 1

    assert "Error loading" in capsys.readouterr().err
