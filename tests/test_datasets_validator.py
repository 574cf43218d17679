from pathlib import Path

import pytest
from minimaxle.datasets import load_words, pretty_summary, validate_wordlists


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_words_filters_and_uppercases(tmp_path: Path):
    p = tmp_path / "solutions.txt"
    p.write_text("crane\r\nTrace\n\nabc\ncr4ne\n  grace  \n crane \nÉCLAT\ncranes\n", encoding="utf-8")
    # padded lines have the wrong length and are dropped, not trimmed
    assert load_words(p) == ["CRANE", "TRACE"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")


def test_load_words_undecodable(tmp_path: Path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"crane\n\xff\xfe\xfa\n")
    with pytest.raises(UnicodeDecodeError):
        load_words(p)


def test_validate_wordlists_happy_path(tmp_path: Path):
    sol = tmp_path / "all_solutions.txt"
    gue = tmp_path / "all_guesses.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(gue, ["CRANE", "RAISE", "STARE", "TRACE", "CARED"])

    rep = validate_wordlists(str(sol), str(gue))
    assert rep["passed"] is True
    assert rep["solutions_subset_guesses"] is True
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "solutions⊆guesses=True" in s and s.endswith("OK")


def test_validate_wordlists_reports_dropped_and_duplicates(tmp_path: Path):
    sol = tmp_path / "all_solutions.txt"
    gue = tmp_path / "all_guesses.txt"
    sol.write_text("crane\ncranes\n???\nCRANE\n", encoding="utf-8")
    _write(gue, ["crane", "trace"])

    rep = validate_wordlists(str(sol), str(gue))
    assert rep["solutions"]["dropped_lines"] == 2
    assert rep["solutions"]["unique_count"] == 1
    assert any("dropped" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    # the loader copes with both, so the pair still passes
    assert rep["passed"] is True


def test_validate_wordlists_subset_violation(tmp_path: Path):
    sol = tmp_path / "all_solutions.txt"
    gue = tmp_path / "all_guesses.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(gue, ["crane", "stare"])

    rep = validate_wordlists(str(sol), str(gue))
    assert rep["passed"] is False
    assert rep["solutions_subset_guesses"] is False
    assert any("subset" in msg and "RAISE" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    gue = tmp_path / "all_guesses.txt"
    _write(gue, ["crane"])
    rep = validate_wordlists(str(tmp_path / "missing.txt"), str(gue))
    assert rep["passed"] is False
    assert rep["solutions"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
