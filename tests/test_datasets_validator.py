from pathlib import Path
from wordler.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_wordlist(p)
    assert rep["passed"] is True
    assert rep["kept"] == 3 and rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "kept=3" in s and s.endswith("OK")


def test_validate_wordlist_reports_dropped_and_duplicates(tmp_path: Path):
    p = tmp_path / "words"
    _write(p, ["crane", "CRANE", "cranes", "???", "raise"])

    rep = validate_wordlist(p)
    assert rep["passed"] is True
    assert rep["tokens"] == 5
    assert rep["dropped"] == 2
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("ASCII letters" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_and_empty(tmp_path: Path):
    rep = validate_wordlist(tmp_path / "missing")
    assert rep["passed"] is False and rep["exists"] is False

    p = tmp_path / "short"
    _write(p, ["cat", "dog"])
    rep = validate_wordlist(p)
    assert rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_bad_encoding(tmp_path: Path):
    p = tmp_path / "latin1"
    p.write_bytes(b"caf\xe9s crane")
    rep = validate_wordlist(p)
    assert rep["passed"] is False
    assert rep["sha256"]


def test_validate_wordlist_directory_is_not_a_word_list(tmp_path: Path):
    d = tmp_path / "adir"
    d.mkdir()
    rep = validate_wordlist(d)
    assert rep["passed"] is False
    assert rep["sha256"] == ""
    assert any("not a regular file" in msg for msg in rep["issues"])
