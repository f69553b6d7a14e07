from pathlib import Path
from searchwordle.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "allowed_answers.txt"
    gue = tmp_path / "allowed_guesses.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(gue, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(ans, gue)
    assert rep["passed"] is True
    assert rep["answers_in_guesses"] is True
    assert rep["answers"]["count"] == 3
    assert len(rep["answers"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆guesses=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_invalid_lines(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    gue = tmp_path / "guesses.txt"
    ans.write_text("crane\ncranes\n???\n\nCRANE\n", encoding="utf-8")
    _write(gue, ["slate"])

    rep = validate_wordlists(ans, gue)
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_answers_missing_from_guesses_is_informational(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    gue = tmp_path / "guesses.txt"
    _write(ans, ["crane", "raise"])
    _write(gue, ["slate"])

    rep = validate_wordlists(ans, gue)
    assert rep["answers_in_guesses"] is False
    assert rep["passed"] is True
    assert any("absent from guesses" in msg for msg in rep["issues"])


def test_missing_file(tmp_path: Path):
    gue = tmp_path / "guesses.txt"
    _write(gue, ["slate"])

    rep = validate_wordlists(tmp_path / "nope.txt", gue)
    assert rep["passed"] is False
    assert rep["answers"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_duplicates_flagged(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    gue = tmp_path / "guesses.txt"
    _write(ans, ["crane", "crane"])
    _write(gue, ["slate"])

    rep = validate_wordlists(ans, gue)
    assert rep["answers"]["unique_count"] == 1
    assert "answers contains duplicate lines" in rep["issues"]
