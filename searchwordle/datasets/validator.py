"""
Word-list validator.

What this module does:
- Check a pair of word lists: the answers file (secret pool) and the guesses
  file (extra words accepted as input).
- Flag malformed lines (blank, non a–z, wrong length) and duplicates; compute
  SHA-256 of the raw files.
- Report whether every answer also appears in the guesses file. The lexicon
  loader unions the two lists, so a miss here is informational only.
- Return a JSON-serializable dict plus a one-line console summary.

Typical use:
    from searchwordle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("allowed_answers.txt", "allowed_guesses.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from searchwordle.engine.scoring import WORD_LENGTH


# -----------------------------
# Report dataclasses
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int = 0          # valid words
    unique_count: int = 0   # distinct valid words
    invalid_lines: int = 0
    sha256: str = ""
    invalid_examples: List[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    guesses: FileReport
    answers_in_guesses: bool
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], List[str]]:
    """
    Split a file's lines into (valid_words, invalid_lines).

    A valid line is a single lowercase a–z token of length N once trailing
    whitespace is removed. Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid: List[str] = []
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            if len(w) == N and w.isascii() and w.isalpha() and w.islower():
                valid.append(w)
            else:
                invalid.append(w)
    return valid, invalid


def _file_report(path: Path, N: int) -> Tuple[FileReport, List[str]]:
    if not path.is_file():
        return FileReport(path=str(path), exists=False), []
    words, bad = _scan(path, N)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=len(bad),
        sha256=_sha256_file(path),
        invalid_examples=bad[:5],
    )
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: str | Path, guesses_path: str | Path,
                       N: int = WORD_LENGTH) -> Dict:
    """
    Validate the answers/guesses word lists for length N.

    Returns a dict (see ValidationReport) whose `passed` flag requires both
    files to exist, be non-empty and contain no invalid lines.
    """
    issues: List[str] = []

    ans_rep, answers = _file_report(Path(answers_path), N)
    gue_rep, guesses = _file_report(Path(guesses_path), N)

    for label, rep in (("answers", ans_rep), ("guesses", gue_rep)):
        if not rep.exists:
            issues.append(f"{label} file not found: {rep.path}")
            continue
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s) "
                          f"(e.g., {rep.invalid_examples})")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    missing = sorted(set(answers) - set(guesses))
    if missing and gue_rep.exists:
        issues.append(f"{len(missing)} answer(s) absent from guesses file "
                      f"(e.g., {missing[:5]}); they are still accepted as guesses")

    passed = (
            ans_rep.exists and gue_rep.exists
            and ans_rep.count > 0 and gue_rep.count > 0
            and ans_rep.invalid_lines == 0 and gue_rep.invalid_lines == 0
    )

    rep = ValidationReport(
        N=N,
        answers=ans_rep,
        guesses=gue_rep,
        answers_in_guesses=not missing,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.

        N=5 | answers=120 (uniq=120, sha=abc123...) | guesses=80 (uniq=80, sha=def456...) | answers⊆guesses=True | OK
    """
    a = report["answers"]
    g = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| guesses={g['count']} (uniq={g['unique_count']}, sha={g['sha256'][:12]}) "
        f"| answers⊆guesses={report['answers_in_guesses']} | {status}"
    )
