"""
Report writers for offline replays.

Responsibilities:
- write_csv:      one row per evaluated token (tidy, spreadsheet friendly).
- write_manifest: JSON manifest with config, word-list report and metadata.
- timestamp_id:   compact UTC run id.
- git_commit_or_unknown: short commit hash when available.

Clues are prefixed with an apostrophe so spreadsheet apps keep strings such
as "-GYY-" as text instead of reading them as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["session_id", "query", "guess", "clue", "rendered", "solved", "error"]


def _excel_safe(clue: str) -> str:
    return "'" + clue if clue else clue


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize replay rows to CSV.

    Each row dict carries the keys in FIELDS; missing keys are written empty.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in results:
            row = {k: r.get(k) or "" for k in FIELDS}
            row["clue"] = _excel_safe(row["clue"])
            row["solved"] = bool(r.get("solved"))
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run manifest (run_id, git_commit, config, wordlists, counts) as JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """UTC timestamp for filenames, e.g. 20261019T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the working tree, or 'unknown' outside a repo."""
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
