from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str) -> List[str]:
    """
    Read a one-word-per-line UTF-8 list. Surrounding whitespace (including
    CR/LF) is stripped and blank lines are skipped; order is preserved.

    Raises FileNotFoundError if the path doesn't exist and UnicodeDecodeError
    if the bytes are not valid UTF-8.
    """
    p = Path(p)
    if not p.is_file():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        return [w for w in (ln.strip() for ln in f) if w]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file with a trailing newline, creating parent
    directories. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
