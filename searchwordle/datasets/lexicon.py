"""
The game's vocabulary.

A Lexicon holds two logical sets:
  - answers : N-letter words that can be drawn as a session's secret
  - guesses : every word accepted as input (always includes all answers)

Entries are lowercased so they compare equal to normalized guesses. Answers of
the wrong length stay acceptable as guesses but are never drawn.

It is loaded once at startup and only read afterwards, so a single instance
can be shared by every session and request.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple

from searchwordle.engine.scoring import WORD_LENGTH
from .io import read_words
from .validator import validate_wordlists

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
ANSWERS_FILE = "allowed_answers.txt"
GUESSES_FILE = "allowed_guesses.txt"


class LoadError(RuntimeError):
    """A word-list source is missing, unreadable or unusable."""


def default_paths() -> Tuple[Path, Path]:
    """(answers, guesses) paths of the lists bundled with the package."""
    return DATA_DIR / ANSWERS_FILE, DATA_DIR / GUESSES_FILE


@dataclass(frozen=True)
class Lexicon:
    answers: Tuple[str, ...]
    guesses: FrozenSet[str]

    @classmethod
    def from_words(cls, answers: Iterable[str], guesses: Iterable[str] = (),
                   N: int = WORD_LENGTH) -> "Lexicon":
        """
        Build from in-memory lists. Words are lowercased and every answer is
        accepted as a guess; only N-letter answers can be drawn as a secret.

        Raises LoadError if no N-letter answer is left.
        """
        ans = [w.lower() for w in answers]
        playable = tuple(dict.fromkeys(w for w in ans if len(w) == N))  # dedupe, keep order
        if not playable:
            raise LoadError(f"no {N}-letter answers to draw a secret from")
        return cls(answers=playable, guesses=frozenset(w.lower() for w in guesses) | frozenset(ans))

    def is_valid_guess(self, word: str) -> bool:
        return word in self.guesses

    def pick_secret(self, rng: Optional[random.Random] = None) -> str:
        """Uniform draw from the answers; every call is independent."""
        rng = rng or random.Random()
        return rng.choice(self.answers)


def _read(path: Path, label: str):
    try:
        return read_words(path)
    except FileNotFoundError as e:
        raise LoadError(f"{label} list not found: {path}") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"{label} list is not valid UTF-8: {path} ({e.reason})") from e
    except OSError as e:
        raise LoadError(f"cannot read {label} list {path}: {e}") from e


def load_lexicon(answers_path: str | Path, guesses_path: str | Path, *,
                 strict: bool = False, N: int = WORD_LENGTH) -> Lexicon:
    """
    Load the answers and guesses lists into a Lexicon.

    Word length is not checked by default; bad-length guesses are reported at
    request time instead. With `strict=True` both files must pass
    `validate_wordlists` (lowercase a–z, exact length N, no blank lines).

    Raises:
      LoadError if either file is missing/unreadable, the answers list is
      empty, or strict validation fails.
    """
    answers_path, guesses_path = Path(answers_path), Path(guesses_path)
    answers = _read(answers_path, "answers")
    guesses = _read(guesses_path, "guesses")

    if not answers:
        raise LoadError(f"answers list is empty: {answers_path}")

    if strict:
        rep = validate_wordlists(answers_path, guesses_path, N)
        if not rep["passed"]:
            raise LoadError("word lists failed validation: " + "; ".join(rep["issues"]))

    lex = Lexicon.from_words(answers, guesses, N)
    skipped = len({w.lower() for w in answers}) - len(lex.answers)
    if skipped:
        log.warning("Skipped %d answer(s) that are not %d letters long", skipped, N)
    log.info("Loaded lexicon: %d answers, %d accepted guesses", len(lex.answers), len(lex.guesses))
    return lex
