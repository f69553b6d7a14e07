"""
Per-player game context.

A GameSession pairs one secret with a reference to the shared Lexicon. Nothing
here is global: each browser session gets its own GameSession, created once
and read-only afterwards, so concurrent requests need no locking beyond the
SessionStore lookup.

Query handling mirrors what the address bar sends: the raw text is split into
guess tokens, each token is validated and evaluated on its own, and every
token yields one human-readable suggestion line.
"""

from __future__ import annotations

import logging
import random
import re
import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional

from searchwordle.datasets.lexicon import Lexicon
from searchwordle.engine import evaluate, render, is_solved, validate_guess, ValidationError, WORD_LENGTH

log = logging.getLogger(__name__)

PROMPT = "Enter 5-letter guesses separated by spaces"
SOLVED_TEXT = "CORRECT! ✅"

# Both space and period end a token.
_DELIMS = re.compile(r"[ .]")


def split_guesses(query: str) -> List[str]:
    """'crane slate.abbey' -> ['crane', 'slate', 'abbey'] (empty tokens dropped)."""
    return [t for t in _DELIMS.split(query) if t]


@dataclass(frozen=True)
class GuessOutcome:
    guess: str
    clue: Optional[str] = None
    error: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.clue is not None and is_solved(self.clue)

    def line(self) -> str:
        if self.error is not None:
            return f"{self.guess} | ERROR: {self.error}"
        if self.solved:
            return f"{self.guess} | {SOLVED_TEXT}"
        return f"{self.guess} | {render(self.clue)}"


@dataclass(frozen=True)
class GameSession:
    lexicon: Lexicon
    secret: str
    session_id: str

    @classmethod
    def new(cls, lexicon: Lexicon, rng: Optional[random.Random] = None,
            session_id: Optional[str] = None) -> "GameSession":
        sid = session_id or secrets.token_hex(8)
        game = cls(lexicon=lexicon, secret=lexicon.pick_secret(rng), session_id=sid)
        log.info("New game session %s", sid)
        return game

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return f"GameSession(session_id={self.session_id!r})"

    def guess(self, token: str) -> GuessOutcome:
        """Validate then evaluate one token; validation failures become outcomes."""
        word = token.lower()
        try:
            validate_guess(word, self.lexicon, WORD_LENGTH)
        except ValidationError as e:
            return GuessOutcome(guess=token, error=str(e))
        return GuessOutcome(guess=token, clue=evaluate(self.secret, word))

    def outcomes(self, query: str) -> List[GuessOutcome]:
        return [self.guess(t) for t in split_guesses(query)]

    def play(self, query: str) -> List[str]:
        """One suggestion line per token, or the usage prompt for an empty query."""
        results = self.outcomes(query)
        if not results:
            return [PROMPT]
        return [r.line() for r in results]


class SessionStore:
    """
    Thread-safe in-memory map of session id -> GameSession.

    Sessions live until the process exits or until `max_sessions` newer ones
    push them out (oldest first).
    """

    def __init__(self, lexicon: Lexicon, rng: Optional[random.Random] = None,
                 max_sessions: int = 10000):
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be >= 1; got {max_sessions}")
        self.lexicon = lexicon
        self.rng = rng
        self.max_sessions = max_sessions
        self._games: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: Optional[str]) -> Optional[GameSession]:
        if not session_id:
            return None
        with self._lock:
            return self._games.get(session_id)

    def get_or_create(self, session_id: Optional[str] = None) -> GameSession:
        with self._lock:
            if session_id and session_id in self._games:
                return self._games[session_id]
            game = GameSession.new(self.lexicon, self.rng, session_id)
            self._games[game.session_id] = game
            while len(self._games) > self.max_sessions:
                old, _ = self._games.popitem(last=False)
                log.info("Evicted game session %s", old)
            return game

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
