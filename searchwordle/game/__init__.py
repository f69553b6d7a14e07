from .session import GameSession, GuessOutcome, SessionStore, split_guesses, PROMPT
from .io import write_csv, write_manifest

__all__ = ["GameSession", "GuessOutcome", "SessionStore", "split_guesses", "PROMPT",
           "write_csv", "write_manifest"]
