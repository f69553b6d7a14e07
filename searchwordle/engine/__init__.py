from .scoring import evaluate, render, is_solved, EXACT, PRESENT, ABSENT, WORD_LENGTH
from .validation import (
    validate_guess,
    check_guess,
    ValidationError,
    TooShort,
    TooLong,
    NotInWordlist,
)

__all__ = [
    "evaluate", "render", "is_solved", "EXACT", "PRESENT", "ABSENT", "WORD_LENGTH",
    "validate_guess", "check_guess",
    "ValidationError", "TooShort", "TooLong", "NotInWordlist",
]
