"""
Guess validation.

A guess is accepted iff it has exactly N characters and is a member of the
lexicon's guesses set. Each failure has its own exception type so callers can
report it as a line of feedback and carry on with the next token.
"""

from typing import Optional

from .scoring import WORD_LENGTH


class ValidationError(ValueError):
    """Base class for per-guess rejections."""
    kind = "invalid"


class TooShort(ValidationError):
    kind = "too_short"


class TooLong(ValidationError):
    kind = "too_long"


class NotInWordlist(ValidationError):
    kind = "not_in_wordlist"


def validate_guess(guess: str, lexicon, N: int = WORD_LENGTH) -> None:
    """
    Raise a ValidationError subclass if `guess` cannot be evaluated.

    Args:
      guess   : candidate guess, already normalized by the caller
      lexicon : anything with an `is_valid_guess(word) -> bool` method
      N       : required word length
    """
    n = len(guess)
    if n < N:
        raise TooShort(f"less than {N} characters")
    if n > N:
        raise TooLong(f"greater than {N} characters")
    if not lexicon.is_valid_guess(guess):
        raise NotInWordlist("not in wordlist")


def check_guess(guess: str, lexicon, N: int = WORD_LENGTH) -> Optional[str]:
    """Non-raising variant: return the error message, or None if valid."""
    try:
        validate_guess(guess, lexicon, N)
    except ValidationError as e:
        return str(e)
    return None
