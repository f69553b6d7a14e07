"""
Clue evaluation for a single (secret, guess) pair.

Conventions:
  - 'G'  : exact   = correct letter in the correct position
  - 'Y'  : present = letter is in the secret but elsewhere
  - '-'  : absent  = letter not present (or all its copies already claimed)

Algorithm (two passes; a single combined pass is wrong with duplicates):
  1) Exact pass marks greens. Every secret letter sitting under a non-green
     position is added to a per-call letter budget.
  2) Left-to-right pass marks yellows while the guessed letter still has
     budget, consuming one unit each time.

A letter occurring k times in the secret is therefore credited at most k
times across the whole guess, and greens are never downgraded.
"""

from typing import Dict, Literal

# Each clue character is one of 'G', 'Y', '-'
Marker = Literal["G", "Y", "-"]
Clue = str

EXACT: Marker = "G"
PRESENT: Marker = "Y"
ABSENT: Marker = "-"

WORD_LENGTH = 5

GREEN = "🟩"
YELLOW = "🟨"
WHITE = "⬜"

_EMOJI: Dict[str, str] = {EXACT: GREEN, PRESENT: YELLOW, ABSENT: WHITE}


def evaluate(secret: str, guess: str) -> Clue:
    """
    Compute the clue for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret); callers validate before evaluating.

    Examples:
      evaluate("abbey", "babes") -> "YYGG-"
      evaluate("speed", "erase") -> "Y--YY"
    """
    assert len(secret) == len(guess), "Secret and guess must be the same length"

    clue = [ABSENT] * len(guess)

    # Only letters of the secret get a budget entry
    budget: Dict[str, int] = {c: 0 for c in secret}

    # Pass 1: greens; unmatched secret letters stay claimable
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            clue[i] = EXACT
        else:
            budget[s] += 1

    # Pass 2: yellows, greedy left to right
    for i, g in enumerate(guess):
        if clue[i] == EXACT:
            continue
        if budget.get(g, 0) > 0:
            clue[i] = PRESENT
            budget[g] -= 1

    return "".join(clue)


def is_solved(clue: Clue) -> bool:
    """True when every marker is EXACT."""
    return bool(clue) and all(m == EXACT for m in clue)


def render(clue: Clue) -> str:
    """Markers -> emoji squares, e.g. "GY-" -> "🟩🟨⬜"."""
    return "".join(_EMOJI[m] for m in clue)
