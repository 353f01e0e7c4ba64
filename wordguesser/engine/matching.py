"""
Mastermind-style matching of one code against another.

Conventions:
  - EXACT   : correct peg in the correct position
  - INEXACT : peg occurs elsewhere in the secret and was not consumed yet
  - NOMATCH : peg does not occur (or occurs fewer times than guessed)

This implementation is:
  - length-aware (any code length; extra guess positions are never exact)
  - duplicate-safe (respects true peg multiplicities in the secret)
  - deterministic and pure (inputs are never mutated)

Algorithm (two-pass):
  1) First pass, left to right, marks every exact position and counts the
     secret's leftover (unmatched) pegs.
  2) Second pass, left to right, marks inexact only while the peg still has
     leftover count, consuming one each time.
"""

from collections import Counter
from enum import Enum
from typing import List, Optional, Sequence


class MatchResult(Enum):
    """Per-position outcome of matching a guess against a secret."""
    NOMATCH = "nomatch"
    EXACT = "exact"
    INEXACT = "inexact"


# Rank in the "best match" order; None (never tried) is the lowest.
_ORDER = {
    None: 0,
    MatchResult.NOMATCH: 1,
    MatchResult.INEXACT: 2,
    MatchResult.EXACT: 3,
}

# One-character rendering used by CSV export and the terminal app.
_PATTERN_CHARS = {
    MatchResult.EXACT: "E",
    MatchResult.INEXACT: "I",
    MatchResult.NOMATCH: "-",
}


def order_position(result: Optional[MatchResult]) -> int:
    """Position of `result` in the order None < NOMATCH < INEXACT < EXACT."""
    return _ORDER[result]


def best_match(a: Optional[MatchResult], b: Optional[MatchResult]) -> Optional[MatchResult]:
    """Return the better of two results (ties keep `b`)."""
    if order_position(a) > order_position(b):
        return a
    return b


def match(guess: Sequence[str], secret: Sequence[str]) -> List[MatchResult]:
    """
    Score `guess` against `secret`.

    Returns:
      - list of MatchResult with len(guess) entries

    Examples:
      match("NOON", "MOON") -> [INEXACT, EXACT, EXACT, EXACT]
      match("AAAAA", "LLAMA") -> [NOMATCH, NOMATCH, EXACT, NOMATCH, EXACT]
    """
    n = len(guess)
    results = [MatchResult.NOMATCH] * n

    # Pass 1: exact positions; every other secret peg stays available.
    remaining: Counter = Counter()
    for i, s in enumerate(secret):
        if i < n and guess[i] == s:
            results[i] = MatchResult.EXACT
        else:
            remaining[s] += 1

    # Pass 2: inexact only while the peg still has remaining availability.
    for i, g in enumerate(guess):
        if results[i] is MatchResult.EXACT:
            continue
        if remaining[g] > 0:
            results[i] = MatchResult.INEXACT
            remaining[g] -= 1

    return results


def pattern(results: Sequence[MatchResult]) -> str:
    """Render results compactly, e.g. [INEXACT, EXACT, NOMATCH] -> "IE-"."""
    return "".join(_PATTERN_CHARS[r] for r in results)
