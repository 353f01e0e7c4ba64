"""
Role of a Code, as a closed tagged union.

Every role has a string tag so it can cross a storage boundary:
  - Secret  : "secret(true)" / "secret(false)"  (argument = hidden flag)
  - Guess   : "guess"
  - Attempt : "attempt(exact,inexact,nomatch)"   (no spaces, no trailing comma)
  - Unknown : "unknown"

`parse_role` never raises; anything it cannot read becomes Unknown().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .matching import MatchResult


@dataclass(frozen=True)
class Secret:
    """The code to be guessed."""
    hidden: bool = True


@dataclass(frozen=True)
class Guess:
    """The code the player is composing."""


@dataclass(frozen=True)
class Attempt:
    """A submitted, scored guess."""
    results: Tuple[MatchResult, ...] = ()

    def __post_init__(self):
        # accept any sequence but store an immutable tuple
        object.__setattr__(self, "results", tuple(self.results))


@dataclass(frozen=True)
class Unknown:
    """Placeholder role with no semantics."""


Role = Union[Secret, Guess, Attempt, Unknown]


def describe(role: Role) -> str:
    """Role -> string tag."""
    if isinstance(role, Secret):
        return f"secret({'true' if role.hidden else 'false'})"
    if isinstance(role, Guess):
        return "guess"
    if isinstance(role, Attempt):
        return f"attempt({','.join(r.value for r in role.results)})"
    return "unknown"


def _argument(tag: str, prefix: str) -> Optional[str]:
    """Text between `prefix(` and the closing `)`, or None if the shape differs."""
    opening = prefix + "("
    if not (tag.startswith(opening) and tag.endswith(")")):
        return None
    return tag[len(opening):-1]


def _parse_bool(text: str) -> Optional[bool]:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def _parse_results(text: str) -> Optional[List[MatchResult]]:
    if text == "":
        return []
    out: List[MatchResult] = []
    for part in text.split(","):
        try:
            out.append(MatchResult(part))
        except ValueError:
            return None
    return out


def parse_role(tag: str) -> Role:
    """String tag -> Role; unrecognized or malformed tags give Unknown()."""
    if not isinstance(tag, str):
        return Unknown()
    if tag == "guess":
        return Guess()

    arg = _argument(tag, "secret")
    if arg is not None:
        hidden = _parse_bool(arg)
        if hidden is not None:
            return Secret(hidden=hidden)

    arg = _argument(tag, "attempt")
    if arg is not None:
        results = _parse_results(arg)
        if results is not None:
            return Attempt(tuple(results))

    return Unknown()
