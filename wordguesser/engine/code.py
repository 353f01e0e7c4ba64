"""
Code: a fixed-length sequence of pegs tagged with a Role.

The peg list is the single source of truth; `word` is always derived from it
and writing `word` re-splits into pegs. The length never changes after
construction.
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from .matching import MatchResult, match
from .roles import Attempt, Role, Secret, Unknown, describe, parse_role

if TYPE_CHECKING:
    from wordguesser.words import WordSource

# A peg is one symbol; the empty string marks an unfilled slot.
Peg = str
MISSING_PEG: Peg = ""


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[dt.datetime]:
    """
    ISO string -> aware datetime; naive values are taken as UTC.
    Returns None for missing or unreadable values.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        ts = dt.datetime.fromisoformat(value)
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=dt.timezone.utc)
    return ts


class Code:
    MISSING_PEG = MISSING_PEG

    def __init__(self, role: Role, pegs: Sequence[Peg], *,
                 id: Optional[str] = None, timestamp: Optional[dt.datetime] = None):
        self.role = role
        self._pegs: List[Peg] = list(pegs)
        self.id = id or uuid.uuid4().hex
        self.timestamp = timestamp or _utcnow()
        if isinstance(role, Attempt) and len(role.results) != len(self._pegs):
            raise ValueError(
                f"attempt has {len(role.results)} results for {len(self._pegs)} pegs")

    @classmethod
    def with_length(cls, role: Role, length: int, **kw) -> "Code":
        """Code of `length` missing pegs."""
        return cls(role, [MISSING_PEG] * length, **kw)

    @classmethod
    def from_word(cls, role: Role, word: str, **kw) -> "Code":
        """Code with one peg per character of `word`."""
        return cls(role, list(word), **kw)

    def __repr__(self) -> str:
        return f"Code({describe(self.role)!r}, {self._pegs!r})"

    # ---- pegs / word ----

    @property
    def length(self) -> int:
        return len(self._pegs)

    def __len__(self) -> int:
        return len(self._pegs)

    @property
    def pegs(self) -> Tuple[Peg, ...]:
        return tuple(self._pegs)

    @pegs.setter
    def pegs(self, pegs: Sequence[Peg]) -> None:
        pegs = list(pegs)
        if len(pegs) != len(self._pegs):
            raise ValueError(f"code length is {len(self._pegs)}, got {len(pegs)} pegs")
        self._pegs = pegs

    @property
    def word(self) -> str:
        return "".join(self._pegs)

    @word.setter
    def word(self, word: str) -> None:
        self.pegs = list(word)

    def set_peg(self, index: int, peg: Peg) -> None:
        self._pegs[index] = peg

    @property
    def is_complete(self) -> bool:
        """True when no position holds the missing peg."""
        return MISSING_PEG not in self._pegs

    # ---- role-derived views ----

    @property
    def is_hidden(self) -> bool:
        return isinstance(self.role, Secret) and self.role.hidden

    @property
    def match_results(self) -> Optional[Tuple[MatchResult, ...]]:
        """Results attached to an attempt; None for every other role."""
        if isinstance(self.role, Attempt):
            return self.role.results
        return None

    # ---- mutation ----

    def reset(self) -> None:
        """Set every peg to the missing peg; length and role are kept."""
        self._pegs = [MISSING_PEG] * len(self._pegs)

    def randomize(self, choices: Sequence[Peg], words: Optional["WordSource"] = None) -> None:
        """
        Replace the pegs with a random dictionary word of the same length.

        Falls back to all missing pegs when the dictionary has no word of this
        length (the word source logs that case).
        """
        if words is None:
            from wordguesser.words import get_word_source
            words = get_word_source()

        word = words.random_word(len(self._pegs))
        if word is None:
            self.reset()
            return
        for i, ch in enumerate(word):
            if i < len(choices) and i < len(self._pegs):
                self._pegs[i] = ch

    def match_against(self, other: "Code") -> List[MatchResult]:
        """Score this code (as a guess) against `other` (as the secret)."""
        return match(self._pegs, other.pegs)

    # ---- storage ----

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "role": describe(self.role),
            "pegs": list(self._pegs),
            "word": self.word,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "Code":
        role = parse_role(d.get("role", "unknown"))
        pegs = d["pegs"] if "pegs" in d else list(d.get("word", ""))
        if isinstance(role, Attempt) and len(role.results) != len(pegs):
            role = Unknown()
        return cls(
            role, pegs,
            id=d.get("id"),
            timestamp=parse_timestamp(d.get("timestamp")),
        )
