"""
One word-guessing game.

A session owns the secret code, the guess being composed and the history of
scored attempts, plus the play-time bookkeeping:

  - elapsed_time : seconds played in earlier intervals
  - start_time   : start of the running interval (None if never started or
                   paused; not persisted)
  - end_time     : set when the secret is guessed, cleared by stop_timing()

Sessions are single-owner objects: callers serialize access.
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from wordguesser.engine import (
    Attempt, Code, Guess, MatchResult, Peg, Secret, best_match, parse_timestamp,
    validate_guess,
)
from wordguesser.settings import DEFAULT_CODE_LENGTH, ENGLISH_CHARACTERS
from wordguesser.words import WordSource, get_word_source

Clock = Callable[[], dt.datetime]
WordChecker = Callable[[str], bool]


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _format_ts(value: Optional[dt.datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _load_attempts(stored: List[Dict], latest: Optional[dt.datetime]) -> List[Code]:
    """
    Rebuild attempts stored most recent first.

    An attempt without a readable timestamp gets one a second older than the
    entry before it (or `latest` for the first), so the stored order holds.
    """
    out: List[Code] = []
    previous: Optional[dt.datetime] = None
    for d in stored:
        code = Code.from_dict(d)
        if parse_timestamp(d.get("timestamp")) is None:
            if previous is not None:
                code.timestamp = previous - dt.timedelta(seconds=1)
            elif latest is not None:
                code.timestamp = latest
        previous = code.timestamp
        out.append(code)
    return out


class GameSession:
    def __init__(
            self,
            peg_choices: Sequence[Peg] = ENGLISH_CHARACTERS,
            code_length: int = DEFAULT_CODE_LENGTH,
            *,
            words: Optional[WordSource] = None,
            clock: Optional[Clock] = None,
            word_checker: Optional[WordChecker] = None,
            id: Optional[str] = None,
    ):
        """
        Create a game and immediately draw a secret of `code_length`.

        Args:
          peg_choices  : symbols a code may contain (keyboard order)
          code_length  : number of pegs per code
          words        : dictionary service (shared word source by default)
          clock        : returns "now" as an aware datetime
          word_checker : decides whether a guess is a real word
                         (defaults to the dictionary)
        """
        self.id = id or uuid.uuid4().hex
        self.peg_choices: List[Peg] = list(peg_choices)
        self.words = words or get_word_source()
        self.clock: Clock = clock or utcnow
        self.word_checker = word_checker

        self.secret = self._new_secret(code_length)
        self.guess = Code.with_length(Guess(), code_length, timestamp=self.clock())
        self._attempts: List[Code] = []

        self.last_attempt_time: Optional[dt.datetime] = None
        self.elapsed_time: float = 0.0
        self.start_time: Optional[dt.datetime] = None
        self.end_time: Optional[dt.datetime] = None
        self.is_over = False

    def __repr__(self) -> str:
        return (f"GameSession(id={self.id!r}, length={self.code_length}, "
                f"attempts={len(self._attempts)}, over={self.is_over})")

    def _new_secret(self, length: int) -> Code:
        secret = Code.with_length(Secret(hidden=True), length, timestamp=self.clock())
        secret.randomize(self.peg_choices, words=self.words)
        return secret

    # ---- read-only views ----

    @property
    def attempts(self) -> List[Code]:
        """Attempts, most recent first."""
        return sorted(self._attempts, key=lambda c: c.timestamp, reverse=True)

    @property
    def code_length(self) -> int:
        return self.secret.length

    @property
    def last_attempt(self) -> Optional[Code]:
        attempts = self.attempts
        return attempts[0] if attempts else None

    @property
    def best_match_per_peg(self) -> Dict[Peg, Optional[MatchResult]]:
        """
        Best result seen for every peg choice across all attempts.

        None means the peg was never part of an attempt.
        Cost is O(attempts * code length + peg choices).
        """
        best: Dict[Peg, MatchResult] = {}
        for attempt in self._attempts:
            results = attempt.match_results
            if results is None:
                continue
            for peg, result in zip(attempt.pegs, results):
                best[peg] = best_match(result, best.get(peg))
        return {peg: best.get(peg) for peg in self.peg_choices}

    @property
    def choices(self) -> List[Tuple[Peg, Optional[MatchResult]]]:
        """(peg, best match) pairs in peg-choice order, for keyboards."""
        return list(self.best_match_per_peg.items())

    def total_elapsed(self, now: Optional[dt.datetime] = None) -> float:
        """Seconds played so far, including the running interval."""
        total = self.elapsed_time
        if self.start_time is not None:
            until = self.end_time or now or self.clock()
            total += (until - self.start_time).total_seconds()
        return total

    # ---- word validity hook ----

    def is_word(self, word: str) -> bool:
        """True if `word` has the session's length and is a real word."""
        return validate_guess(word, self.code_length, checker=self.word_checker, words=self.words)

    def guess_is_word(self) -> bool:
        return self.is_word(self.guess.word)

    # ---- lifecycle ----

    def restart(self) -> None:
        """New secret, no attempts, empty guess; same length."""
        self.select_length(self.code_length)

    def select_length(self, length: int) -> None:
        """Restart the game with codes of `length` pegs."""
        now = self.clock()
        self.secret = self._new_secret(length)
        self._attempts = []
        self.guess = Code.with_length(Guess(), length, timestamp=now)
        self.start_time = now
        self.end_time = None
        self.elapsed_time = 0.0
        self.last_attempt_time = None
        self.is_over = False

    def refresh_secret(self) -> bool:
        """
        Draw a new secret word if no attempt has been made yet.

        Meant to run once the dictionary finishes loading, so an untouched
        game does not keep a seed word. Returns True if the secret changed.
        """
        if self._attempts:
            return False
        word = self.words.random_word(self.code_length)
        if word is None:
            return False
        self.secret.word = word
        return True

    def set_guess_peg(self, peg: Peg, index: int) -> None:
        """Put `peg` at `index` of the guess; out-of-range indices are ignored."""
        if not 0 <= index < self.guess.length:
            return
        self.guess.set_peg(index, peg)

    def submit_guess(self) -> bool:
        """
        Score the current guess and record it as an attempt.

        Returns False (and changes nothing) when the guess still has missing
        pegs or repeats an earlier attempt. On success the guess is cleared,
        and a guess equal to the secret ends the game and reveals the secret.
        """
        if not self.guess.is_complete:
            return False
        pegs = self.guess.pegs
        if any(a.pegs == pegs for a in self._attempts):
            return False

        now = self.clock()
        results = self.guess.match_against(self.secret)
        attempt = Code(Attempt(tuple(results)), pegs, timestamp=now)
        self._attempts.insert(0, attempt)
        self.last_attempt_time = now

        if attempt.pegs == self.secret.pegs:
            self.is_over = True
            self.end_time = now
            self.secret.role = Secret(hidden=False)

        self.guess.reset()
        return True

    def _to_pegs(self, word: str) -> Optional[List[Peg]]:
        """
        Split `word` into peg choices, upper-casing when the choices are
        upper-case letters. None if any character is not a peg choice.
        """
        allowed = set(self.peg_choices)
        for candidate in (word, word.upper()):
            if all(ch in allowed for ch in candidate):
                return list(candidate)
        return None

    def submit_word(self, word: str) -> bool:
        """
        Replace the guess with `word` and submit it.
        Returns False for a wrong length or characters outside peg_choices.
        """
        if len(word) != self.code_length:
            return False
        pegs = self._to_pegs(word)
        if pegs is None:
            return False
        self.guess = Code(Guess(), pegs, timestamp=self.clock())
        return self.submit_guess()

    def submit_words(self, count: int, generate_word: Callable[[], Optional[str]]) -> None:
        """Call `generate_word` `count` times and submit every word it returns."""
        for _ in range(count):
            word = generate_word()
            if word is not None:
                self.submit_word(word)

    # ---- timing ----

    def start_timing(self) -> None:
        """Open a play interval unless the game is over."""
        if not self.is_over:
            self.start_time = self.clock()

    def stop_timing(self) -> None:
        """Close the running interval into elapsed_time."""
        if self.start_time is not None:
            until = self.end_time or self.clock()
            self.elapsed_time += (until - self.start_time).total_seconds()
        self.start_time = None
        self.end_time = None

    # ---- ordering ----

    def __lt__(self, other: "GameSession") -> bool:
        """
        Sessions without attempts come first; otherwise the session with the
        more recent attempt sorts earlier.
        """
        mine, theirs = self.last_attempt_time, other.last_attempt_time
        if mine is None:
            return theirs is not None
        if theirs is None:
            return False
        return mine > theirs

    # ---- storage ----

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "peg_choices": list(self.peg_choices),
            "secret": self.secret.to_dict(),
            "guess": self.guess.to_dict(),
            "attempts": [a.to_dict() for a in self._attempts],
            "last_attempt_time": _format_ts(self.last_attempt_time),
            "elapsed_time": self.elapsed_time,
            "end_time": _format_ts(self.end_time),
            "is_over": self.is_over,
        }

    @classmethod
    def from_dict(cls, d: Dict, *, words: Optional[WordSource] = None,
                  clock: Optional[Clock] = None,
                  word_checker: Optional[WordChecker] = None) -> "GameSession":
        """Rebuild a stored session without drawing a new secret."""
        session = cls.__new__(cls)
        session.id = d.get("id") or uuid.uuid4().hex
        session.peg_choices = list(d.get("peg_choices") or ENGLISH_CHARACTERS)
        session.words = words or get_word_source()
        session.clock = clock or utcnow
        session.word_checker = word_checker
        session.secret = Code.from_dict(d["secret"])
        session.guess = Code.from_dict(d["guess"])
        session.last_attempt_time = parse_timestamp(d.get("last_attempt_time"))
        session._attempts = _load_attempts(d.get("attempts", []), session.last_attempt_time)
        session.elapsed_time = float(d.get("elapsed_time", 0.0))
        session.start_time = None
        session.end_time = parse_timestamp(d.get("end_time"))
        session.is_over = bool(d.get("is_over", False))
        return session
