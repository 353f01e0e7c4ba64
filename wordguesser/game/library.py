"""
In-memory store of game sessions keyed by id.

Mirrors the game list of the app: create a game for a chosen length, filter
to completed games, search by attempted word, and list games with the most
recently played first (untouched games on top).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from wordguesser.settings import LENGTH_CHOICES
from wordguesser.words import WordSource, get_word_source
from .session import GameSession

logger = logging.getLogger(__name__)


class FilterOption(Enum):
    ALL = "all"
    COMPLETED = "completed"

    @property
    def title(self) -> str:
        return "All games" if self is FilterOption.ALL else "Completed"


class GameLibrary:
    def __init__(self, *, words: Optional[WordSource] = None,
                 session_factory: Optional[Callable[..., GameSession]] = None):
        self.games: Dict[str, GameSession] = {}
        self.words = words or get_word_source()
        self._factory = session_factory or GameSession

    def __len__(self) -> int:
        return len(self.games)

    def __iter__(self) -> Iterator[GameSession]:
        return iter(list(self.games.values()))

    def __contains__(self, game_id: str) -> bool:
        return game_id in self.games

    def create_game(self, code_length: int) -> GameSession:
        """
        Create and store a new game.
        Raises ValueError for lengths outside LENGTH_CHOICES.
        """
        if code_length not in LENGTH_CHOICES:
            raise ValueError(f"code_length must be one of {LENGTH_CHOICES}; got {code_length}")
        session = self._factory(code_length=code_length, words=self.words)
        self.add(session)
        return session

    def add(self, session: GameSession) -> GameSession:
        self.games[session.id] = session
        return session

    def extend(self, sessions: Iterable[GameSession]) -> None:
        for s in sessions:
            self.add(s)

    def get(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Remove a game; returns False if it was not stored."""
        return self.games.pop(game_id, None) is not None

    def list_games(self, filter: FilterOption = FilterOption.ALL,
                   attempt_contains: str = "") -> List[GameSession]:
        """
        Games matching `filter` whose attempts (or current guess) contain
        `attempt_contains`, sorted by most recent attempt.
        """
        needle = attempt_contains.upper()
        out: List[GameSession] = []
        for game in self.games.values():
            if filter is FilterOption.COMPLETED and not game.is_over:
                continue
            if needle and not (
                    any(needle in a.word for a in game.attempts) or needle in game.guess.word
            ):
                continue
            out.append(game)
        return sorted(out)

    def add_samples(self, lengths: Iterable[int] = (3, 4, 5)) -> int:
        """
        Seed an empty library with one game per length, each with
        `length - 2` random attempts. Returns the number of games added.
        """
        if self.games:
            return 0
        added = 0
        for n in lengths:
            game = self.create_game(n)
            game.submit_words(n - 2, lambda: self.words.random_word(n))
            added += 1
        logger.info("added %d sample games", added)
        return added
