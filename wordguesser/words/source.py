"""
Word source: the dictionary behind secret codes and guess validation.

What this module does:
- Keeps a mapping {word length -> sorted tuple of UPPERCASE words}.
- Serves a small seed mapping (one word per length 3-6) until the real
  dictionary is loaded.
- Loads the dictionary ONCE in a background daemon thread from a line source
  (URL, file path or iterable). Callers never block on it; they can poll
  `total_count()` or `state` instead.
- Swaps the whole mapping in a single assignment under a lock, so readers see
  either the seed mapping or the fully loaded one, never a partial mix.
- Swallows and logs load failures; the seed mapping then stays in place for
  the rest of the process. There are no retries and no reloads.

Typical use:
    from wordguesser.words import initialize_word_source, get_word_source
    initialize_word_source("https://example.org/common.words")
    ...
    get_word_source().random_word(5)
"""

from __future__ import annotations

import bisect
import logging
import random
import threading
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from wordguesser.settings import SEED_WORDS, WORDS_URL
from .io import LineSource, describe_source, iter_lines, normalize_word

logger = logging.getLogger(__name__)

# Sorted per length: binary search for membership, direct indexing for draws.
WordIndex = Dict[int, Tuple[str, ...]]


class LoadState(Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def build_index(words: Iterable[str]) -> WordIndex:
    """Group normalized words by length."""
    buckets: Dict[int, set] = {}
    for line in words:
        w = normalize_word(line)
        if w is None:
            continue
        buckets.setdefault(len(w), set()).add(w)
    return {n: tuple(sorted(ws)) for n, ws in buckets.items()}


class WordSource:
    """
    Process-wide dictionary with a load-once lifecycle.

    Reads are safe from any thread. `initialize` may be called once; later
    calls are ignored.
    """

    def __init__(self, seed: Optional[Mapping[int, Iterable[str]]] = None,
                 rng: Optional[random.Random] = None):
        seed = SEED_WORDS if seed is None else seed
        self._words: WordIndex = build_index(w for ws in seed.values() for w in ws)
        self._lock = threading.Lock()
        self._state = LoadState.NOT_LOADED
        self._thread: Optional[threading.Thread] = None
        self.rng = rng or random.Random()

    # ---- lifecycle ----

    @property
    def state(self) -> LoadState:
        with self._lock:
            return self._state

    @property
    def is_loaded(self) -> bool:
        return self.state is LoadState.LOADED

    def initialize(self, source: LineSource, *, background: bool = True) -> None:
        """
        Start the one-shot dictionary load from `source`.

        With background=False the load runs in the calling thread (CLI tools
        and tests); the swap/failure semantics are identical.
        """
        with self._lock:
            if self._state is not LoadState.NOT_LOADED:
                logger.info("word source already initialized (%s); ignoring", self._state.value)
                return
            self._state = LoadState.LOADING

        if not background:
            self._load(source)
            return

        self._thread = threading.Thread(
            target=self._load, args=(source,), name="word-source-load", daemon=True)
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the load finishes (or `timeout` seconds pass).
        Returns True if the load is no longer in progress.
        """
        t = self._thread
        if t is not None:
            t.join(timeout)
        return self.state is not LoadState.LOADING

    def _load(self, source: LineSource) -> None:
        name = describe_source(source)
        try:
            loaded = build_index(iter_lines(source))
        except Exception:
            logger.warning("could not load words from %s", name, exc_info=True)
            with self._lock:
                self._state = LoadState.FAILED
            return

        count = sum(len(ws) for ws in loaded.values())
        with self._lock:
            if count > 0:
                self._words = loaded
                self._state = LoadState.LOADED
            else:
                self._state = LoadState.FAILED
        if count > 0:
            logger.info("loaded %d words from %s", count, name)
        else:
            logger.warning("no words found in %s; keeping seed words", name)

    def _snapshot(self) -> WordIndex:
        with self._lock:
            return self._words

    # ---- queries ----

    def total_count(self) -> int:
        """Total number of words across all lengths."""
        return sum(len(ws) for ws in self._snapshot().values())

    def lengths(self) -> List[int]:
        return sorted(n for n, ws in self._snapshot().items() if ws)

    def contains(self, word: str) -> bool:
        """Case-insensitive membership check."""
        w = word.upper()
        pool = self._snapshot().get(len(w), ())
        i = bisect.bisect_left(pool, w)
        return i < len(pool) and pool[i] == w

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def random_word(self, length: int) -> Optional[str]:
        """Random word of exactly `length` letters, or None if there is none."""
        pool = self._snapshot().get(length)
        if not pool:
            logger.warning("no word of length %d available", length)
            return None
        # pool is sorted, so a seeded rng picks reproducibly
        return self.rng.choice(pool)


# ---- process-wide instance ----

_word_source: Optional[WordSource] = None
_init_lock = threading.Lock()


def get_word_source() -> WordSource:
    """Return the shared word source, creating a seed-only one on first use."""
    global _word_source
    with _init_lock:
        if _word_source is None:
            _word_source = WordSource()
        return _word_source


def initialize_word_source(source: Optional[LineSource] = None, *,
                           background: bool = True) -> WordSource:
    """Start loading the shared word source (default: settings.WORDS_URL)."""
    ws = get_word_source()
    ws.initialize(WORDS_URL if source is None else source, background=background)
    return ws


def set_word_source(ws: Optional[WordSource]) -> None:
    """Replace the shared instance (tests / embedding applications)."""
    global _word_source
    with _init_lock:
        _word_source = ws
