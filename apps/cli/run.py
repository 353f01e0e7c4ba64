# apps/cli/run.py
"""
CLI entry point for simulating wordguesser games.

This script:
  1) Starts the dictionary load and waits for it (up to --load-timeout),
     falling back to the seed words if it doesn't finish or fails.
  2) Creates a library of games at the requested length.
  3) Plays every game by submitting random dictionary words until the secret
     is found or the attempt budget runs out, with a live progress indicator,
     and writes:
       - CSV:  per-game results + attempt/pattern history columns
       - JSON: every game, reloadable with wordguesser.storage.read_library
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordguesser.game import GameLibrary, GameSession
from wordguesser.settings import DEFAULT_CODE_LENGTH, LENGTH_CHOICES, LOG_LEVEL, WORDS_URL
from wordguesser.storage import timestamp_id, write_csv, write_library
from wordguesser.words import WordSource

logger = logging.getLogger("apps.cli.run")


def _play_one_game(game: GameSession, words: WordSource, max_attempts: int) -> None:
    """
    Guess random words of the right length until solved or out of attempts.
    Repeated words are rejected by the session and simply cost a draw.
    """
    game.start_timing()
    draws = 0
    while not game.is_over and len(game.attempts) < max_attempts and draws < max_attempts * 4:
        draws += 1
        word = words.random_word(game.code_length)
        if word is None:
            break
        game.submit_word(word)
    game.stop_timing()


def main(argv=None):
    """
    Parse CLI args, load the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordguesser — simulate games")
    ap.add_argument("--games", type=int, default=20, help="number of games to play")
    ap.add_argument("--length", type=int, default=DEFAULT_CODE_LENGTH, choices=LENGTH_CHOICES,
                    help="code length (word size)")
    ap.add_argument("--max-attempts", type=int, default=10, help="attempt budget per game")
    ap.add_argument("--words", default=WORDS_URL, help="dictionary URL or path (one word per line)")
    ap.add_argument("--load-timeout", type=float, default=30.0,
                    help="seconds to wait for the dictionary before using seed words")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default=LOG_LEVEL, help="logging level (e.g. INFO)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Dictionary: background load, bounded wait
    words = WordSource(rng=random.Random(args.seed))
    words.initialize(args.words)
    if not words.wait(args.load_timeout):
        logger.warning("dictionary still loading after %.1fs; playing with seed words",
                       args.load_timeout)
    print(f"Dictionary: {words.state.value}, {words.total_count()} words")

    # 2) Games
    library = GameLibrary(words=words)
    games = [library.create_game(args.length) for _ in range(args.games)]
    total = len(games)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    last_print = 0.0
    iterator = tqdm(games, ncols=80, desc="Playing", unit="game") if mode == "bar" else games

    for idx, game in enumerate(iterator, 1):
        _play_one_game(game, words, args.max_attempts)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    solved = sum(1 for g in games if g.is_over)
    print(f"Solved {solved}/{total} games within {args.max_attempts} attempts")

    # 4) Write outputs (CSV + JSON)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    games_path = outdir / f"run_{run_id}_games.json"

    write_csv(library.list_games(), str(csv_path), max_attempts=args.max_attempts)
    write_library(library.list_games(), str(games_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {games_path}")


if __name__ == "__main__":
    main()
