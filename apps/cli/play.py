# apps/cli/play.py
"""
Play one wordguesser game in the terminal.

Type a word to guess it. Commands:
  :restart    new secret, same length
  :length N   new secret of N letters
  :quit       leave (the secret is revealed)

Feedback uses one character per letter: E exact, I inexact, - no match.
"""

from __future__ import annotations

import argparse
import logging

from wordguesser.engine import pattern
from wordguesser.game import GameSession
from wordguesser.settings import DEFAULT_CODE_LENGTH, LENGTH_CHOICES, LOG_LEVEL, WORDS_URL
from wordguesser.words import initialize_word_source


def _keyboard(game: GameSession) -> str:
    """Peg choices annotated with their best result so far."""
    return " ".join(f"{peg}{pattern([r]) if r else ' '}" for peg, r in game.choices)


def _handle_command(game: GameSession, line: str) -> bool:
    """Run a ':' command; returns False when the player quits."""
    parts = line[1:].split()
    cmd = parts[0] if parts else ""
    if cmd == "quit":
        return False
    if cmd == "restart":
        game.restart()
        print(f"New game, {game.code_length} letters.")
    elif cmd == "length" and len(parts) == 2 and parts[1].isdigit() \
            and int(parts[1]) in LENGTH_CHOICES:
        game.select_length(int(parts[1]))
        print(f"New game, {game.code_length} letters.")
    else:
        print(f"Unknown command: {line}")
    return True


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordguesser — play in the terminal")
    ap.add_argument("--length", type=int, default=DEFAULT_CODE_LENGTH, choices=LENGTH_CHOICES)
    ap.add_argument("--words", default=WORDS_URL, help="dictionary URL or path (one word per line)")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="logging level (e.g. INFO)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    words = initialize_word_source(args.words)
    game = GameSession(code_length=args.length, words=words)
    game.start_timing()
    refreshed = False
    print(f"Guess the {game.code_length}-letter word. Type :quit to leave.")

    while True:
        # swap the seed secret for a real one as soon as the dictionary arrives
        if not refreshed and words.is_loaded:
            refreshed = game.refresh_secret()

        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line.startswith(":"):
            if not _handle_command(game, line):
                break
            continue

        word = line.upper()
        if not game.is_word(word):
            print(f"Not a {game.code_length}-letter word I know.")
            continue
        if not game.submit_word(word):
            print("Already tried.")
            continue

        attempt = game.last_attempt
        print(f"  {attempt.word}  {pattern(attempt.match_results)}")
        print(f"  {_keyboard(game)}")
        if game.is_over:
            game.stop_timing()
            print(f"Solved in {len(game.attempts)} attempts, {game.total_elapsed():.0f}s.")
            game.restart()
            game.start_timing()
            print(f"New game, {game.code_length} letters.")

    game.stop_timing()
    print(f"The word was {game.secret.word}.")


if __name__ == "__main__":
    main()
