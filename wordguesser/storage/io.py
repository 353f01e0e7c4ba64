"""
Storage utilities for game sessions.

Responsibilities:
- write_library / read_library: JSON document holding every session.
- write_csv:  flatten sessions into a tidy CSV (one row per game).
- timestamp_id: stable UTC run ID string for output file names.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-EI-" as formulas (which would display as #NAME?).
- Role tags that cannot be parsed come back as Unknown; they never abort a
  load.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional
import csv
import json
import datetime as dt

from wordguesser.engine import pattern
from wordguesser.game import GameSession
from wordguesser.words import WordSource


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-EI-" -> "'-EI-"
    """
    return "'" + patt if patt else patt


def write_library(sessions: Iterable[GameSession], path: str) -> str:
    """
    Write sessions to a JSON file:
      {"saved_at": ISO timestamp, "games": [session.to_dict(), ...]}

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    doc = {
        "saved_at": dt.datetime.now(dt.timezone.utc).isoformat(),
        "games": [s.to_dict() for s in sessions],
    }
    with p.open("w", encoding="utf-8") as f:
        json.dump(doc, f, indent=2)
    return str(p)


def read_library(path: str, *, words: Optional[WordSource] = None) -> List[GameSession]:
    """
    Load sessions written by write_library.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        doc = json.load(f)
    return [GameSession.from_dict(g, words=words) for g in doc.get("games", [])]


def write_csv(sessions: List[GameSession], path: str, max_attempts: int) -> str:
    """
    Serialize a batch of games to CSV.

    Schema (columns):
      id, N, secret, is_over, attempts, elapsed_s,
      attempt_1, patt_1, ..., attempt_max_attempts, patt_max_attempts

    Attempts are listed in the order they were played (oldest first).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["id", "N", "secret", "is_over", "attempts", "elapsed_s"]
    for i in range(1, max_attempts + 1):
        fields += [f"attempt_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for s in sessions:
            played = list(reversed(s.attempts))
            row = {
                "id": s.id,
                "N": s.code_length,
                "secret": s.secret.word,
                "is_over": s.is_over,
                "attempts": len(played),
                "elapsed_s": round(s.total_elapsed(), 3),
            }

            # Expand history into fixed columns (Excel-safe patterns)
            for i in range(1, max_attempts + 1):
                if i <= len(played):
                    a = played[i - 1]
                    row[f"attempt_{i}"] = a.word
                    row[f"patt_{i}"] = _excel_safe_pattern(pattern(a.match_results or ()))
                else:
                    row[f"attempt_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
