"""
Configuration constants for wordguesser.

Game rules live here as `Final` constants; deployment knobs (dictionary URL,
log level, network timeout) can be overridden through environment variables
or a dotenv file (WORDGUESSER_ENV_FILE, default `config.env`).
"""

import os
from typing import Dict, Final, Tuple

from dotenv import load_dotenv

# Real environment variables win over values from the file.
load_dotenv(os.getenv("WORDGUESSER_ENV_FILE", "config.env"))

# Dictionary source: one word per line, fetched once at startup.
WORDS_URL: Final[str] = os.getenv(
    "WORDGUESSER_WORDS_URL", "https://web.stanford.edu/class/cs193p/common.words"
)

# Seconds before the dictionary request gives up (connect + read).
REQUEST_TIMEOUT: Final[float] = float(os.getenv("WORDGUESSER_REQUEST_TIMEOUT", 30))

LOG_LEVEL: Final[str] = os.getenv("WORDGUESSER_LOG_LEVEL", "WARNING")

DEFAULT_CODE_LENGTH: Final[int] = 4

# Lengths a player can pick when starting or restarting a game.
LENGTH_CHOICES: Final[Tuple[int, ...]] = (3, 4, 5, 6)

# Peg alphabet in keyboard order.
ENGLISH_CHARACTERS: Final[Tuple[str, ...]] = tuple("QWERTYUIOPASDFGHJKLZXCVBNM")

# Served before the dictionary finishes loading (one word per length 3-6).
SEED_WORDS: Final[Dict[int, Tuple[str, ...]]] = {
    3: ("KEY",),
    4: ("MOON",),
    5: ("QUEUE",),
    6: ("POWDER",),
}
