from .source import (
    WordSource, LoadState, build_index,
    get_word_source, initialize_word_source, set_word_source,
)
from .io import read_lines, iter_lines, normalize_word

__all__ = [
    "WordSource", "LoadState", "build_index",
    "get_word_source", "initialize_word_source", "set_word_source",
    "read_lines", "iter_lines", "normalize_word",
]
