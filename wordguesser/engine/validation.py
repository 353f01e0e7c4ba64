"""
Lightweight guess validation.

This module answers the question: "Is this word acceptable as a guess?"
A word is valid iff:
  - it is a string
  - it is alphabetic only
  - it has exact length N
  - the word checker accepts it (by default: the dictionary knows it)

Incomplete and repeated guesses are rejected later by GameSession.submit_guess;
this is the word-validity hook callers run before submitting.
"""

from typing import Callable, Optional

from wordguesser.words import WordSource, get_word_source

WordChecker = Callable[[str], bool]


def validate_guess(word: str, N: int, checker: Optional[WordChecker] = None,
                   words: Optional[WordSource] = None) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      N       : required word length
      checker : any callable deciding whether a string is a real word;
                defaults to `words.contains`
      words   : dictionary to check against (shared word source by default)
    """
    if not isinstance(word, str):
        return False

    w = word.strip()

    # Shape/characters check
    if len(w) != N or not w.isalpha():
        return False

    if checker is None:
        checker = (words or get_word_source()).contains
    return bool(checker(w))
