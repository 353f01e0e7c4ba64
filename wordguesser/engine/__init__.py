from .matching import MatchResult, match, best_match, order_position, pattern
from .roles import Role, Secret, Guess, Attempt, Unknown, describe, parse_role
from .code import Code, Peg, MISSING_PEG, parse_timestamp
from .validation import validate_guess

__all__ = [
    "MatchResult", "match", "best_match", "order_position", "pattern",
    "Role", "Secret", "Guess", "Attempt", "Unknown", "describe", "parse_role",
    "Code", "Peg", "MISSING_PEG", "parse_timestamp",
    "validate_guess",
]
