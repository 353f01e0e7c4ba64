import pytest
from wordguesser.engine import MatchResult, match, best_match, order_position, pattern, validate_guess
from wordguesser.words import WordSource

E, I, N = MatchResult.EXACT, MatchResult.INEXACT, MatchResult.NOMATCH


# --- golden tests (duplicates + placements), rendered as E / I / - ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("NOON", "MOON", "IEEE"),
    ("MOON", "MOON", "EEEE"),
    ("AAAAA", "LLAMA", "--E-E"),
    ("LLAMA", "AAAAA", "--E-E"),
    ("BELLE", "LEVEL", "-EIII"),
    ("LEMON", "LEVEL", "EE---"),
    ("COOLS", "SCOOP", "IIE-I"),
    ("RAISE", "CRANE", "II--E"),
    ("KEY", "YEK", "IEI"),
    ("XYZ", "KEY", "-I-"),
])
def test_match_golden(guess, secret, expected):
    assert pattern(match(guess, secret)) == expected


def test_match_length_follows_guess():
    assert len(match("ABCDE", "ABC")) == 5
    assert len(match("AB", "ABCD")) == 2
    # extra guess positions can still be inexact, never exact
    assert match("ABCA", "ABC") == [E, E, E, N]
    assert match("ABCB", "ACB") == [E, I, I, N]


def test_match_identical_is_all_exact():
    for w in ["KEY", "MOON", "QUEUE", "POWDER"]:
        assert match(w, w) == [E] * len(w)


def test_match_absent_symbols_are_nomatch():
    res = match("QXZM", "MOON")
    assert res[:3] == [N, N, N]
    assert res[3] is I


def test_match_duplicate_credit_is_capped():
    res = match("AAAAA", "LLAMA")
    assert sum(r is not N for r in res) == 2
    assert res.count(N) == 3


def test_match_does_not_mutate_inputs():
    guess, secret = ["N", "O", "O", "N"], ["M", "O", "O", "N"]
    match(guess, secret)
    assert guess == ["N", "O", "O", "N"] and secret == ["M", "O", "O", "N"]


def test_best_match_order():
    assert order_position(None) < order_position(N) < order_position(I) < order_position(E)
    assert best_match(I, E) is E
    assert best_match(E, I) is E
    assert best_match(None, N) is N
    assert best_match(N, None) is N
    assert best_match(None, None) is None


def test_validate_guess_with_dictionary():
    words = WordSource(seed={4: ["MOON", "NOON"], 5: ["QUEUE"]})
    assert validate_guess("moon", 4, words=words) is True
    assert validate_guess("MOONS", 4, words=words) is False
    assert validate_guess("MO1N", 4, words=words) is False
    assert validate_guess("SOON", 4, words=words) is False
    assert validate_guess(None, 4, words=words) is False


def test_validate_guess_custom_checker():
    assert validate_guess("ZZZZ", 4, checker=lambda w: True) is True
    assert validate_guess("MOON", 4, checker=lambda w: False) is False
