import datetime as dt

import pytest
from wordguesser.engine import (
    Attempt, Code, Guess, MatchResult, MISSING_PEG, Secret, Unknown, describe, parse_role,
    parse_timestamp,
)
from wordguesser.words import WordSource

E, I, N = MatchResult.EXACT, MatchResult.INEXACT, MatchResult.NOMATCH


def test_word_and_pegs_round_trip():
    code = Code.from_word(Guess(), "MOON")
    assert code.word == "MOON"
    assert code.pegs == ("M", "O", "O", "N")
    code.word = "NOON"
    assert code.pegs == ("N", "O", "O", "N")
    code.pegs = ["S", "O", "O", "N"]
    assert code.word == "SOON"
    code.set_peg(0, "M")
    assert code.word == "MOON"


def test_length_is_fixed():
    code = Code.with_length(Guess(), 4)
    assert code.length == 4 and code.pegs == (MISSING_PEG,) * 4
    with pytest.raises(ValueError):
        code.word = "MOONS"
    with pytest.raises(ValueError):
        code.pegs = ["A"]


def test_reset_keeps_length_and_role():
    code = Code.from_word(Secret(hidden=True), "QUEUE")
    code.reset()
    assert code.pegs == (MISSING_PEG,) * 5
    assert code.word == ""
    assert code.role == Secret(hidden=True)
    assert not code.is_complete


def test_role_views():
    assert Code.from_word(Secret(hidden=True), "KEY").is_hidden is True
    assert Code.from_word(Secret(hidden=False), "KEY").is_hidden is False
    assert Code.from_word(Guess(), "KEY").is_hidden is False
    assert Code.from_word(Guess(), "KEY").match_results is None
    attempt = Code.from_word(Attempt((I, E, N)), "KEY")
    assert attempt.match_results == (I, E, N)


def test_attempt_results_must_match_length():
    with pytest.raises(ValueError):
        Code.from_word(Attempt((E,)), "KEY")


def test_match_against():
    guess = Code.from_word(Guess(), "NOON")
    secret = Code.from_word(Secret(), "MOON")
    assert guess.match_against(secret) == [I, E, E, E]


def test_randomize_uses_word_source():
    words = WordSource(seed={4: ["MOON"]})
    code = Code.with_length(Secret(), 4)
    code.randomize(list("ABCDEFGHIJKLMNOPQRSTUVWXYZ"), words=words)
    assert code.word == "MOON"


def test_randomize_stops_at_alphabet_size():
    words = WordSource(seed={4: ["MOON"]})
    code = Code.with_length(Secret(), 4)
    code.randomize(["A", "B"], words=words)
    assert code.pegs == ("M", "O", MISSING_PEG, MISSING_PEG)


def test_randomize_without_word_resets():
    words = WordSource(seed={4: ["MOON"]})
    code = Code.from_word(Secret(), "ABCDEFG")
    code.randomize(list("ABCDEFG"), words=words)
    assert code.pegs == (MISSING_PEG,) * 7


# --- role tags ---
@pytest.mark.parametrize("role,tag", [
    (Secret(hidden=True), "secret(true)"),
    (Secret(hidden=False), "secret(false)"),
    (Guess(), "guess"),
    (Attempt((E, I, N)), "attempt(exact,inexact,nomatch)"),
    (Attempt(()), "attempt()"),
    (Unknown(), "unknown"),
])
def test_role_tag_round_trip(role, tag):
    assert describe(role) == tag
    assert parse_role(tag) == role


@pytest.mark.parametrize("tag", [
    "", "master", "secret(maybe)", "secret(true", "attempt(exact,close)",
    "attempt(exact,)", "GUESS", "guess()",
])
def test_unrecognized_role_tags_are_unknown(tag):
    assert parse_role(tag) == Unknown()


def test_code_dict_round_trip():
    ts = dt.datetime(2026, 1, 18, 12, 0, tzinfo=dt.timezone.utc)
    code = Code(Attempt((I, E, E, E)), list("NOON"), timestamp=ts)
    back = Code.from_dict(code.to_dict())
    assert back.id == code.id
    assert back.role == code.role
    assert back.pegs == code.pegs
    assert back.timestamp == ts


def test_code_dict_keeps_missing_pegs():
    code = Code(Guess(), ["M", MISSING_PEG, "O", MISSING_PEG])
    back = Code.from_dict(code.to_dict())
    assert back.pegs == code.pegs


def test_code_dict_bad_role_is_unknown():
    back = Code.from_dict({"role": "attempt(exact)", "pegs": ["M", "O"]})
    assert back.role == Unknown()
    back = Code.from_dict({"role": "bogus", "word": "KEY"})
    assert back.role == Unknown() and back.word == "KEY"


@pytest.mark.parametrize("value,expected", [
    ("2026-01-01T00:00:00+00:00", dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc)),
    ("2026-01-01T00:00:00", dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc)),
    ("2026-01-01T02:00:00+02:00", dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc)),
    (None, None), ("", None), ("yesterday", None), (12, None),
])
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


def test_code_dict_naive_timestamp_is_utc():
    back = Code.from_dict({"role": "guess", "word": "KEY", "timestamp": "2026-01-01T00:00:00"})
    assert back.timestamp.tzinfo is not None
    assert back.timestamp.utcoffset() == dt.timedelta(0)
