import itertools
from collections import Counter

import pytest

from wordle_solver.engine import InputMismatch
from wordle_solver.engine.feedback import (
    ALL_EXACT,
    encode_words,
    feedback_indices,
    feedback_to_index,
    format_feedback,
    get_feedback,
    index_to_feedback,
    normalize_word,
    parse_feedback,
)


@pytest.mark.parametrize("guess,target,expected", [
    ("caddy", "abbey", "bybbg"),
    ("abbey", "caddy", "ybbbg"),
    ("belle", "level", "bgyyy"),
    ("cools", "scoop", "yygby"),
    ("raise", "crane", "yybbg"),
    ("stare", "crane", "bbgyg"),
    ("speed", "abide", "bbyby"),
    ("allot", "total", "yybyy"),
])
def test_feedback_golden(guess, target, expected):
    assert get_feedback(guess, target) == expected


def test_guess_equal_to_target_is_all_exact(words):
    for w in words:
        assert get_feedback(w, w) == ALL_EXACT


def test_marked_letters_never_exceed_target_supply(words):
    for guess, target in itertools.product(words, repeat=2):
        fb = get_feedback(guess, target)
        marked = Counter(g for g, f in zip(guess, fb) if f != "b")
        supply = Counter(target)
        for letter, n in marked.items():
            assert n <= supply[letter], (guess, target, fb)


def test_vectorised_scores_match_scalar(words):
    encoded = encode_words(words)
    for guess in words + ["eeeee", "lllll", "zzzzz"]:
        expected = [feedback_to_index(get_feedback(guess, w)) for w in words]
        assert feedback_indices(guess, encoded).tolist() == expected


def test_feedback_index():
    assert feedback_to_index("bybbg") == 165
    assert index_to_feedback(165) == "bybbg"
    assert index_to_feedback(242) == ALL_EXACT
    assert index_to_feedback(0) == "bbbbb"


@pytest.mark.parametrize("text", [".y..G", "bybbg", "BYBBG", "-y__g"])
def test_parse_feedback_spellings(text):
    assert parse_feedback(text) == "bybbg"


def test_format_feedback_round_trips():
    for index in range(243):
        code = index_to_feedback(index)
        assert parse_feedback(format_feedback(code)) == code
    assert format_feedback("bybbg") == ".y..G"


@pytest.mark.parametrize("text", ["gyg", "gygygy", "xyzzy", "gg gg"])
def test_parse_feedback_rejects_bad_input(text):
    with pytest.raises(InputMismatch):
        parse_feedback(text)


def test_normalize_word():
    assert normalize_word("  CRANE\n") == "crane"
    with pytest.raises(InputMismatch):
        normalize_word("cranes")
    with pytest.raises(InputMismatch):
        normalize_word("cr4ne")
    with pytest.raises(InputMismatch):
        normalize_word("")
