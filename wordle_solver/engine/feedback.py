from __future__ import annotations

import string
from collections import Counter
from functools import lru_cache

import numpy as np

from .errors import InputMismatch

WORD_LENGTH = 5

# Feedback symbols, one per letter of the guess:
#   b = letter not in target (grey)
#   y = right letter in wrong place (yellow)
#   g = right letter in right place (green)
ABSENT = "b"
PRESENT = "y"
EXACT = "g"
ALL_EXACT = EXACT * WORD_LENGTH

# Each letter scores 0, 1 or 2, so a whole feedback code is a 5-digit base-3
# number with the first letter in the lowest digit.
NUM_FEEDBACKS = 3 ** WORD_LENGTH
_DIGITS = {ABSENT: 0, PRESENT: 1, EXACT: 2}
_SYMBOLS = (ABSENT, PRESENT, EXACT)
_POWERS = np.array([3 ** i for i in range(WORD_LENGTH)], dtype=np.int64)

# Accepted spellings when reading a feedback code typed by a player.
_TEXT_SYMBOLS = {
    "g": EXACT, "G": EXACT,
    "y": PRESENT, "Y": PRESENT,
    "b": ABSENT, "B": ABSENT, ".": ABSENT, "-": ABSENT, "_": ABSENT,
}
_DISPLAY = {ABSENT: ".", PRESENT: "y", EXACT: "G"}


def normalize_word(text: str) -> str:
    """Lowercase and validate a word; raises InputMismatch if it isn't five letters a-z."""
    word = text.strip().lower()
    if len(word) != WORD_LENGTH:
        raise InputMismatch(f"'{word}' is not exactly {WORD_LENGTH} letters")
    if any(ch not in string.ascii_lowercase for ch in word):
        raise InputMismatch(f"'{word}' contains characters other than a-z")
    return word


@lru_cache(maxsize=1 << 20)
def get_feedback(guess: str, target: str) -> str:
    """
    Feedback code for `guess` played against the secret word `target`.

    Exact matches are marked first and use up their letter in the target.
    Remaining letters are then marked present only while the target still has
    unclaimed copies of that letter, so a repeated guess letter is yellow at
    most as often as the target has spare copies of it.

    Not symmetric: get_feedback("caddy", "abbey") == "bybbg" but
    get_feedback("abbey", "caddy") == "ybbbg".
    """
    feedback = [ABSENT] * WORD_LENGTH
    supply = Counter(target)
    # greens
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            feedback[i] = EXACT
            supply[g] -= 1
    # yellows
    for i, g in enumerate(guess):
        if feedback[i] == EXACT:
            continue
        if supply[g] > 0:
            feedback[i] = PRESENT
            supply[g] -= 1
    return "".join(feedback)


def parse_feedback(text: str) -> str:
    """Turn a typed score like '.y..G' or 'bybbg' into a feedback code."""
    text = text.strip()
    if len(text) != WORD_LENGTH:
        raise InputMismatch(f"feedback '{text}' is not exactly {WORD_LENGTH} symbols")
    try:
        return "".join(_TEXT_SYMBOLS[ch] for ch in text)
    except KeyError as e:
        raise InputMismatch(f"feedback '{text}' has unknown symbol {e.args[0]!r}") from None


def format_feedback(code: str) -> str:
    """Readable form of a feedback code: bybbg => .y..G"""
    return "".join(_DISPLAY[ch] for ch in code)


def feedback_to_index(code: str) -> int:
    return sum(_DIGITS[ch] * 3 ** i for i, ch in enumerate(code))


def index_to_feedback(index: int) -> str:
    symbols = []
    for _ in range(WORD_LENGTH):
        index, digit = divmod(index, 3)
        symbols.append(_SYMBOLS[digit])
    return "".join(symbols)


def encode_words(words: list[str]) -> np.ndarray:
    """Pack normalised words into an (n, 5) array of letter bytes."""
    words = list(words)
    if not words:
        return np.empty((0, WORD_LENGTH), dtype=np.uint8)
    raw = "".join(words).encode("ascii")
    return np.frombuffer(raw, dtype=np.uint8).reshape(len(words), WORD_LENGTH)


def feedback_indices(guess: str, encoded: np.ndarray) -> np.ndarray:
    """
    Feedback index of `guess` against every row of `encoded` at once.

    Same two passes as get_feedback, vectorised over the targets: a per-letter
    supply counts target positions not already taken by an exact match, and
    each guess position in turn claims one unit of its letter's supply.
    """
    letters = np.frombuffer(guess.encode("ascii"), dtype=np.uint8)
    exact = encoded == letters
    codes = (exact @ (2 * _POWERS)).astype(np.int64)

    spare = {}
    claimed = {}
    for ch in set(letters.tolist()):
        spare[ch] = ((encoded == ch) & ~exact).sum(axis=1)
        claimed[ch] = np.zeros(len(encoded), dtype=np.int64)

    for i, ch in enumerate(letters.tolist()):
        present = ~exact[:, i] & (claimed[ch] < spare[ch])
        claimed[ch] += present
        codes += present * _POWERS[i]
    return codes
