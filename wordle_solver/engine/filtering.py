from __future__ import annotations

from .feedback import get_feedback, normalize_word, parse_feedback


def filter_words(words: list[str], guess: str, feedback: str) -> list[str]:
    """
    Return the words that would have produced `feedback` for `guess`, in
    their original order. Words come back lowercased like the guess.
    """
    guess = normalize_word(guess)
    feedback = parse_feedback(feedback)
    return [w for w in map(normalize_word, words) if get_feedback(guess, w) == feedback]
