import json
import logging
import string

from .engine.feedback import WORD_LENGTH

log = logging.getLogger(__name__)


def _is_word(w):
    return len(w) == WORD_LENGTH and all(ch in string.ascii_lowercase for ch in w)


def load_words(path):
    """
    Read a word list, keeping five-letter a-z words in file order.

    JSON files may hold a list of words or an object keyed by word. Anything
    else is read as text with the word first on each line, so frequency lists
    of the form "word count" load too.
    """
    with open(path, "r", encoding="utf-8") as f:
        if str(path).endswith(".json"):
            raw = json.load(f)
        else:
            raw = [line.split()[0] for line in f if line.strip()]

    words = [w for w in dict.fromkeys(str(w).strip().lower() for w in raw) if _is_word(w)]
    log.info(f"Read {len(words)} {WORD_LENGTH}-letter words from {path}")
    return words


def build_solution_list(frequency_words, valid_guesses, limit):
    """The `limit` most frequent words that the game also accepts as guesses."""
    valid = set(valid_guesses)
    solutions = [w for w in frequency_words if w in valid]
    return solutions[:limit]


def order_by_frequency(words, frequency_words):
    """Reorder `words` so that more common words come first."""
    rank = {w: i for i, w in enumerate(frequency_words)}
    unknown = len(rank)
    return sorted(words, key=lambda w: rank.get(w, unknown))
