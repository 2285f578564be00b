from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count

import numpy as np
from tqdm import tqdm

from ..config import PARALLEL_THRESHOLD, SAMPLE_SIZE
from .errors import EmptyCandidateSet
from .feedback import (
    NUM_FEEDBACKS,
    encode_words,
    feedback_indices,
    index_to_feedback,
    normalize_word,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessStats:
    """How well one guess splits the remaining candidates."""
    guess: str
    expected_remaining: float
    max_remaining: int
    worst_feedback: str
    worst_sample: tuple
    is_viable: bool

    @property
    def score(self) -> float:
        # geometric mean of the average and the worst case
        return math.sqrt(self.expected_remaining * self.max_remaining)

    @property
    def sort_key(self):
        return (self.score, self.expected_remaining, self.guess)


def estimate_guess_quality(guess: str, candidates: list[str], encoded: np.ndarray | None = None,
                           candidate_set: set | None = None,
                           sample_size: int = SAMPLE_SIZE) -> GuessStats:
    """
    Score `guess` against every candidate and summarise the histogram of
    feedback codes. `encoded` and `candidate_set` can be passed in when the
    same candidates are scored many times, in which case the candidates must
    already be normalised.
    """
    guess = normalize_word(guess)
    candidates = list(candidates)
    if not candidates:
        raise EmptyCandidateSet("no candidate words left to score against")
    if encoded is None:
        candidates = [normalize_word(w) for w in candidates]
        encoded = encode_words(candidates)
    if candidate_set is None:
        candidate_set = set(candidates)

    codes = feedback_indices(guess, encoded)
    histogram = np.bincount(codes, minlength=NUM_FEEDBACKS)

    # Seeing a code leaves exactly the candidates that produce it, so the
    # expected remainder is sum(count * count / n).
    expected = int(np.dot(histogram, histogram)) / len(candidates)
    worst = int(np.argmax(histogram))
    members = sorted(candidates[i] for i in np.flatnonzero(codes == worst))

    return GuessStats(
        guess=guess,
        expected_remaining=expected,
        max_remaining=int(histogram[worst]),
        worst_feedback=index_to_feedback(worst),
        worst_sample=tuple(members[:sample_size]),
        is_viable=guess in candidate_set,
    )


# -----------------------------------------------------------------------------
# Worker setup: each pool process keeps its own copy of the candidates
# -----------------------------------------------------------------------------

CANDIDATES: list
ENCODED: np.ndarray
CANDIDATE_SET: set
SAMPLE: int


def init_worker(candidates: list[str], sample_size: int):
    global CANDIDATES, ENCODED, CANDIDATE_SET, SAMPLE
    CANDIDATES = candidates
    ENCODED = encode_words(candidates)
    CANDIDATE_SET = set(candidates)
    SAMPLE = sample_size


def score_guess(guess: str) -> GuessStats:
    return estimate_guess_quality(guess, CANDIDATES, ENCODED, CANDIDATE_SET, SAMPLE)


def rank_guesses(guesses: list[str], candidates: list[str], processes: int | None = None,
                 sample_size: int = SAMPLE_SIZE, progress: bool = False) -> list[GuessStats]:
    """
    Rank every guess by how well it narrows `candidates`, best first.

    Guesses are sorted by the geometric mean of expected and worst-case
    remaining counts, then by expected count, then alphabetically. With
    `processes` other than 1 the guesses are scored in a process pool; the
    result is the same either way.

    Words are lowercased and checked first; a malformed one raises
    InputMismatch.
    """
    guesses = [normalize_word(w) for w in guesses]
    candidates = [normalize_word(w) for w in candidates]
    if not candidates:
        raise EmptyCandidateSet("no candidate words are consistent with the feedback so far")
    if not guesses:
        return []

    if processes is None:
        processes = cpu_count()
    parallel = processes > 1 and len(guesses) >= PARALLEL_THRESHOLD

    start = time.perf_counter()
    if parallel:
        chunksize = max(1, len(guesses) // (processes * 8))
        with Pool(processes=processes,
                  initializer=init_worker,
                  initargs=(candidates, sample_size)) as pool:
            results = list(tqdm(pool.imap(score_guess, guesses, chunksize=chunksize),
                                total=len(guesses),
                                desc="Ranking",
                                unit="word",
                                disable=not progress))
    else:
        encoded = encode_words(candidates)
        candidate_set = set(candidates)
        results = [
            estimate_guess_quality(g, candidates, encoded, candidate_set, sample_size)
            for g in tqdm(guesses, desc="Ranking", unit="word", disable=not progress)
        ]

    results.sort(key=lambda q: q.sort_key)
    log.debug(f"Ranked {len(guesses)} guesses against {len(candidates)} candidates "
              f"in {time.perf_counter() - start:.2f} s "
              f"({processes if parallel else 1} process(es))")
    return results
