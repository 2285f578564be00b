from __future__ import annotations

import enum
import logging

from ..config import MAX_TRIES, SAMPLE_SIZE, START_WORD
from .errors import EmptyCandidateSet, GameOver
from .feedback import ALL_EXACT, get_feedback, normalize_word, parse_feedback
from .filtering import filter_words
from .ranking import rank_guesses

log = logging.getLogger(__name__)


class SessionState(enum.Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    CONTRADICTION = "contradiction"


class SolverSession:
    """
    One game being narrowed down round by round.

    The session owns the list of solution candidates and only ever shrinks it.
    Each round, ask for `suggestions()`, play any five-letter word in the game,
    then report it with `advance(guess, feedback)`.

    In hard mode the game insists later guesses agree with earlier feedback,
    so the guess list is narrowed the same way as the candidates.
    """

    def __init__(self, guesses: list[str], solutions: list[str], hard_mode: bool = False):
        self._guesses = [normalize_word(w) for w in guesses]
        self._candidates = [normalize_word(w) for w in solutions]
        self.hard_mode = hard_mode
        self.history = []  # stores (guess, feedback)

    @property
    def guesses(self):
        return tuple(self._guesses)

    @property
    def candidates(self):
        return tuple(self._candidates)

    @property
    def state(self) -> SessionState:
        if not self._candidates:
            return SessionState.CONTRADICTION
        if len(self._candidates) == 1:
            return SessionState.SOLVED
        return SessionState.ACTIVE

    @property
    def solution(self) -> str | None:
        return self._candidates[0] if self.state is SessionState.SOLVED else None

    def suggestions(self, processes=None, sample_size=SAMPLE_SIZE, progress=False):
        """Rank the guess list against the current candidates."""
        return rank_guesses(self._guesses, self._candidates, processes=processes,
                            sample_size=sample_size, progress=progress)

    def advance(self, guess: str, feedback: str) -> SessionState:
        """
        Record a played guess and the feedback the game gave for it.

        Raises InputMismatch, leaving the session untouched, if either is
        malformed. Once the word is known it raises GameOver, and once no word
        fits it raises EmptyCandidateSet.
        Returns the new state.
        """
        state = self.state
        if state is SessionState.CONTRADICTION:
            raise EmptyCandidateSet("no candidate words are consistent with the feedback so far")
        if state is SessionState.SOLVED:
            raise GameOver(f"the word is already known: {self.solution}")
        guess = normalize_word(guess)
        feedback = parse_feedback(feedback)

        before = len(self._candidates)
        self._candidates = filter_words(self._candidates, guess, feedback)
        if self.hard_mode:
            self._guesses = filter_words(self._guesses, guess, feedback)
        self.history.append((guess, feedback))

        log.debug(f"{guess} {feedback}: {before} -> {len(self._candidates)} candidates")
        return self.state


def solve(target: str, guesses: list[str], solutions: list[str], start_word: str = START_WORD,
          max_tries: int = MAX_TRIES, hard_mode: bool = False, return_history: bool = False,
          processes: int = 1):
    """
    Play one game against `target`, always taking the top suggestion.

    Returns the number of tries used (or -1 on failure), or the list of
    (guess, feedback) pairs when `return_history` is set.
    """
    session = SolverSession(guesses, solutions, hard_mode=hard_mode)
    target = normalize_word(target)
    guess = normalize_word(start_word)
    tries = 0

    while tries < max_tries:
        tries += 1
        feedback = get_feedback(guess, target)
        if feedback == ALL_EXACT:
            session.history.append((guess, feedback))
            return session.history if return_history else tries
        state = session.advance(guess, feedback)
        if state is SessionState.CONTRADICTION:
            break
        if state is SessionState.SOLVED:
            guess = session.solution
            continue
        # with two left, guessing one of them can win outright
        pool = session.guesses if len(session.candidates) > 2 else session.candidates
        ranked = rank_guesses(pool, session.candidates, processes=processes)
        if not ranked:
            log.warning(f"No guess left to play for target {target}")
            break
        guess = ranked[0].guess

    return session.history if return_history else -1
