class WordleSolverError(Exception):
    """Base class for errors raised by the solver engine."""


class InputMismatch(WordleSolverError, ValueError):
    """A word or feedback code is not five valid symbols long."""


class EmptyCandidateSet(WordleSolverError):
    """No solution candidate is consistent with the feedback seen so far."""


class GameOver(WordleSolverError):
    """A round was reported after the word was already known."""
