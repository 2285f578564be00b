from .errors import EmptyCandidateSet, GameOver, InputMismatch, WordleSolverError
from .feedback import (
    ABSENT,
    ALL_EXACT,
    EXACT,
    PRESENT,
    WORD_LENGTH,
    format_feedback,
    get_feedback,
    normalize_word,
    parse_feedback,
)
from .filtering import filter_words
from .ranking import GuessStats, rank_guesses
from .session import SessionState, SolverSession, solve
