# Defaults shared by the engine, the CLI and the evaluation scripts.

START_WORD = "slate"
MAX_TRIES = 6

# Number of most frequent words used as possible solutions when no
# explicit solution list is given.
DEFAULT_COMMON = 5000

# Words listed next to the worst-case feedback of a suggestion.
SAMPLE_SIZE = 10

# Remaining candidates printed before each round.
MAX_SHOWN_TARGETS = 200

# Suggestions always shown, viable or not.
TOP_SUGGESTIONS = 15

# Below this many guesses, ranking runs in-process instead of in a pool.
PARALLEL_THRESHOLD = 500
