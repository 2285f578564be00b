import sys

from ..config import START_WORD
from ..engine import ALL_EXACT, format_feedback, solve
from ..words import load_words

# Test list
TARGET_WORDS = [
    "crane",
    "flint",
    "zesty",
    "abbey",
    "eerie",
]


def run_walkthroughs(word_list, guesses, solutions, start_word=START_WORD):
    for target in word_list:
        for mode, hard_mode in [("normal", False), ("hard", True)]:
            history = solve(target, guesses, solutions, start_word=start_word,
                            hard_mode=hard_mode, return_history=True, processes=1)

            # Check if solved
            solved_turn = next((i + 1 for i, (_, feedback) in enumerate(history)
                                if feedback == ALL_EXACT), None)
            if solved_turn:
                result_line = f"Solved in {solved_turn}"
            else:
                result_line = "Failed to solve"

            print(f"\n Target word: {target} | Mode: {mode} | {result_line}")
            for turn, (guess, feedback) in enumerate(history, start=1):
                print(f"  {turn}. {guess} → {format_feedback(feedback)}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        sys.exit("usage: python -m wordle_solver.eval.game_walkthroughs GUESSES SOLUTIONS [WORD ...]")
    guesses = load_words(sys.argv[1])
    solutions = load_words(sys.argv[2])
    run_walkthroughs(sys.argv[3:] or TARGET_WORDS, guesses, solutions)
