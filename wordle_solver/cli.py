import argparse
import logging
import shutil
import textwrap

from .config import DEFAULT_COMMON, MAX_SHOWN_TARGETS, SAMPLE_SIZE, TOP_SUGGESTIONS
from .engine import (
    InputMismatch,
    SessionState,
    SolverSession,
    format_feedback,
    normalize_word,
    parse_feedback,
)
from .words import build_solution_list, load_words, order_by_frequency

SCORE_HELP = """
Scores should be entered as 5 characters, with this code:
  . = letter that did not match anything
  y = (yellow) letter that's in the word but in the wrong place
  G = (GREEN) the right letter in the right place
"""


def format_suggestion(q):
    sample = " ".join(q.worst_sample)
    more = "..." if q.max_remaining > len(q.worst_sample) else ""
    return (f"{'*' if q.is_viable else ' '} {q.guess} | "
            f"average {q.expected_remaining:.1f} left, "
            f"max {q.max_remaining} left with {format_feedback(q.worst_feedback)} "
            f"=> {sample}{more}")


def print_suggested_guess_list(ranked, top=TOP_SUGGESTIONS):
    """Print the best guesses, plus any further ones that could win outright."""
    num_viable = 0
    num_skipped = 0
    for i, q in enumerate(ranked):
        if i < top or q.is_viable:
            if num_skipped:
                print(f"   ... ({num_skipped} words omitted) ...")
                num_skipped = 0
            print(format_suggestion(q))
        else:
            num_skipped += 1

        if q.is_viable:
            num_viable += 1
        if num_viable > 4 and i > 10:
            break


def print_remaining(candidates):
    shown = " ".join(candidates[:MAX_SHOWN_TARGETS])
    if len(candidates) > MAX_SHOWN_TARGETS:
        shown += "..."
    width = shutil.get_terminal_size(fallback=(80, 24)).columns
    print(f"There are {len(candidates)} possibilities for the word.\n")
    print(textwrap.fill(shown, width=width))


def read_guess():
    while True:
        text = input("\nPlease enter the guess you'll use: ")
        try:
            return normalize_word(text)
        except InputMismatch as e:
            print(f"\nYour guess was not usable: {e}.")


def read_feedback():
    while True:
        text = input('Enter the score you got for that word, in ".y.GG" format: ')
        try:
            return parse_feedback(text)
        except InputMismatch:
            print(SCORE_HELP)


def run(session, processes=None, top=TOP_SUGGESTIONS):
    """Suggest, read the played guess and score, narrow down; until the word is known."""
    while True:
        state = session.state
        if state is SessionState.CONTRADICTION:
            print("Somehow, there are no possible words remaining. "
                  "Did you enter your guesses and scores correctly?")
            return state
        if state is SessionState.SOLVED:
            print(f"The word is: {session.solution}")
            return state

        print_remaining(session.candidates)
        if len(session.candidates) == 2:
            # guess one of them; if it's not that one it's the other
            return state

        print("\nSUGGESTED GUESSES (sorted by sqrt(expected_remaining * max_remaining))")
        print("=" * 78)
        ranked = session.suggestions(processes=processes, sample_size=SAMPLE_SIZE, progress=True)
        print_suggested_guess_list(ranked, top=top)

        guess = read_guess()
        feedback = read_feedback()
        session.advance(guess, feedback)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="wordle-solver",
        description="Suggest good guesses for Wordle, narrowing the possible "
                    "solutions with every score you enter.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--guesses", required=True,
                        help="Word list the game accepts as guesses (JSON or text)")
    parser.add_argument("--frequency",
                        help="Word frequency list, most common first")
    sources = parser.add_mutually_exclusive_group()
    sources.add_argument("--solutions",
                         help="Use the game's own solution list as the possible words")
    sources.add_argument("--common", type=int, default=DEFAULT_COMMON,
                         help="Use this many of the most common valid words as the possible words")
    parser.add_argument("--hard", action="store_true",
                        help="Hard mode: only suggest guesses consistent with earlier scores")
    parser.add_argument("--processes", type=int, default=None,
                        help="Worker processes for ranking (default: one per CPU)")
    parser.add_argument("--top", type=int, default=TOP_SUGGESTIONS,
                        help="Number of suggestions always shown")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if not args.solutions and not args.frequency:
        parser.error("either --solutions or --frequency is required")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    guesses = load_words(args.guesses)
    frequency = load_words(args.frequency) if args.frequency else None
    if args.solutions:
        solutions = load_words(args.solutions)
        if frequency:
            solutions = order_by_frequency(solutions, frequency)
    else:
        solutions = build_solution_list(frequency, guesses, args.common)

    session = SolverSession(guesses, solutions, hard_mode=args.hard)
    try:
        run(session, processes=args.processes, top=args.top)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
