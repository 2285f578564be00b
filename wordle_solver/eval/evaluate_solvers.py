import argparse
import csv
import os
from collections import Counter
from functools import partial
from multiprocessing import Pool, cpu_count

import numpy as np
from tqdm import tqdm

from ..config import MAX_TRIES, START_WORD
from ..engine import solve
from ..words import load_words

MODES = {"normal": False, "hard": True}

# -----------------------------------------------------------------------------
# Worker setup: the word lists are shipped to each process once
# -----------------------------------------------------------------------------

GUESSES: list
SOLUTIONS: list


def init_worker(guesses, solutions):
    global GUESSES, SOLUTIONS
    GUESSES = guesses
    SOLUTIONS = solutions


def solve_for_secret(secret, start_word=START_WORD, hard_mode=False):
    return secret, solve(secret, GUESSES, SOLUTIONS, start_word=start_word,
                         max_tries=MAX_TRIES, hard_mode=hard_mode, processes=1)


def run_solver(guesses, solutions, hard_mode=False, start_word=START_WORD, processes=None):
    """Self-play every solution word; returns a Counter of tries (and "fail")."""
    tries_counter = Counter()
    worker = partial(solve_for_secret, start_word=start_word, hard_mode=hard_mode)
    mode = "hard" if hard_mode else "normal"

    with Pool(processes=processes or cpu_count(),
              initializer=init_worker,
              initargs=(guesses, solutions)) as pool:
        pbar = tqdm(pool.imap_unordered(worker, solutions),
                    total=len(solutions),
                    desc=f"Solving ({mode})",
                    unit="word")
        for _secret, result in pbar:
            if result == -1:
                tries_counter["fail"] += 1
            else:
                tries_counter[result] += 1
            pbar.set_postfix({"avg_tries": f"{compute_average_tries(tries_counter):.2f}"})
    return tries_counter


def save_results_to_csv(filename, tries_counter):
    with open(filename, mode="w", newline="") as file:
        writer = csv.writer(file)
        writer.writerow(["Tries", "Count"])
        for i in range(1, MAX_TRIES + 1):
            writer.writerow([i, tries_counter.get(i, 0)])
        writer.writerow(["fail", tries_counter.get("fail", 0)])


# Computes the average number of tries only for successful attempts
# (i.e., those that did not fail)
def compute_average_tries(tries_counter):
    counts = np.array([tries_counter.get(i, 0) for i in range(1, MAX_TRIES + 1)])
    if counts.sum() == 0:
        return float("inf")
    return float(np.average(np.arange(1, MAX_TRIES + 1), weights=counts))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Self-play every solution word in normal and hard mode")
    parser.add_argument("--guesses", required=True)
    parser.add_argument("--solutions", required=True)
    parser.add_argument("--start-word", default=START_WORD)
    parser.add_argument("--processes", type=int, default=None)
    parser.add_argument("--out-dir", default=os.path.dirname(__file__))
    args = parser.parse_args(argv)

    guesses = load_words(args.guesses)
    solutions = load_words(args.solutions)

    print("\n--- Evaluation Summary ---")
    for mode, hard_mode in MODES.items():
        results = run_solver(guesses, solutions, hard_mode=hard_mode,
                             start_word=args.start_word, processes=args.processes)
        save_results_to_csv(os.path.join(args.out_dir, f"{mode}_results.csv"), results)
        print(f"{mode.capitalize()} mode:")
        print(f"  Avg Tries: {compute_average_tries(results):.2f}")
        print(f"  Failures: {results.get('fail', 0)}")


if __name__ == "__main__":
    main()
