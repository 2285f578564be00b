from collections import Counter

from wordle_solver.eval.evaluate_solvers import (
    compute_average_tries,
    run_solver,
    save_results_to_csv,
)
from wordle_solver.eval.game_walkthroughs import run_walkthroughs
from wordle_solver.eval.plot_results import plot_distribution


def test_compute_average_tries():
    assert compute_average_tries(Counter({1: 1, 2: 2, "fail": 5})) == 5 / 3
    assert compute_average_tries(Counter({"fail": 2})) == float("inf")


def test_run_solver_and_csv(tmp_path, small_solutions):
    results = run_solver(small_solutions, small_solutions, start_word="alley", processes=1)
    assert results == Counter({1: 1, 2: 2})

    path = tmp_path / "normal_results.csv"
    save_results_to_csv(path, results)
    lines = path.read_text().splitlines()
    assert lines[0] == "Tries,Count"
    assert lines[1:3] == ["1,1", "2,2"]
    assert lines[-1] == "fail,0"

    plot_distribution(path, "Normal Mode Guess Distribution", tmp_path / "normal_plot.png")
    assert (tmp_path / "normal_plot.png").exists()


def test_walkthroughs(capsys, small_solutions):
    run_walkthroughs(["abbey"], small_solutions, small_solutions, start_word="alley")
    out = capsys.readouterr().out
    assert "Target word: abbey | Mode: normal | Solved in 2" in out
    assert "Target word: abbey | Mode: hard | Solved in 2" in out
    assert "1. alley → G..GG" in out


def test_plot_keeps_failures_separate(tmp_path):
    path = tmp_path / "hard_results.csv"
    save_results_to_csv(path, Counter({3: 4, 4: 2, "fail": 1}))

    totals = plot_distribution(path, "Hard Mode Guess Distribution", tmp_path / "hard_plot.png")
    assert totals == (6, 1)
    assert (tmp_path / "hard_plot.png").exists()
