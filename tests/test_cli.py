import pytest

from wordle_solver import cli
from wordle_solver.engine import SessionState, SolverSession, rank_guesses


def feed(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_format_suggestion(small_solutions):
    (q,) = rank_guesses(["zzzzz"], small_solutions, processes=1, sample_size=2)
    assert cli.format_suggestion(q) == (
        "  zzzzz | average 3.0 left, max 3 left with ..... => abbey alley...")

    (q,) = rank_guesses(["alley"], small_solutions, processes=1)
    assert cli.format_suggestion(q).startswith("* alley | average 1.0 left, max 1 left")


def test_suggestion_list_omits_middle_rows(capsys, words):
    ranked = rank_guesses(words, ["crane", "level"], processes=1)
    cli.print_suggested_guess_list(ranked, top=1)
    out = capsys.readouterr().out
    assert "words omitted" in out
    assert "* crane" in out
    assert "* level" in out


def test_run_reprompts_and_finds_the_word(monkeypatch, capsys, small_solutions):
    feed(monkeypatch, "all", "alley", "gbbgx", "G..GG")
    session = SolverSession(small_solutions, small_solutions)

    assert cli.run(session, processes=1) is SessionState.SOLVED
    out = capsys.readouterr().out
    assert "There are 3 possibilities" in out
    assert "Your guess was not usable" in out
    assert "Scores should be entered" in out
    assert "The word is: abbey" in out


def test_run_reports_contradiction(monkeypatch, capsys, small_solutions):
    feed(monkeypatch, "zzzzz", "ggggg")
    session = SolverSession(small_solutions, small_solutions)

    assert cli.run(session, processes=1) is SessionState.CONTRADICTION
    assert "no possible words remaining" in capsys.readouterr().out


def test_run_stops_with_two_left(capsys):
    session = SolverSession(["abbey", "alley"], ["abbey", "alley"])
    assert cli.run(session, processes=1) is SessionState.ACTIVE
    assert "There are 2 possibilities" in capsys.readouterr().out


def test_main_with_word_files(monkeypatch, capsys, tmp_path, small_solutions):
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("\n".join(small_solutions + ["zzzzz"]))
    frequency = tmp_path / "frequency.txt"
    frequency.write_text("amity 30\nalley 20\nabbey 10\nqueen 5\n")
    feed(monkeypatch, "alley", "gbbbg")

    assert cli.main(["--guesses", str(guesses), "--frequency", str(frequency),
                     "--common", "3", "--processes", "1"]) == 0
    assert "The word is: amity" in capsys.readouterr().out


def test_main_needs_a_solution_source(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["--guesses", str(tmp_path / "guesses.txt")])
