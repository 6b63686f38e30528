import json
from pathlib import Path

import pytest

from slack_simplex.cli import main

EXAMPLES = Path(__file__).parent.parent / "examples"


def example(name: str) -> str:
    return str(EXAMPLES / name)


def test_optimal_run_prints_tableaux_and_answer(capsys):
    assert main([example("scenario_b.json")]) == 0

    out = capsys.readouterr().out
    assert out.count("Current Tableau:") == 3
    assert "Optimal solution found." in out
    assert "x1 = 3\n" in out
    assert "x2 = 1\n" in out
    assert "Maximum Value of Objective Function: 9\n" in out
    assert "Iterations: 2" in out


def test_no_verbose_hides_tableaux(capsys):
    assert main([example("scenario_a.json"), "--no-verbose"]) == 0

    out = capsys.readouterr().out
    assert "Current Tableau:" not in out
    assert "x2 = 4" in out
    assert "Maximum Value of Objective Function: 20" in out


def test_unbounded_exit_code(capsys):
    assert main([example("unbounded.json")]) == 1

    out = capsys.readouterr().out
    assert "The problem is unbounded." in out
    assert "Optimal Solution" not in out


def test_exact_arithmetic(capsys):
    assert main([example("decimals.json"), "--exact", "--no-verbose"]) == 0

    out = capsys.readouterr().out
    assert "x1 = 1\n" in out
    assert "x2 = 3\n" in out
    assert "Maximum Value of Objective Function: 9/10" in out


def test_alternate_optimum_note(tmp_path, capsys):
    path = tmp_path / "tie.json"
    path.write_text(json.dumps({"c": [1, 1], "A": [[1, 1]], "b": [4]}))

    assert main([str(path), "--no-verbose"]) == 0
    assert "alternate optimal" in capsys.readouterr().out


def test_interactive_input(monkeypatch, capsys):
    answers = iter(["2", "1", "3 5", "1 1", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main(["--no-verbose"]) == 0
    out = capsys.readouterr().out
    assert "For constraint 1:" in out
    assert "Maximum Value of Objective Function: 20" in out


def test_interactive_end_of_input(monkeypatch, capsys):
    def no_more(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more)
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "unexpected end of input" in capsys.readouterr().err


def test_negative_rhs_rejected(tmp_path, capsys):
    path = tmp_path / "neg.json"
    path.write_text(json.dumps({"c": [1], "A": [[1]], "b": [-2]}))

    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 2
    assert "negative" in capsys.readouterr().err


def test_missing_model_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.json")])
    assert exc.value.code == 2


def test_graph_needs_two_variables(tmp_path, capsys):
    path = tmp_path / "three.json"
    path.write_text(json.dumps({"c": [1, 1, 1], "A": [[1, 1, 1]], "b": [3]}))

    assert main([str(path), "--no-verbose", "--graph"]) == 0
    assert "Graph only supports 2 variables." in capsys.readouterr().out


@pytest.mark.parametrize("model, message", [
    ({"c": [1], "A": [[1]], "b": 4}, "lists of numbers"),
    ([1, 2, 3], "JSON object"),
    ({"c": [1], "A": [[1]], "b": ["x"]}, "not a number"),
    ({"c": ["x"], "A": [[1]], "b": [1]}, "not a number"),
    ({"c": [1], "A": [1], "b": [1]}, "lists of numbers"),
])
def test_malformed_model_rejected(tmp_path, capsys, model, message):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(model))

    with pytest.raises(SystemExit) as exc:
        main([str(path), "--no-verbose"])
    assert exc.value.code == 2
    assert message in capsys.readouterr().err
