import builtins

import pandas as pd
import pytest

import main as main_module
from batch.runner import evaluate_batch
from main import build_parser, main, run_repl



def run(argv):
    return main(build_parser().parse_args(argv))


def test_single_expression(capsys):
    assert run(["-e", "1+2"]) == 0
    out = capsys.readouterr().out
    assert "EXPRESSION: 1+2" in out
    assert "= 3" in out


def test_failure_is_reported_and_sets_exit_status(capsys):
    assert run(["-e", "(1", "-e", "2*2"]) == 1
    out = capsys.readouterr().out
    assert "error: Mismatched parenthesis" in out
    assert "= 4" in out


def test_demo_runs_when_no_input(capsys):
    assert run([]) == 0
    out = capsys.readouterr().out
    assert "EXPRESSION: -sqrt(2)" in out
    assert "= -1.414213562" in out
    assert out.count("===================") == 11


def test_show_rpn(capsys):
    run(["-e", "3 + 4 * 2", "--show_rpn"])
    assert "RPN: 3 4 2 * +" in capsys.readouterr().out


def test_file_and_save_results(tmp_path, capsys):
    source = tmp_path / "exprs.txt"
    source.write_text("2^3^2\nfoo\n", encoding="utf-8")
    target = tmp_path / "out.csv"

    assert run(["--file", str(source), "--save_results", "--results_path", str(target)]) == 1
    saved = pd.read_csv(target)
    assert saved.loc[0, 'result'] == 512.0
    assert saved.loc[1, 'error'] == "UnrecognizedToken"


def test_repl_stops_on_quit(monkeypatch, capsys):
    lines = iter(["max(2,3)*2", "quit", "1+1"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))
    run_repl()
    out = capsys.readouterr().out
    assert "= 6" in out
    assert "= 2" not in out


def test_expressions_are_evaluated_once_when_saving(monkeypatch, tmp_path, capsys):
    calls = []

    def counting_batch(expressions):
        calls.append(list(expressions))
        return evaluate_batch(expressions)

    monkeypatch.setattr(main_module, "evaluate_batch", counting_batch)
    target = tmp_path / "out.csv"
    assert run(["-e", "1+2", "-e", "2*3", "--save_results", "--results_path", str(target)]) == 0
    assert calls == [["1+2", "2*3"]]
    assert pd.read_csv(target)['result'].tolist() == [3.0, 6.0]
    assert "= 6" in capsys.readouterr().out


def test_repl_rejects_other_inputs(monkeypatch):
    monkeypatch.setattr(builtins, "input", lambda prompt="": pytest.fail("input should not be read"))
    assert run(["--repl", "-e", "1+1"]) == 2
    assert run(["--repl", "--file", "exprs.txt"]) == 2
