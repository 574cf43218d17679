import csv
import json

import pytest
from minimaxle.harness import run_batch, run_case, summarize, write_csv, write_manifest
from minimaxle.solvers import MinimaxSolver

SOLUTIONS = ["CRANE", "TRACE", "GRACE", "BRACE", "SLATE", "PLANT"]
GUESSES = SOLUTIONS + ["GUILT", "ADIEU"]


def test_run_case_smoke():
    r = run_case(MinimaxSolver(), "GRACE", guesses=GUESSES, solutions=SOLUTIONS, max_turns=6)
    assert r["success"] is True
    last = r["turns"][-1]
    assert (last["guess"], last["hints"], last["left"]) == ("GRACE", "11111", 1)
    assert 1 <= r["guesses"] == len(r["turns"]) <= 6


def test_run_case_records_pool_and_worst_case():
    r = run_case(MinimaxSolver(), "GRACE", guesses=GUESSES, solutions=SOLUTIONS)
    first = r["turns"][0]
    assert first["pool"] == len(SOLUTIONS)
    for t in r["turns"]:
        assert 1 <= t["worst"] <= t["pool"]
        assert 1 <= t["left"] <= t["pool"]
    for prev, nxt in zip(r["turns"], r["turns"][1:]):
        assert nxt["pool"] == prev["left"]


def test_run_case_answer_outside_solutions_fails_cleanly():
    r = run_case(MinimaxSolver(), "ZESTY", guesses=GUESSES, solutions=SOLUTIONS)
    assert r["success"] is False


def test_run_case_empty_solutions_fails_cleanly():
    r = run_case(MinimaxSolver(), "CRANE", guesses=["CRANE"], solutions=[])
    assert r["success"] is False
    assert r["guesses"] == 0 and r["turns"] == []


def test_solver_refuses_empty_pool():
    with pytest.raises(ValueError):
        MinimaxSolver().next_guess({"candidates": [], "allowed": ["CRANE"]})


def test_run_case_rejects_bad_turn_budget():
    with pytest.raises(ValueError):
        run_case(MinimaxSolver(), "GRACE", guesses=GUESSES, solutions=SOLUTIONS, max_turns=0)


def test_run_batch_summary_and_writers(tmp_path):
    results = run_batch(MinimaxSolver(), SOLUTIONS, guesses=GUESSES, solutions=SOLUTIONS)
    assert len(results) == len(SOLUTIONS)
    assert all(r["success"] for r in results)

    summary = summarize(results)
    assert summary["num_cases"] == summary["solved"] == len(SOLUTIONS)
    assert sum(summary["guess_distribution"].values()) == len(SOLUTIONS)
    assert summary["total_turns"] == sum(r["guesses"] for r in results)

    path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == summary["total_turns"]
    assert rows[0]["turn"] == "1" and rows[0]["pool"] == str(len(SOLUTIONS))
    assert rows[0]["hints"].startswith("'")

    mpath = write_manifest(summary, {"seed": 1}, {"passed": True}, str(tmp_path / "out" / "m.json"))
    with open(mpath, encoding="utf-8") as f:
        m = json.load(f)
    assert m["summary"]["solved"] == len(SOLUTIONS)
    assert m["config"] == {"seed": 1}
