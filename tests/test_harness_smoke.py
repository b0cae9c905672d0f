import csv
import json

import pytest
from wordnarrow.harness import run_case, run_batch, write_csv, write_manifest


def test_run_case_smoke():
    pool = ["crane", "raise", "stare"]
    r = run_case("crane", pool=pool, N=5, seed=42)
    assert "success" in r and "history" in r
    # Every wrong guess eliminates itself, so three candidates fit in six turns
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["remaining"][0] == 3


def test_run_case_plural_answer_wins_on_singular():
    pool = ["boxes", "foxes", "cat", "cats"]
    r = run_case("box", pool=pool, N=3, seed=1)
    assert r["success"] is True
    guess, patt = r["history"][-1]
    assert guess in ("box", "boxes") and patt == "GGG"


def test_run_case_is_reproducible():
    pool = ["crane", "raise", "stare", "trace", "cared", "racer", "cheat", "wreck"]
    a = run_case("cheat", pool=pool, N=5, seed=7)
    b = run_case("cheat", pool=pool, N=5, seed=7)
    assert a["history"] == b["history"]


def test_run_case_guards():
    with pytest.raises(ValueError):
        run_case("crane", pool=["crane"], N=5, max_turns=7)
    with pytest.raises(ValueError):
        run_case("cranes", pool=["crane"], N=6)


def test_run_batch_and_outputs(tmp_path):
    pool = ["crane", "raise", "stare", "trace", "boxes"]
    results = run_batch(pool, pool=pool, N=5, seed=3, sample=3)
    assert [r["answer"] for r in results] == ["crane", "raise", "stare"]
    assert all(r["success"] for r in results)

    csv_path = write_csv(results, str(tmp_path / "run.csv"), max_turns=6, N=5)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["patt_1"].startswith("'")
    assert rows[0]["cand_1"] == "4"

    manifest_path = write_manifest({"num_cases": 3}, str(tmp_path / "m.json"))
    with open(manifest_path, encoding="utf-8") as f:
        assert json.load(f) == {"num_cases": 3}
