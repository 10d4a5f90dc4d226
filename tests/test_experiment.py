import io
import random

import pytest

from flowshop_sa.annealing import AnnealingConfig
from flowshop_sa.experiment import (
    ExperimentPlan,
    RunRecord,
    describe_instance,
    main,
    run_experiment,
    run_test_block,
)
from flowshop_sa.model import Downtime, Task

QUICK = AnnealingConfig(max_iter=20)


def _block(label, values, seed=1, repeats=2, log=None):
    return run_test_block(
        label, values, 4, 3, 20, 1, 5, QUICK, 1.0, repeats,
        random.Random(seed), log if log is not None else (lambda s: None),
    )


def test_csv_row_formats_tightness_like_stream():
    record = RunRecord("n", 1, 5, 3, 20, 1, 5, 1.0, 7, 123)
    assert record.csv_row() == ["n", "1", "5", "3", "20", "1", "5", "1", "7", "123"]


def test_csv_row_fractional_tightness():
    record = RunRecord("h", 2, 10, 1, 20, 1, 5, 0.5, 0, 9)
    assert record.csv_row()[7] == "0.5"


def test_describe_instance_layout():
    text = describe_instance("h", 3, [Task(0, 1, 2, 3)], [Downtime(20, 23)])
    lines = text.splitlines()
    assert lines[0] == "Instancja [h = 3]:"
    assert lines[1] == "  Zadania (id, p1, p2, due):"
    assert lines[2] == "    (0, 1, 2, 3)"
    assert lines[3] == "  Okresy niedostępności (start--end):"
    assert lines[4] == "    20--23"
    assert lines[5] == "-" * 40


def test_block_sweeps_n_and_counts_ids():
    records = _block("n", [2, 3, 5])
    assert [r.test_id for r in records] == list(range(1, 7))
    assert [r.n for r in records] == [2, 2, 3, 3, 5, 5]
    assert all(r.h == 3 and r.tau == 20 and r.pmax == 5 for r in records)


def test_block_sweeps_range_sets_pmax():
    records = _block("range", [3, 10], repeats=1)
    assert [r.pmax for r in records] == [3, 10]
    assert all(r.n == 4 for r in records)


def test_block_sweeps_h_and_tau():
    h_records = _block("h", [1, 7], repeats=1)
    tau_records = _block("tau", [10, 30], repeats=1)
    assert [r.h for r in h_records] == [1, 7]
    assert [r.tau for r in tau_records] == [10, 30]


def test_block_results_are_non_negative():
    records = _block("n", [3, 4])
    assert all(r.lmax >= 0 and r.time_us >= 0 for r in records)


def test_block_reproducible_with_seed():
    first = [r.lmax for r in _block("n", [4, 6], seed=42)]
    second = [r.lmax for r in _block("n", [4, 6], seed=42)]
    assert first == second


def test_block_logs_each_instance():
    messages = []
    _block("tau", [10, 20], log=messages.append)
    assert len(messages) == 2
    assert messages[0].startswith("Instancja [tau = 10]:")


def test_block_rejects_zero_tau():
    with pytest.raises(ValueError):
        _block("tau", [0])


def test_run_experiment_writes_header_and_rows():
    plan = ExperimentPlan(
        output="unused.csv",
        config=QUICK,
        fixed_n=3,
        repeats=2,
        blocks=(("n", (2, 3)), ("h", (1,))),
    )
    out = io.StringIO()
    records = run_experiment(plan, out, random.Random(5), lambda s: None)
    lines = out.getvalue().splitlines()
    assert lines[0] == ",".join(plan.header)
    assert plan.header[-1] == "TimeUs"
    assert len(records) == 6
    assert lines[1:] == [",".join(r.csv_row()) for r in records]
    assert [r.test_id for r in records if r.label == "h"] == [1, 2]


def test_main_writes_csv(tmp_path, capsys):
    target = tmp_path / "results.csv"
    code = main([
        "--variant", "edd", "--output", str(target),
        "--max-iter", "5", "--seed", "3", "--repeats", "1",
    ])
    assert code == 0
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0].split(",")[0] == "TypTestu"
    assert len(lines) == 1 + 20
    assert str(target) in capsys.readouterr().out