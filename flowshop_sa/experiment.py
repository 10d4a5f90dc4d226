"""Benchmark experiments: generate instances, run annealing, record results."""

from __future__ import annotations

import argparse
import csv
import dataclasses
import random
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence, TextIO

from .annealing import AnnealingConfig, Variant, simulated_annealing
from .model import Downtime, Task, generate_downtimes, generate_tasks

Log = Callable[[str], object]

_SEPARATOR = "-" * 40


@dataclass(frozen=True)
class RunRecord:
    """One annealing run on one generated instance."""

    label: str
    test_id: int
    n: int
    h: int
    tau: int
    pmin: int
    pmax: int
    tightness: float
    lmax: int
    time_us: int

    def csv_row(self) -> list[str]:
        """Fields of the results CSV row, in column order."""
        return [
            self.label,
            str(self.test_id),
            str(self.n),
            str(self.h),
            str(self.tau),
            str(self.pmin),
            str(self.pmax),
            f"{self.tightness:g}",
            str(self.lmax),
            str(self.time_us),
        ]


def _default_blocks(n_values: tuple[int, ...]) -> tuple[tuple[str, tuple[int, ...]], ...]:
    return (
        ("n", n_values),
        ("h", (1, 3, 5, 7, 9)),
        ("tau", (10, 20, 30, 40, 50)),
        ("range", (3, 5, 10, 15, 20)),
    )


@dataclass(frozen=True)
class ExperimentPlan:
    """A full experiment: several parameter sweeps written to one CSV file."""

    output: str
    config: AnnealingConfig = field(default_factory=AnnealingConfig)
    fixed_n: int = 10
    fixed_h: int = 3
    fixed_tau: int = 20
    pmin: int = 1
    pmax: int = 5
    tightness: float = 1.0
    repeats: int = 5
    time_column: str = "TimeUs"
    blocks: tuple[tuple[str, tuple[int, ...]], ...] = _default_blocks((5, 10, 15, 20, 25))

    @property
    def header(self) -> list[str]:
        return [
            "TypTestu", "TestID", "n", "h", "tau",
            "Pmin", "Pmax", "Tight", "Lmax", self.time_column,
        ]


_PLANS: dict[Variant, ExperimentPlan] = {
    Variant.BASIC: ExperimentPlan(
        output="SA51_Lmax_results_15_098.csv",
        config=Variant.BASIC.config(),
        fixed_n=10,
        time_column="CzasMs",
        blocks=_default_blocks((5, 6, 7, 8, 9)),
    ),
    Variant.EDD: ExperimentPlan(
        output="SA8_Lmax_EDD_no_reheat_54_0998.csv",
        config=Variant.EDD.config(),
        fixed_n=7,
    ),
    Variant.EDD_REHEATING: ExperimentPlan(
        output="SA6_Lmax_results_15_0988.csv",
        config=Variant.EDD_REHEATING.config(),
        fixed_n=10,
    ),
    Variant.REHEATING: ExperimentPlan(
        output="SA7_Lmax_results_155_0988.csv",
        config=Variant.REHEATING.config(),
        fixed_n=10,
    ),
}


def describe_instance(
    label: str, value: int, tasks: Sequence[Task], downtimes: Sequence[Downtime]
) -> str:
    """Human-readable listing of a generated instance."""
    lines = [f"Instancja [{label} = {value}]:", "  Zadania (id, p1, p2, due):"]
    lines.extend(f"    ({t.id}, {t.p1}, {t.p2}, {t.due})" for t in tasks)
    lines.append("  Okresy niedostępności (start--end):")
    lines.extend(f"    {d.start}--{d.end}" for d in downtimes)
    lines.append(_SEPARATOR)
    return "\n".join(lines) + "\n"


def run_test_block(
    label: str,
    values: Iterable[int],
    fixed_n: int,
    fixed_h: int,
    fixed_tau: int,
    pmin: int,
    pmax: int,
    config: AnnealingConfig | None = None,
    tightness: float = 1.0,
    repeats: int = 5,
    rng: random.Random | None = None,
    log: Log | None = None,
) -> list[RunRecord]:
    """Sweep one parameter (``label``) over ``values``, running annealing repeatedly.

    Each value gets one generated instance on which annealing runs ``repeats``
    times. Test ids count from 1 within the block.
    """
    rng = rng or random.Random()
    log = log or sys.stdout.write
    records: list[RunRecord] = []
    test_id = 1
    for value in values:
        n = value if label == "n" else fixed_n
        h = value if label == "h" else fixed_h
        tau = value if label == "tau" else fixed_tau
        max_p = value if label == "range" else pmax

        tasks = generate_tasks(n, pmin, max_p, tightness, rng)
        downtimes = generate_downtimes(n, max_p, h, tau)
        log(describe_instance(label, value, tasks, downtimes))

        for _ in range(repeats):
            began = time.perf_counter_ns()
            lmax = simulated_annealing(tasks, downtimes, config, rng)
            elapsed_us = (time.perf_counter_ns() - began) // 1000
            records.append(
                RunRecord(label, test_id, n, h, tau, pmin, max_p, tightness, lmax, elapsed_us)
            )
            test_id += 1
    return records


def run_experiment(
    plan: ExperimentPlan,
    out: TextIO,
    rng: random.Random | None = None,
    log: Log | None = None,
) -> list[RunRecord]:
    """Run every block of ``plan`` and write the CSV results to ``out``."""
    rng = rng or random.Random()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(plan.header)
    records: list[RunRecord] = []
    for label, values in plan.blocks:
        block = run_test_block(
            label,
            values,
            plan.fixed_n,
            plan.fixed_h,
            plan.fixed_tau,
            plan.pmin,
            plan.pmax,
            plan.config,
            plan.tightness,
            plan.repeats,
            rng,
            log,
        )
        writer.writerows(record.csv_row() for record in block)
        records.extend(block)
    return records


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run simulated-annealing experiments for the no-wait two-machine flow shop."
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.BASIC.value,
        help="annealing variant (default: basic)",
    )
    parser.add_argument("--output", help="CSV file to write (default depends on variant)")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--max-iter", type=int, help="override the iteration count")
    parser.add_argument("--repeats", type=int, help="override runs per instance")
    args = parser.parse_args(argv)

    plan = _PLANS[Variant(args.variant)]
    changes: dict[str, object] = {}
    if args.output:
        changes["output"] = args.output
    if args.repeats is not None:
        changes["repeats"] = args.repeats
    if args.max_iter is not None:
        changes["config"] = dataclasses.replace(plan.config, max_iter=args.max_iter)
    plan = dataclasses.replace(plan, **changes)

    rng = random.Random(args.seed)
    with open(plan.output, "w", encoding="utf-8", newline="") as out:
        run_experiment(plan, out, rng)
    print(f"{plan.output} generated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())