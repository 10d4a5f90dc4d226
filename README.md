# flowshop-sa

Heuristic scheduling for the two-machine flow shop in which every job
passes from the first machine straight onto the second with no waiting
in between. The second machine is unavailable during regular
maintenance windows. The goal is a job order with the smallest possible
maximum lateness (Lmax).

The search uses simulated annealing. It can start from the identity
order, a random order or the earliest-due-date order, and it can reheat
the temperature on a fixed period or when the search stagnates.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library. To run the
tests:

```
pip install ".[test]"
pytest
```

## Library use

`flowshop_sa.model` holds the problem:

- `Task(id, p1, p2, due)` – a job with processing times on both machines
  and a due date.
- `Downtime(start, end)` – a half-open window `[start, end)` during which
  the second machine cannot work.
- `overlaps_downtime(start, duration, downtimes)` – whether an operation
  would touch any downtime.
- `start_times(tasks, perm, downtimes)` – start times on the first
  machine for a job order. A job is delayed one time unit at a time until
  the second machine is free and its second operation avoids every
  downtime.
- `calculate_lmax(tasks, perm, downtimes)` – the maximum lateness of that
  schedule (never below zero).
- `generate_tasks(n, pmin, pmax, tightness=1.0, rng=None)` – random jobs
  with processing times in `[pmin, pmax]`; `tightness` scales the random
  slack added to each due date. Raises `ValueError` if `pmin > pmax`.
- `generate_downtimes(n, pmax, h, tau)` – windows of length `h` starting
  every `tau` units, below a horizon of `2 * n * pmax`. Raises
  `ValueError` if `tau` is not positive.

`flowshop_sa.annealing` holds the search:

- `InitialOrder` – `IDENTITY`, `EDD` or `RANDOM`.
- `initial_permutation(tasks, order, rng)` – the starting order.
- `AnnealingConfig(max_iter=100000, temp0=1000.0, alpha=0.998,
  initial_order=InitialOrder.IDENTITY, reheat_divisor=None)` – with
  `reheat_divisor` set, the temperature returns to `temp0` every
  `max_iter // reheat_divisor` iterations, or after half that many
  rejected moves in a row.
- `Variant` – ready-made configurations, returned by `Variant.config()`:

  | Variant         | Start    | Iterations | Reheat divisor |
  |-----------------|----------|------------|----------------|
  | `BASIC`         | identity | 100000     | –              |
  | `EDD`           | EDD      | 50000      | –              |
  | `EDD_REHEATING` | EDD      | 100000     | 5              |
  | `REHEATING`     | random   | 50000      | 10             |

- `simulated_annealing(tasks, downtimes, config=None, rng=None)` – swaps
  two random positions per iteration and returns the best Lmax found.

```python
import random

from flowshop_sa.annealing import AnnealingConfig, simulated_annealing
from flowshop_sa.model import generate_downtimes, generate_tasks

rng = random.Random(7)
tasks = generate_tasks(10, 1, 5, 1.0, rng)
downtimes = generate_downtimes(10, 5, 3, 20)
print(simulated_annealing(tasks, downtimes, AnnealingConfig(max_iter=5000), rng))
```

`flowshop_sa.experiment` provides `run_test_block(...)`,
`run_experiment(plan, out, rng, log)`, `describe_instance(...)`,
`ExperimentPlan` and `RunRecord` for building experiments in code.

## Running an experiment

```
flowshop-sa-experiment [--variant {basic,edd,edd_reheating,reheating}]
                       [--output FILE] [--seed N] [--max-iter N] [--repeats N]
```

Four blocks are run, each varying one parameter while the others stay
fixed (`h = 3`, `tau = 20`, processing times 1–5, tightness 1):

- `n` – number of jobs (5–9 for `basic`, 5–25 otherwise),
- `h` – downtime length (1, 3, 5, 7, 9),
- `tau` – downtime period (10–50),
- `range` – upper bound of processing times (3, 5, 10, 15, 20).

The fixed number of jobs is 7 for `edd` and 10 for the other variants.
Each instance is printed, then solved 5 times (or `--repeats`), and
every run is written as a CSV row:

```
TypTestu,TestID,n,h,tau,Pmin,Pmax,Tight,Lmax,TimeUs
```

The `basic` variant names the time column `CzasMs`; in every variant it
holds microseconds. Without `--output` the file name depends on the
variant, e.g. `SA51_Lmax_results_15_098.csv` for `basic`. `--seed` makes
the run reproducible.

## Adding averages to results

```
flowshop-sa-averages results.csv [more.csv ...]
```

For every file, rows are grouped by test type and the value of the
parameter that type varies (`n`, `h`, `tau`, or `Pmax` for `range`), and
a column `średnia` with the group's mean Lmax (two decimals) is
appended. Empty rows and rows with the wrong number of fields are
dropped. The result is written next to the input with `_with_avg`
inserted before `.csv`, e.g. `results_with_avg.csv`. Files that cannot
be opened or lack the `TypTestu` and `Lmax` columns are reported on
standard error and skipped. Messages are in Polish.

The same steps are available as `output_name(path)`,
`group_key(row, columns)`, `add_averages(header, rows)` and
`process_file(path)` in `flowshop_sa.averages`.

## Limitations

The package produces CSV results only; it does not plot them or compute
statistics beyond the per-group mean Lmax.