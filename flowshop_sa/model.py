"""Two-machine no-wait flow shop with downtimes on the second machine."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Task:
    """A job with operation times on both machines and a due date."""

    id: int
    p1: int
    p2: int
    due: int


@dataclass(frozen=True)
class Downtime:
    """A half-open interval [start, end) during which machine 2 is unavailable."""

    start: int
    end: int


def overlaps_downtime(start: int, duration: int, downtimes: Sequence[Downtime]) -> bool:
    """Return True if [start, start + duration) intersects any downtime."""
    return any(
        not (start + duration <= d.start or start >= d.end) for d in downtimes
    )


def start_times(
    tasks: Sequence[Task], perm: Sequence[int], downtimes: Sequence[Downtime]
) -> list[int]:
    """Start times on machine 1, indexed like ``tasks``, for the given order.

    Each task runs on machine 2 immediately after machine 1 (no wait); its
    start is delayed until machine 2 is free and clear of every downtime.
    Tasks missing from ``perm`` keep a start time of 0.
    """
    starts = [0] * len(tasks)
    free_m1 = 0
    free_m2 = 0
    for idx in perm:
        task = tasks[idx]
        s1 = free_m1
        s2 = s1 + task.p1
        while s2 < free_m2 or overlaps_downtime(s2, task.p2, downtimes):
            s1 += 1
            s2 = s1 + task.p1
        starts[idx] = s1
        free_m1 = s1 + task.p1
        free_m2 = s2 + task.p2
    return starts


def calculate_lmax(
    tasks: Sequence[Task], perm: Sequence[int], downtimes: Sequence[Downtime]
) -> int:
    """Maximum lateness (never below zero) of the schedule built from ``perm``."""
    starts = start_times(tasks, perm, downtimes)
    return max(
        (max(0, s + t.p1 + t.p2 - t.due) for s, t in zip(starts, tasks)),
        default=0,
    )


def generate_tasks(
    n: int,
    pmin: int,
    pmax: int,
    tightness: float = 1.0,
    rng: random.Random | None = None,
) -> list[Task]:
    """Generate ``n`` random tasks; ``tightness`` scales the due-date slack."""
    if pmin > pmax:
        raise ValueError(f"pmin ({pmin}) must not exceed pmax ({pmax})")
    rng = rng or random.Random()
    step = int((pmin + pmax) / 2.0)
    tasks = []
    for i in range(n):
        op1 = rng.randint(pmin, pmax)
        op2 = rng.randint(pmin, pmax)
        slack = int((op1 + op2) * tightness)
        due = i * step + (rng.randrange(slack) if slack > 0 else 0)
        tasks.append(Task(i, op1, op2, due))
    return tasks


def generate_downtimes(n: int, pmax: int, h: int, tau: int) -> list[Downtime]:
    """Downtimes of length ``h`` every ``tau`` units up to a horizon of 2*n*pmax."""
    if tau <= 0:
        raise ValueError(f"tau must be positive, got {tau}")
    horizon = 2 * n * pmax
    return [Downtime(t, t + h) for t in range(tau, horizon, tau)]