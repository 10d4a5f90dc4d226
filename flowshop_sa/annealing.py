"""Simulated annealing over job permutations minimising Lmax."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .model import Downtime, Task, calculate_lmax


class InitialOrder(Enum):
    """How the starting permutation is chosen."""

    IDENTITY = "identity"
    EDD = "edd"
    RANDOM = "random"


@dataclass(frozen=True)
class AnnealingConfig:
    """Parameters of one annealing run.

    ``reheat_divisor`` enables reheating every ``max_iter // reheat_divisor``
    iterations (or after half that many rejections in a row).
    """

    max_iter: int = 100_000
    temp0: float = 1000.0
    alpha: float = 0.998
    initial_order: InitialOrder = InitialOrder.IDENTITY
    reheat_divisor: int | None = None

    def __post_init__(self) -> None:
        if self.max_iter < 0:
            raise ValueError("max_iter must not be negative")
        if self.reheat_divisor is not None:
            if self.reheat_divisor <= 0:
                raise ValueError("reheat_divisor must be positive")
            if self.max_iter // self.reheat_divisor == 0:
                raise ValueError("reheating period would be zero")

    @property
    def reheating_period(self) -> int | None:
        if self.reheat_divisor is None:
            return None
        return self.max_iter // self.reheat_divisor


class Variant(Enum):
    """The annealing variants used in the experiments."""

    BASIC = "basic"
    EDD = "edd"
    EDD_REHEATING = "edd_reheating"
    REHEATING = "reheating"

    def config(self) -> AnnealingConfig:
        if self is Variant.BASIC:
            return AnnealingConfig(max_iter=100_000)
        if self is Variant.EDD:
            return AnnealingConfig(max_iter=50_000, initial_order=InitialOrder.EDD)
        if self is Variant.EDD_REHEATING:
            return AnnealingConfig(
                max_iter=100_000, initial_order=InitialOrder.EDD, reheat_divisor=5
            )
        return AnnealingConfig(
            max_iter=50_000, initial_order=InitialOrder.RANDOM, reheat_divisor=10
        )


def initial_permutation(
    tasks: Sequence[Task],
    order: InitialOrder = InitialOrder.IDENTITY,
    rng: random.Random | None = None,
) -> list[int]:
    """Starting order of task indices."""
    perm = list(range(len(tasks)))
    if order is InitialOrder.EDD:
        perm.sort(key=lambda i: tasks[i].due)
    elif order is InitialOrder.RANDOM:
        (rng or random.Random()).shuffle(perm)
    return perm


def _acceptance(delta: int, temp: float) -> float:
    if temp <= 0:
        return 0.0
    return math.exp(delta / temp)


def simulated_annealing(
    tasks: Sequence[Task],
    downtimes: Sequence[Downtime],
    config: AnnealingConfig | None = None,
    rng: random.Random | None = None,
) -> int:
    """Return the best Lmax found by simulated annealing."""
    config = config or AnnealingConfig()
    rng = rng or random.Random()
    perm = initial_permutation(tasks, config.initial_order, rng)
    best = current = calculate_lmax(tasks, perm, downtimes)
    n = len(tasks)
    if n == 0:
        return best

    period = config.reheating_period
    temp = config.temp0
    stagnation = 0
    for iteration in range(1, config.max_iter + 1):
        candidate = perm.copy()
        i = rng.randint(0, n - 1)
        j = rng.randint(0, n - 1)
        if i != j:
            candidate[i], candidate[j] = candidate[j], candidate[i]

        new = calculate_lmax(tasks, candidate, downtimes)
        if new < current or rng.random() < _acceptance(current - new, temp):
            perm = candidate
            current = new
            stagnation = 0
            best = min(best, new)
        else:
            stagnation += 1

        temp *= config.alpha
        if period is not None and (
            iteration % period == 0 or stagnation >= period // 2
        ):
            temp = config.temp0
            stagnation = 0
    return best