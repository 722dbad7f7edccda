# trial.py
from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter, time_ns
from typing import List, Optional
import random
import traceback

from model import Tour
from solvers.base import TSPSolver


@dataclass(frozen=True)
class Trial:
    """One independent solver run: algorithm + seed + shared base tour."""
    algorithm: TSPSolver
    seed: int
    base_tour: Tour


@dataclass(frozen=True)
class TrialResult:
    seed: int
    tour: Tour
    runtime: float  # seconds

    @property
    def distance(self) -> float:
        return self.tour.distance


def derive_seeds(count: int, base_seed: Optional[int] = None) -> List[int]:
    """
    Seeds for one batch: a base (current time in ns unless given) plus a
    per-trial offset, so every trial in the batch gets a distinct seed.
    """
    if base_seed is None:
        base_seed = time_ns()
    return [base_seed + offset for offset in range(count)]


def solve_trial(trial: Trial) -> TrialResult:
    """Run one trial on a private clone with a private random source."""
    start_tour = trial.base_tour.clone()
    rng = random.Random(trial.seed)

    t0 = perf_counter()
    tour = trial.algorithm.solve(start_tour, rng)
    dt = perf_counter() - t0

    if not tour.is_permutation_of(trial.base_tour):
        raise ValueError(
            f"{trial.algorithm.name} returned a tour that is not a permutation "
            f"of the input ({len(tour)} vs {len(trial.base_tour)} points)."
        )
    return TrialResult(seed=trial.seed, tour=tour, runtime=dt)


def run_trial(trial: Trial) -> Optional[TrialResult]:
    """
    Worker function for each pool process.

    - Calls solve_trial(trial).
    - If the solver fails, prints the error and returns None so the
      harness just leaves this trial out of the aggregation.
    """
    try:
        return solve_trial(trial)
    except Exception as e:
        print(f"[ERROR] trial failed for algorithm={trial.algorithm.name} seed={trial.seed}: {e}")
        traceback.print_exc()
        return None
