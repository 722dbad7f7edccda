# metrics.py
from __future__ import annotations

from dataclasses import dataclass
from math import inf
from typing import List, Optional

from model import Tour

RECORD_HEADER = ["Dataset", "Algorithm", "Workers", "Duration(ms)", "Speedup", "BestDistance"]


@dataclass(frozen=True)
class BenchmarkRecord:
    """One output row per (dataset, algorithm, worker count)."""
    dataset: str
    algorithm: str
    workers: int
    duration_ms: float
    speedup: float
    best_distance: float

    def as_row(self) -> List[str]:
        return [
            self.dataset,
            self.algorithm,
            str(self.workers),
            f"{self.duration_ms:.2f}",
            f"{self.speedup:.2f}",
            f"{self.best_distance:.2f}",
        ]


def compute_speedup(baseline_ms: float, duration_ms: float) -> float:
    """Single-worker duration over current duration; 0.0 for a non-positive duration."""
    if duration_ms <= 0:
        return 0.0
    return baseline_ms / duration_ms


@dataclass
class GlobalBest:
    """
    Best tour seen for one dataset, across all algorithms and worker counts.

    Only `offer` updates it, and only when the candidate is strictly
    shorter. The stored tour is a clone.
    """
    tour: Optional[Tour] = None
    algorithm: str = ""
    workers: int = 0
    duration_ms: float = 0.0

    @property
    def distance(self) -> float:
        return self.tour.distance if self.tour is not None else inf

    def offer(self, tour: Tour, algorithm: str, workers: int, duration_ms: float) -> bool:
        if self.tour is not None and tour.distance >= self.distance:
            return False
        self.tour = tour.clone()
        self.algorithm = algorithm
        self.workers = workers
        self.duration_ms = duration_ms
        return True
