# solvers/two_opt.py
from __future__ import annotations

import random

from model import Tour
from .base import TSPSolver


def two_opt_improve(tour: Tour, max_passes: int = 1000) -> int:
    """
    First-improvement 2-opt, in place.

    Each pass scans every edge pair (i, i+1), (k, k+1) with i < k and
    reverses t[i+1..k] whenever that strictly shortens the two edges.
    Stops after a pass without an improving move or after `max_passes`
    passes. Returns the number of passes run.
    """
    n = len(tour)
    passes = 0
    improved = True

    while improved and passes < max_passes:
        improved = False
        passes += 1

        for i in range(n - 1):
            for k in range(i + 1, n):
                c1 = tour[i]
                c2 = tour[(i + 1) % n]
                c3 = tour[k]
                c4 = tour[(k + 1) % n]

                old_dist = c1.distance_to(c2) + c3.distance_to(c4)
                new_dist = c1.distance_to(c3) + c2.distance_to(c4)

                if new_dist < old_dist:
                    tour.reverse_segment(i + 1, k)
                    improved = True

    return passes


class TwoOptTour(TSPSolver):
    """2-opt local search from a random shuffle of the input."""

    name = "TwoOpt"

    def __init__(self, max_passes: int = 1000) -> None:
        # pass cap bounds the runtime on pathological inputs
        self.max_passes: int = max_passes

    def solve(self, tour: Tour, rng: random.Random) -> Tour:
        current = tour.clone()
        current.shuffle(rng)
        two_opt_improve(current, self.max_passes)
        return current


ALGORITHM = TwoOptTour()
