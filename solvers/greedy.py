# solvers/greedy.py
from __future__ import annotations

import random
from math import inf
from typing import List

from model import Point, Tour
from .base import TSPSolver


def nearest_index(current: Point, candidates: List[Point]) -> int:
    """
    Index of the candidate closest to `current`.

    Linear scan with a strict comparison, so ties go to the first
    candidate in list order.
    """
    best_idx = -1
    best_dist = inf
    for idx, c in enumerate(candidates):
        d = current.distance_to(c)
        if d < best_dist:
            best_dist = d
            best_idx = idx
    return best_idx


class GreedyTour(TSPSolver):
    """
    Nearest-neighbor construction (multi-start across trials):

      - Pick a uniformly random start point.
      - Repeatedly append the nearest not-yet-visited point.

    Deterministic once the start is fixed; the random source is only
    used for the start choice.
    """

    name = "Greedy"

    def solve(self, tour: Tour, rng: random.Random) -> Tour:
        unvisited: List[Point] = list(tour)
        if not unvisited:
            return tour.clone()

        current = unvisited.pop(rng.randrange(len(unvisited)))
        result = Tour([current])

        while unvisited:
            current = unvisited.pop(nearest_index(current, unvisited))
            result.append(current)

        return result


ALGORITHM = GreedyTour()
