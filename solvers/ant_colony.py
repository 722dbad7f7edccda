# solvers/ant_colony.py
from __future__ import annotations

import random
from typing import List, Optional

from model import Point, Tour
from .base import TSPSolver
from .greedy import nearest_index


class AntColonyTour(TSPSolver):
    """
    Greedy-stochastic ant colony variant.

    There is no pheromone matrix: each ant builds a tour from a random
    start, taking the nearest unvisited point with probability
    `greedy_probability` and a uniformly random unvisited point otherwise.
    `iterations * num_ants` tours are built and the shortest is kept.
    """

    name = "AntColony"

    def __init__(
        self,
        iterations: int = 50,
        num_ants: int = 20,
        greedy_probability: float = 0.7,
    ) -> None:
        if iterations <= 0 or num_ants <= 0:
            raise ValueError("iterations and num_ants must be positive")
        self.iterations: int = iterations
        self.num_ants: int = num_ants
        self.greedy_probability: float = greedy_probability

    def build_ant_tour(self, base: Tour, rng: random.Random) -> Tour:
        unvisited: List[Point] = list(base)
        current = unvisited.pop(rng.randrange(len(unvisited)))
        tour = Tour([current])

        while unvisited:
            if rng.random() < self.greedy_probability:
                idx = nearest_index(current, unvisited)
            else:
                idx = rng.randrange(len(unvisited))
            current = unvisited.pop(idx)
            tour.append(current)

        return tour

    def solve(self, tour: Tour, rng: random.Random) -> Tour:
        if len(tour) == 0:
            return tour.clone()

        best: Optional[Tour] = None
        for _ in range(self.iterations):
            for _ in range(self.num_ants):
                candidate = self.build_ant_tour(tour, rng)
                if best is None or candidate.distance < best.distance:
                    best = candidate

        return best


ALGORITHM = AntColonyTour()
