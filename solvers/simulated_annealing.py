# solvers/simulated_annealing.py
from __future__ import annotations

import math
import random

from model import Tour
from .base import TSPSolver

# math.exp() returns 0.0 below roughly this exponent
_MIN_EXPONENT = -745.0


def acceptance_probability(delta: float, temperature: float) -> float:
    """
    Metropolis acceptance probability for a move that changes the tour
    length by `delta` at the given temperature.
    """
    if delta < 0:
        return 1.0
    if temperature <= 0:
        return 0.0
    exponent = -delta / temperature
    if exponent < _MIN_EXPONENT:
        return 0.0
    return math.exp(exponent)


class SimulatedAnnealingTour(TSPSolver):
    """
    Simulated annealing over random 2-opt moves with geometric cooling.

    The temperature goes from `start_temperature` to `end_temperature`
    in exactly `max_iterations` multiplicative steps. Only the two edges
    touched by a move are evaluated. The best tour ever visited is
    returned, not the final annealed state.
    """

    name = "SimulatedAnnealing"

    def __init__(
        self,
        max_iterations: int = 50000,
        start_temperature: float = 100000.0,
        end_temperature: float = 0.001,
    ) -> None:
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if start_temperature <= 0 or end_temperature <= 0:
            raise ValueError("temperatures must be positive")
        self.max_iterations: int = max_iterations
        self.start_temperature: float = start_temperature
        self.end_temperature: float = end_temperature

    @property
    def cooling_rate(self) -> float:
        return (self.end_temperature / self.start_temperature) ** (1.0 / self.max_iterations)

    def solve(self, tour: Tour, rng: random.Random) -> Tour:
        current = tour.clone()
        current.shuffle(rng)
        best = current.clone()

        n = len(current)
        if n < 4:
            # every cyclic order of <= 3 points has the same length
            return best

        cooling_rate = self.cooling_rate
        temp = self.start_temperature

        for _ in range(self.max_iterations):
            i = rng.randrange(n - 1)
            k = rng.randrange(i + 1, n)

            c1 = current[i]
            c2 = current[i + 1]
            c3 = current[k]
            c4 = current[(k + 1) % n]

            old_dist = c1.distance_to(c2) + c3.distance_to(c4)
            new_dist = c1.distance_to(c3) + c2.distance_to(c4)
            delta = new_dist - old_dist

            if delta < 0 or rng.random() < acceptance_probability(delta, temp):
                current.reverse_segment(i + 1, k)
                if current.distance < best.distance:
                    best = current.clone()

            temp *= cooling_rate

        return best


ALGORITHM = SimulatedAnnealingTour()
