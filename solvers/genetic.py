# solvers/genetic.py
from __future__ import annotations

import random
from typing import List

from model import Tour
from .base import TSPSolver


def tournament_select(population: List[Tour], rng: random.Random, size: int = 4) -> Tour:
    """
    Draw `size` members uniformly (with replacement) and keep the shortest.
    The first drawn member wins ties.
    """
    best = population[rng.randrange(len(population))]
    for _ in range(size - 1):
        competitor = population[rng.randrange(len(population))]
        if competitor.distance < best.distance:
            best = competitor
    return best


class GeneticTour(TSPSolver):
    """
    Selection + mutation only genetic search (no crossover).

    Every generation is rebuilt child by child:
      1. tournament-select a parent
      2. clone it
      3. swap two random positions with probability `swap_rate`
      4. reverse a random segment with probability `reverse_rate`
    The best child over the whole run is returned.
    """

    name = "Genetic"

    def __init__(
        self,
        population_size: int = 50,
        generations: int = 500,
        tournament_size: int = 4,
        swap_rate: float = 0.15,
        reverse_rate: float = 0.10,
    ) -> None:
        if population_size <= 0:
            raise ValueError("population_size must be positive")
        if tournament_size <= 0:
            raise ValueError("tournament_size must be positive")
        self.population_size: int = population_size
        self.generations: int = generations
        self.tournament_size: int = tournament_size
        self.swap_rate: float = swap_rate
        self.reverse_rate: float = reverse_rate

    def _mutate(self, child: Tour, rng: random.Random) -> None:
        n = len(child)

        if rng.random() < self.swap_rate:
            a = rng.randrange(n)
            b = rng.randrange(n)
            child.swap(a, b)

        if rng.random() < self.reverse_rate:
            start = rng.randrange(n)
            end = rng.randrange(n)
            if start > end:
                start, end = end, start
            # start == end is a no-op inside reverse_segment
            child.reverse_segment(start, end)

    def solve(self, tour: Tour, rng: random.Random) -> Tour:
        if len(tour) == 0:
            return tour.clone()

        population: List[Tour] = []
        for _ in range(self.population_size):
            t = tour.clone()
            t.shuffle(rng)
            population.append(t)

        best = min(population, key=lambda t: t.distance).clone()

        for _ in range(self.generations):
            next_gen: List[Tour] = []

            for _ in range(self.population_size):
                parent = tournament_select(population, rng, self.tournament_size)
                child = parent.clone()
                self._mutate(child, rng)
                next_gen.append(child)

                if child.distance < best.distance:
                    best = child.clone()

            population = next_gen

        return best


ALGORITHM = GeneticTour()
