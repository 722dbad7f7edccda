# solvers/base.py
from __future__ import annotations

import random
from typing import Protocol

from model import Tour


class TSPSolver(Protocol):
    """
    Interface for TSP heuristics.

    Given:
      - an initial tour (never mutated by the solver)
      - a private random source

    Return:
      - a new tour over exactly the same points (an empty tour yields an
        empty tour)
    """

    name: str

    def solve(self, tour: Tour, rng: random.Random) -> Tour:
        ...
