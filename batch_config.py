from __future__ import annotations

from typing import List

# ---------------------------------------------------------------------------
# Worker-pool sizes for batch_run.py
# ---------------------------------------------------------------------------
# Every algorithm is benchmarked once per worker count. The single-worker
# run is the speedup baseline, so 1 is always run first even if it is
# missing from this list.
#
# Example:
#   WORKER_COUNTS = [1, 2, 4]        # quick laptop run
#   WORKER_COUNTS = [1, 2, 4, 8, 16] # full sweep on a bigger machine
WORKER_COUNTS: List[int] = [1, 2, 4, 6, 8, 12, 16]

# Independent randomized trials per (dataset, algorithm, worker count).
TRIALS_PER_BATCH: int = 16

# ---------------------------------------------------------------------------
# Algorithms for batch_run.py
# ---------------------------------------------------------------------------
# Full options:
#   ["Greedy", "TwoOpt", "SimulatedAnnealing", "Genetic", "AntColony"]
ALGORITHM_NAMES: List[str] = ["Greedy", "TwoOpt", "SimulatedAnnealing", "Genetic", "AntColony"]


# -----------------------------------------------------------------------
# Algorithm details, no modification is needed below
# -----------------------------------------------------------------------

    # TSP heuristics (see solvers/):
    #
    #   "Greedy"             - Nearest-neighbor construction from a random start
    #                          (multi-start across the trials of a batch).
    #
    #   "TwoOpt"             - 2-opt local search from a random shuffle,
    #                          capped at 1000 full passes.
    #
    #   "SimulatedAnnealing" - Random 2-opt moves, 50000 iterations, geometric
    #                          cooling from 100000 down to 0.001; returns the
    #                          best tour seen.
    #
    #   "Genetic"            - Tournament selection (4) + swap (0.15) and
    #                          segment-reversal (0.10) mutation, population 50,
    #                          500 generations, no crossover.
    #
    #   "AntColony"          - 50 iterations x 20 ants, each ant picks the
    #                          nearest city with p=0.7 or a random one with
    #                          p=0.3; no pheromone matrix.
