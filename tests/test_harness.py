import math

import pytest

from datasets import random_points
from harness import BatchResult, HarnessState, TrialHarness, normalize_worker_counts
from metrics import GlobalBest
from model import Point, Tour
from solvers.greedy import GreedyTour
from solvers.two_opt import TwoOptTour


class AlwaysFails:
    name = "AlwaysFails"

    def solve(self, tour, rng):
        raise RuntimeError("solver crashed")


class FailsHalfTheTime:
    name = "FailsHalfTheTime"

    def solve(self, tour, rng):
        if rng.random() < 0.5:
            raise RuntimeError("unlucky seed")
        return tour.clone()


def test_normalize_worker_counts():
    assert normalize_worker_counts([4, 2, 2]) == [1, 2, 4]
    assert normalize_worker_counts([1, 8, 4]) == [1, 4, 8]
    assert normalize_worker_counts([]) == [1]
    with pytest.raises(ValueError):
        normalize_worker_counts([0, 2])


def test_invalid_harness_arguments():
    with pytest.raises(ValueError):
        TrialHarness(trials_per_batch=0)
    with pytest.raises(ValueError):
        TrialHarness().run_batch(Tour(random_points(5)), GreedyTour(), workers=0)


def test_batch_result_best():
    square = Tour([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])
    crossed = Tour([Point(0, 0), Point(10, 10), Point(10, 0), Point(0, 10)])
    batch = BatchResult("x", 1, 5.0, tours=[crossed, square])
    assert batch.best is square
    assert batch.best_distance == pytest.approx(40.0)
    empty = BatchResult("x", 1, 5.0)
    assert empty.best is None
    assert math.isinf(empty.best_distance)


def test_run_batch_collects_every_trial():
    base = Tour(random_points(12, seed=1))
    harness = TrialHarness(trials_per_batch=16)
    batch = harness.run_batch(base, GreedyTour(), workers=2, base_seed=1000)

    assert harness.state is HarnessState.DONE
    assert len(batch.tours) == 16
    assert batch.failures == 0
    assert batch.duration_ms > 0
    assert batch.best_distance == min(t.distance for t in batch.tours)
    for t in batch.tours:
        assert t.is_permutation_of(base)


def test_failures_do_not_abort_the_batch(capsys):
    base = Tour(random_points(6, seed=1))
    batch = TrialHarness(trials_per_batch=16).run_batch(base, FailsHalfTheTime(), workers=4, base_seed=7)

    assert batch.failures + len(batch.tours) == 16
    assert 0 < batch.failures < 16
    assert batch.best is not None
    assert "[WARN]" in capsys.readouterr().out


def test_all_failed_batch_has_no_best():
    base = Tour(random_points(6, seed=1))
    batch = TrialHarness(trials_per_batch=4).run_batch(base, AlwaysFails(), workers=2)
    assert batch.failures == 4
    assert batch.best is None
    assert math.isinf(batch.best_distance)


def test_sweep_records_and_speedup():
    base = Tour(random_points(15, seed=4))
    best = GlobalBest()
    harness = TrialHarness(trials_per_batch=16)

    records = list(harness.sweep("rand15", base, TwoOptTour(), [1, 2, 4], best, base_seed=50))

    assert [r.workers for r in records] == [1, 2, 4]
    assert records[0].speedup == 1.0
    assert all(r.speedup >= 0 for r in records)
    assert all(r.dataset == "rand15" and r.algorithm == "TwoOpt" for r in records)
    assert best.tour is not None
    assert best.distance == pytest.approx(min(r.best_distance for r in records))
    assert best.algorithm == "TwoOpt"


def test_sweep_runs_baseline_first_when_missing():
    base = Tour(random_points(8, seed=4))
    records = list(
        TrialHarness(trials_per_batch=2).sweep("d", base, GreedyTour(), [2], GlobalBest())
    )
    assert [r.workers for r in records] == [1, 2]
    assert records[0].speedup == 1.0


def test_sweep_global_best_spans_algorithms():
    base = Tour(random_points(10, seed=3))
    best = GlobalBest()
    harness = TrialHarness(trials_per_batch=4)
    list(harness.sweep("d", base, AlwaysFails(), [1], best))
    assert best.tour is None

    records = list(harness.sweep("d", base, GreedyTour(), [1], best))
    assert best.algorithm == "Greedy"
    assert best.distance == pytest.approx(records[0].best_distance)


def test_state_transitions_in_order(capsys):
    base = Tour(random_points(6, seed=1))
    harness = TrialHarness(trials_per_batch=2, log_events=True)
    assert harness.state is HarnessState.IDLE

    harness.run_batch(base, GreedyTour(), workers=1, base_seed=3)

    states = [
        line.split("[STATE]")[1].strip()
        for line in capsys.readouterr().out.splitlines()
        if "[STATE]" in line
    ]
    assert states == [
        "idle",
        "dispatching",
        "awaiting_completion",
        "aggregating",
        "done",
    ]
