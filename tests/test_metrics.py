import math

import pytest

from metrics import BenchmarkRecord, GlobalBest, compute_speedup
from model import Point, Tour


SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
CROSSED = [Point(0, 0), Point(10, 10), Point(10, 0), Point(0, 10)]


def test_speedup():
    assert compute_speedup(120.0, 120.0) == 1.0
    assert compute_speedup(100.0, 50.0) == 2.0
    assert compute_speedup(100.0, 0.0) == 0.0
    assert compute_speedup(100.0, -3.0) == 0.0


def test_record_row_formatting():
    rec = BenchmarkRecord("berlin52.tsp", "TwoOpt", 4, 1234.5678, 3.14159, 7544.3659)
    assert rec.as_row() == ["berlin52.tsp", "TwoOpt", "4", "1234.57", "3.14", "7544.37"]


def test_record_is_immutable():
    rec = BenchmarkRecord("a", "b", 1, 1.0, 1.0, 1.0)
    with pytest.raises(Exception):
        rec.workers = 2


def test_global_best_starts_empty():
    best = GlobalBest()
    assert best.tour is None
    assert math.isinf(best.distance)


def test_global_best_replaces_only_when_strictly_shorter():
    best = GlobalBest()
    assert best.offer(Tour(CROSSED), "Greedy", 1, 10.0)
    assert best.offer(Tour(SQUARE), "TwoOpt", 2, 5.0)
    assert best.algorithm == "TwoOpt"
    assert best.workers == 2

    # equal distance does not replace
    assert not best.offer(Tour(list(reversed(SQUARE))), "Genetic", 4, 1.0)
    assert not best.offer(Tour(CROSSED), "AntColony", 4, 1.0)
    assert best.algorithm == "TwoOpt"
    assert best.distance == pytest.approx(40.0)


def test_global_best_keeps_a_clone():
    best = GlobalBest()
    t = Tour(SQUARE)
    best.offer(t, "TwoOpt", 1, 1.0)
    t.swap(1, 2)
    assert best.distance == pytest.approx(40.0)
