import json

import pytest

from config import Config
from io_utils import RecordWriter, make_run_dir, save_best_route, save_config
from metrics import BenchmarkRecord, GlobalBest
from model import Point, Tour


def test_record_writer(tmp_path):
    path = tmp_path / "out" / "results.txt"
    with RecordWriter(path) as writer:
        writer.write(BenchmarkRecord("eil51.tsp", "Greedy", 1, 10.0, 1.0, 500.123))
        writer.write(BenchmarkRecord("eil51.tsp", "Greedy", 2, 5.5, 1.818, 499.0))
        assert writer.count == 2
        # flushed per record, readable while still open
        assert len(path.read_text().splitlines()) == 3

    lines = path.read_text().splitlines()
    assert lines[0] == "Dataset;Algorithm;Workers;Duration(ms);Speedup;BestDistance"
    assert lines[1] == "eil51.tsp;Greedy;1;10.00;1.00;500.12"
    assert lines[2] == "eil51.tsp;Greedy;2;5.50;1.82;499.00"


def test_save_best_route(tmp_path):
    best = GlobalBest()
    tour = Tour([Point(0, 0, 1), Point(10, 0, 2), Point(10, 10, 3), Point(0, 10, 4)])
    best.offer(tour, "TwoOpt", 4, 12.3456)

    path = save_best_route(best, "square.tsp", tmp_path)
    assert path.name == "solution_square.tsp.txt"
    text = path.read_text()
    assert "Best algorithm: TwoOpt" in text
    assert "Total distance: 40.00" in text
    assert "Duration(ms): 12.35" in text
    assert "Route: 1 2 3 4" in text


def test_save_best_route_requires_a_tour(tmp_path):
    with pytest.raises(ValueError):
        save_best_route(GlobalBest(), "x.tsp", tmp_path)


def test_run_dir_and_config(tmp_path):
    cfg = Config(worker_counts=[1, 2, 8], trials_per_batch=4)
    a = make_run_dir(cfg, base=str(tmp_path), dataset_name="berlin52.tsp")
    b = make_run_dir(cfg, base=str(tmp_path), dataset_name="berlin52.tsp")
    assert a != b
    assert a.name.startswith("run_berlin52_T4_W8_")

    save_config(cfg, a)
    data = json.loads((a / "config.json").read_text())
    assert data["worker_counts"] == [1, 2, 8]
    assert data["trials_per_batch"] == 4
