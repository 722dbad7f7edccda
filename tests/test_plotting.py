import pandas as pd
import pytest

from datasets import random_points
from io_utils import RecordWriter
from metrics import BenchmarkRecord
from model import Tour
from plot_utils import plot_scaling_from_results, read_results, summarize_results
from viz import draw_tour


def write_results(path):
    with RecordWriter(path) as writer:
        for algo, dists in (("Greedy", (120.0, 118.5, 119.0)), ("TwoOpt", (101.0, 99.5, 100.0))):
            for workers, duration, dist in zip((1, 2, 4), (400.0, 210.0, 120.0), dists):
                writer.write(BenchmarkRecord("d.tsp", algo, workers, duration, 400.0 / duration, dist))


def test_read_and_summarize(tmp_path):
    path = tmp_path / "results.txt"
    write_results(path)
    df = read_results(path)
    assert len(df) == 6

    summary = summarize_results(df).set_index("Algorithm")
    assert summary.loc["TwoOpt", "best_distance"] == pytest.approx(99.5)
    assert summary.loc["Greedy", "peak_workers"] == 4
    assert summary.loc["Greedy", "baseline_ms"] == pytest.approx(400.0)


def test_read_results_checks_columns(tmp_path):
    path = tmp_path / "bad.txt"
    pd.DataFrame({"a": [1]}).to_csv(path, sep=";", index=False)
    with pytest.raises(ValueError):
        read_results(path)
    with pytest.raises(FileNotFoundError):
        read_results(tmp_path / "missing.txt")


def test_scaling_plots_written(tmp_path):
    path = tmp_path / "results.txt"
    write_results(path)
    plot_scaling_from_results(path, output_dir=tmp_path / "plots", show=False)
    assert (tmp_path / "plots" / "scaling_d_tsp.pdf").exists()


def test_draw_tour(tmp_path):
    out = tmp_path / "tour.png"
    draw_tour(Tour(random_points(10, seed=1)), out)
    assert out.exists() and out.stat().st_size > 0
