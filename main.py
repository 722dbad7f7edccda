import sys
from pathlib import Path

from config import Config
from batch_run import run_dataset
from io_utils import RecordWriter, make_run_dir, save_config
from plot_utils import plot_scaling_from_results
from viz import draw_tour


def main(dataset_path: str) -> None:
    """
    Single-dataset entry point.

    Typical usage:
      1. Open config.py / batch_config.py and edit the defaults
         (worker counts, algorithms, trials per batch, ...).
      2. Run:
             python main.py datasets/berlin52.tsp
      3. Inspect the output folder under outputs/ (results, summary,
         config.json, best tour PNG, scaling plots).
    """
    cfg = Config()
    path = Path(dataset_path)

    # outputs/run_<dataset>_T16_W16_YYYYMMDD-HHMMSS-<uid>/
    run_dir = make_run_dir(cfg, base="outputs", dataset_name=path.name)

    # config.json so every run is reproducible
    save_config(cfg, run_dir)

    results_path = run_dir / cfg.results_filename
    with RecordWriter(results_path) as writer:
        result = run_dataset(path, cfg, writer, run_dir)

    if result is None or not result.records:
        print(f"No results for {path}.")
        return

    best = result.best
    if best.tour is not None:
        draw_tour(
            best.tour,
            out_path=run_dir / "best_tour.png",
            title=f"{result.name}: {best.algorithm} ({best.workers} workers)",
        )

    plot_scaling_from_results(results_path, output_dir=run_dir, show=False)

    print(f"Run directory: {run_dir}")
    print(f"Best distance: {best.distance:.2f} by {best.algorithm}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python main.py <dataset.tsp>")
        sys.exit(2)
    main(sys.argv[1])
