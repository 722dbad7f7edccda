#!/usr/bin/env python3
"""
Batch benchmark runner.

This script sweeps every dataset in a directory through every TSP
heuristic and every worker-pool size:

- Parse each .tsp file in the dataset directory.
- For each algorithm, for each worker count, run a batch of independent
  randomized trials on a process pool (see harness.py).
- Record duration, speedup vs. the single-worker run, and best distance.
- Append one semicolon-delimited line per configuration to
  `outputs_batch/tsp_results.txt`, flushing after each line.
- Write `outputs_batch/solution_<dataset>.txt` with the best tour found
  for that dataset across all algorithms and worker counts.
- With --training-data, also write `outputs_batch/tsp_training_data.csv`:
  one CityCount,Algorithm,ThreadCount,RuntimeMS row per configuration.

Usage
-----

From the repo root:

    python batch_run.py
    python batch_run.py --data-dir datasets --workers 1,2,4 --algorithms Greedy,TwoOpt

Defaults come from config.py / batch_config.py.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from config import Config
from datasets import list_dataset_files, load_points
from harness import TrialHarness
from io_utils import RecordWriter, save_best_route, save_training_data, training_rows
from metrics import BenchmarkRecord, GlobalBest
from model import Tour
from plot_utils import plot_scaling_from_results
from solvers import get_solver
from solvers.base import TSPSolver


@dataclass
class DatasetResult:
    name: str
    city_count: int = 0
    records: List[BenchmarkRecord] = field(default_factory=list)
    best: GlobalBest = field(default_factory=GlobalBest)


def resolve_algorithms(names: Sequence[str]) -> List[TSPSolver]:
    """Look up solver instances by registry name (KeyError on unknown names)."""
    return [get_solver(n) for n in names]


# ---------------------------------------------------------------------
# One dataset: every algorithm x every worker count
# ---------------------------------------------------------------------

def run_dataset(
    path: Path,
    cfg: Config,
    writer: RecordWriter,
    out_dir: Path,
    algorithms: Optional[Sequence[TSPSolver]] = None,
    harness: Optional[TrialHarness] = None,
) -> Optional[DatasetResult]:
    """
    Benchmark one dataset file.

    Returns None (with a warning) if the file cannot be read or holds no
    coordinates. Write failures for single records or the summary are
    reported and do not stop the sweep.
    """
    path = Path(path)
    name = path.name

    try:
        points = load_points(path)
    except OSError as e:
        print(f"[WARN] Could not read dataset {path}: {e}. Skipping.")
        return None

    if not points:
        print(f"[WARN] No coordinates found in {name}. Skipping.")
        return None

    if algorithms is None:
        algorithms = resolve_algorithms(cfg.algorithm_names)
    if harness is None:
        harness = TrialHarness(trials_per_batch=cfg.trials_per_batch, log_events=cfg.log_events)

    print("\n==========================================")
    print(f"DATASET: {name} ({len(points)} cities)")

    base_tour = Tour(points)
    result = DatasetResult(name=name, city_count=len(points))

    for a_idx, algo in enumerate(algorithms):
        print(f"\n   -> Algorithm: {algo.name}")
        seed = None if cfg.base_seed is None else cfg.base_seed + a_idx * 1_000_000

        for record in harness.sweep(name, base_tour, algo, cfg.worker_counts, result.best, seed):
            result.records.append(record)
            print(
                f"      Workers: {record.workers} | Duration: {record.duration_ms:.0f} ms"
                f" | Speedup: {record.speedup:.2f} | Distance: {record.best_distance:.0f}"
            )
            try:
                writer.write(record)
            except OSError as e:
                print(f"[ERROR] Could not write record for {name}/{algo.name}/{record.workers}: {e}")

    if result.best.tour is not None:
        try:
            out_path = save_best_route(result.best, name, out_dir)
            print(f"      >>> Best route saved: {out_path}")
        except OSError as e:
            print(f"[ERROR] Could not save best route for {name}: {e}")
    else:
        print(f"[WARN] Every trial failed for {name}; no best route to save.")

    return result


# ---------------------------------------------------------------------
# Batch driver
# ---------------------------------------------------------------------

def main_batch(cfg: Optional[Config] = None) -> List[BenchmarkRecord]:
    cfg = cfg if cfg is not None else Config()

    try:
        files = list_dataset_files(cfg.dataset_dir, cfg.dataset_suffix)
    except FileNotFoundError as e:
        print(f"[WARN] {e}")
        return []

    if not files:
        print(f"[WARN] No '{cfg.dataset_suffix}' files found in {cfg.dataset_dir}.")
        return []

    print(f"Datasets found: {len(files)}")

    algorithms = resolve_algorithms(cfg.algorithm_names)
    harness = TrialHarness(trials_per_batch=cfg.trials_per_batch, log_events=cfg.log_events)

    out_dir = Path(cfg.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / cfg.results_filename

    records: List[BenchmarkRecord] = []
    samples: List[list] = []
    with RecordWriter(out_path) as writer:
        for path in files:
            result = run_dataset(path, cfg, writer, out_dir, algorithms, harness)
            if result is not None:
                records.extend(result.records)
                samples.extend(training_rows(result.records, result.city_count))

    if not records:
        print("[WARN] No benchmark records produced; no dataset had usable coordinates.")
        return records

    if cfg.write_training_data:
        training_path = out_dir / cfg.training_filename
        try:
            n = save_training_data(samples, training_path)
            print(f"Training data: {n} rows in {training_path}")
        except OSError as e:
            print(f"[ERROR] Could not write training data: {e}")

    if cfg.make_plots:
        try:
            plot_scaling_from_results(out_path, output_dir=out_dir / "plots", show=False)
        except OSError as e:
            print(f"[ERROR] Could not write plots: {e}")

    print("\n------------------------------------------")
    print(f"All done. Results in {out_path}")
    return records


def _int_list(text: str) -> List[int]:
    return [int(x) for x in text.split(",") if x.strip()]


def _name_list(text: str) -> List[str]:
    return [x.strip() for x in text.split(",") if x.strip()]


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    defaults = Config()
    ap = argparse.ArgumentParser(description="Benchmark parallel TSP heuristics over .tsp datasets")
    ap.add_argument("--data-dir", default=defaults.dataset_dir)
    ap.add_argument("--suffix", default=defaults.dataset_suffix, help="Dataset file suffix")
    ap.add_argument("--out-dir", default=defaults.output_dir)
    ap.add_argument("--results", default=defaults.results_filename, help="Results file name")
    ap.add_argument("--workers", type=_int_list, default=defaults.worker_counts,
                    help="Comma list of worker counts, e.g. 1,2,4")
    ap.add_argument("--algorithms", type=_name_list, default=defaults.algorithm_names,
                    help="Comma list of algorithm names")
    ap.add_argument("--trials", type=int, default=defaults.trials_per_batch, help="Trials per batch")
    ap.add_argument("--seed", type=int, default=defaults.base_seed, help="Base seed (default: clock)")
    ap.add_argument("--plots", action="store_true", help="Write speedup/duration plots")
    ap.add_argument("--quiet", action="store_true", help="Hide harness state logs")
    ap.add_argument("--training-data", action="store_true",
                    help="Also write CityCount,Algorithm,ThreadCount,RuntimeMS rows")
    args = ap.parse_args(argv)

    return Config(
        dataset_dir=args.data_dir,
        dataset_suffix=args.suffix,
        output_dir=args.out_dir,
        results_filename=args.results,
        worker_counts=args.workers,
        algorithm_names=args.algorithms,
        trials_per_batch=args.trials,
        base_seed=args.seed,
        log_events=not args.quiet,
        make_plots=args.plots,
        write_training_data=args.training_data,
    )


if __name__ == "__main__":
    main_batch(parse_args())
