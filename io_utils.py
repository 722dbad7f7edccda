# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import csv
import json
from typing import Any, Iterable, List, Optional, Sequence
from config import Config
from metrics import RECORD_HEADER, BenchmarkRecord, GlobalBest
import uuid


def make_run_dir(cfg: Config, base: str = "outputs", dataset_name: Optional[str] = None) -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (worker counts, trials, seed, ...).
    base : str, optional
        Base directory under which the run folder will be created, by default "outputs".
    dataset_name : str | None, optional
        Dataset file name; its stem goes into the folder name when given.

    Folder naming
    -------------
    The folder name encodes:
      - dataset stem (if any)
      - number of trials per batch
      - largest worker count
      - a timestamp + short UUID suffix to guarantee uniqueness

    Example:
        outputs/run_berlin52_T16_W16_20251216-213012-ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    parts = []
    if dataset_name:
        parts.append(Path(dataset_name).stem)
    parts.append(f"T{cfg.trials_per_batch}")
    parts.append(f"W{max(cfg.worker_counts, default=1)}")

    base_name = "run_" + "_".join(parts)

    # timestamp + random suffix so repeated runs never overwrite each other
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    suffix = f"{ts}-{uid}"

    run_dir = base_path / f"{base_name}_{suffix}"
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """
    Serialize the Config object for this run into JSON, next to the
    results, so every benchmark can be traced back to its parameters.
    """
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


class RecordWriter:
    """
    Semicolon-delimited benchmark records, one line per configuration.

    The header is written on open and the file is flushed after every
    record so an interrupted sweep keeps everything finished so far.
    Failing to create the file is a setup error and propagates.
    """

    def __init__(self, out_path: Path) -> None:
        self.out_path = Path(out_path)
        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        self._f = self.out_path.open("w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._f, delimiter=";", lineterminator="\n")
        self._writer.writerow(RECORD_HEADER)
        self._f.flush()
        self.count = 0

    def write(self, record: BenchmarkRecord) -> None:
        self._writer.writerow(record.as_row())
        self._f.flush()
        self.count += 1

    def close(self) -> None:
        self._f.close()

    def __enter__(self) -> "RecordWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


TRAINING_HEADER = ["CityCount", "Algorithm", "ThreadCount", "RuntimeMS"]


def training_rows(records: Iterable[BenchmarkRecord], city_count: int) -> List[list]:
    """One row per record: instance size, algorithm, workers, whole-ms runtime."""
    return [
        [city_count, r.algorithm, r.workers, int(round(r.duration_ms))]
        for r in records
    ]


def save_training_data(rows: Iterable[Sequence[Any]], out_path: Path) -> int:
    """
    Write runtime samples as a comma-separated table (header first) for
    fitting a model of runtime vs. instance size and worker count.
    Returns the number of rows written.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(TRAINING_HEADER)
        for row in rows:
            writer.writerow(row)
            count += 1
    return count


def best_route_path(out_dir: Path, dataset_name: str) -> Path:
    return Path(out_dir) / f"solution_{dataset_name}.txt"


def save_best_route(best: GlobalBest, dataset_name: str, out_dir: Path) -> Path:
    """
    Write the dataset's winning tour: algorithm, total distance, the
    duration of the batch that found it, and the route as node labels.
    """
    if best.tour is None:
        raise ValueError("No best tour to save")

    out_path = best_route_path(out_dir, dataset_name)
    route = " ".join(str(label) for label in best.tour.labels())
    with out_path.open("w", encoding="utf-8") as f:
        f.write(f"Dataset: {dataset_name}\n")
        f.write(f"Best algorithm: {best.algorithm}\n")
        f.write(f"Total distance: {best.distance:.2f}\n")
        f.write(f"Duration(ms): {best.duration_ms:.2f}\n")
        f.write(f"Workers: {best.workers}\n")
        f.write(f"Route: {route}\n")
    return out_path
