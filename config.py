# config.py
from dataclasses import dataclass, field
from typing import List, Optional

from batch_config import ALGORITHM_NAMES, TRIALS_PER_BATCH, WORKER_COUNTS


@dataclass
class Config:
    dataset_dir: str = "datasets"
    dataset_suffix: str = ".tsp"

    output_dir: str = "outputs_batch"
    results_filename: str = "tsp_results.txt"

    worker_counts: List[int] = field(default_factory=lambda: list(WORKER_COUNTS))
    algorithm_names: List[str] = field(default_factory=lambda: list(ALGORITHM_NAMES))
    trials_per_batch: int = TRIALS_PER_BATCH

    # None => seeds come from the clock (different every run)
    base_seed: Optional[int] = None

    log_events: bool = True
    make_plots: bool = False

    # CityCount,Algorithm,ThreadCount,RuntimeMS rows for runtime modelling
    write_training_data: bool = False
    training_filename: str = "tsp_training_data.csv"
