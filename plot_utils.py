#!/usr/bin/env python3
"""
plot_utils.py

Scaling plots from a batch results file using pandas + seaborn.

Typical workflow:

1) Run the benchmark:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import plot_scaling_from_results

        plot_scaling_from_results(
            results_path="outputs_batch/tsp_results.txt",
            output_dir="outputs_batch/plots",
            show=False,
        )

   - Or from the command line (using defaults at the bottom):
        python plot_utils.py

For every dataset in the file one figure is produced with two panels:
speedup vs. worker count (with the ideal linear speedup as reference)
and batch duration vs. worker count.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

import seaborn as sns

from metrics import RECORD_HEADER

PathLike = Union[str, Path]


def read_results(results_path: PathLike) -> pd.DataFrame:
    """Load a semicolon-delimited results file written by RecordWriter."""
    results_path = Path(results_path)
    if not results_path.exists():
        raise FileNotFoundError(f"Results file not found: {results_path}")

    df = pd.read_csv(results_path, sep=";")
    missing = [c for c in RECORD_HEADER if c not in df.columns]
    if missing:
        raise ValueError(
            f"Results file {results_path} is missing columns {missing}. "
            f"Available columns: {list(df.columns)}"
        )
    return df


def summarize_results(df: pd.DataFrame) -> pd.DataFrame:
    """Per (dataset, algorithm): best distance, peak speedup and the worker count reaching it."""
    rows = []
    for (dataset, algorithm), sub in df.groupby(["Dataset", "Algorithm"], sort=True):
        peak = sub.loc[sub["Speedup"].idxmax()]
        rows.append(
            {
                "Dataset": dataset,
                "Algorithm": algorithm,
                "best_distance": sub["BestDistance"].min(),
                "peak_speedup": peak["Speedup"],
                "peak_workers": int(peak["Workers"]),
                "baseline_ms": sub.loc[sub["Workers"] == 1, "Duration(ms)"].min(),
            }
        )
    return pd.DataFrame(rows)


def plot_scaling_from_results(
    results_path: PathLike,
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    seaborn_style: str = "whitegrid",
    palette_name: str = "colorblind",
    log_duration: bool = True,
) -> None:
    """
    Read a results file and make one speedup/duration figure per dataset.

    Parameters
    ----------
    results_path : str or Path
        Path to the results file (e.g. 'outputs_batch/tsp_results.txt').
    output_dir : str or Path or None, default None
        If provided, figures are saved as PDF files in that directory.
    show : bool, default True
        If True, show plots interactively via plt.show().
        If False, figures are created (and possibly saved) and then closed.
    seaborn_style : str, default "whitegrid"
        Style passed to seaborn.set_style.
    palette_name : str, default "colorblind"
        Name of seaborn color palette to use.
    log_duration : bool, default True
        If True, use log scale on the duration axis.
    """
    df = read_results(results_path)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    summary = summarize_results(df)
    print("\n[STATS] scaling summary")
    print(summary.to_string(index=False, float_format=lambda x: f"{x:.4g}"))

    sns.set_style(seaborn_style)
    sns.set_context("paper", font_scale=1.2)

    algorithms = sorted(df["Algorithm"].unique())
    palette = dict(zip(algorithms, sns.color_palette(palette_name, n_colors=len(algorithms))))

    for dataset, sub in df.groupby("Dataset", sort=True):
        fig, (ax_speed, ax_time) = plt.subplots(1, 2, figsize=(12, 5))

        sns.lineplot(
            data=sub,
            x="Workers",
            y="Speedup",
            hue="Algorithm",
            hue_order=algorithms,
            palette=palette,
            marker="o",
            ax=ax_speed,
        )
        workers = np.array(sorted(sub["Workers"].unique()), dtype=float)
        ax_speed.plot(workers, workers, "--", color="0.5", linewidth=1.0, label="ideal")
        ax_speed.set_title("Speedup vs. workers")
        ax_speed.legend(fontsize=9, frameon=False)

        sns.lineplot(
            data=sub,
            x="Workers",
            y="Duration(ms)",
            hue="Algorithm",
            hue_order=algorithms,
            palette=palette,
            marker="o",
            legend=False,
            ax=ax_time,
        )
        ax_time.set_title("Batch duration vs. workers")
        if log_duration:
            ax_time.set_yscale("log")

        fig.suptitle(f"{dataset}", fontsize=16)
        fig.tight_layout(rect=[0, 0, 1, 0.95])

        if output_dir is not None:
            safe_name = str(dataset).replace(".", "_").replace(" ", "_")
            fname = output_dir / f"scaling_{safe_name}.pdf"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            print(f"Saved scaling plot for '{dataset}' to {fname}")

        if show:
            plt.show()
        else:
            plt.close(fig)


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_RESULTS = "outputs_batch/tsp_results.txt"
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"
DEFAULT_SHOW = False  # set to True for interactive windows


def _run_with_defaults() -> None:
    """
    Helper used when running this module as a script.
    Uses the DEFAULT_* constants defined above.
    """
    print(f"Reading results: {DEFAULT_RESULTS}")
    print(f"Output dir: {DEFAULT_OUTPUT_DIR!r}, show={DEFAULT_SHOW}")

    plot_scaling_from_results(
        results_path=DEFAULT_RESULTS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=DEFAULT_SHOW,
    )


if __name__ == "__main__":
    _run_with_defaults()
