# viz.py
from __future__ import annotations
from pathlib import Path
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from model import Tour


def draw_tour(tour: Tour, out_path: str | Path, title: Optional[str] = None) -> None:
    """
    Draw a closed tour:
      - route: blue line, including the edge back to the start
      - cities: dark dots
      - start city: purple star
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if len(tour) == 0:
        raise ValueError("Cannot draw an empty tour")

    coords = np.array([[p.x, p.y] for p in tour], dtype=float)
    closed = np.vstack([coords, coords[:1]])

    fig, ax = plt.subplots(figsize=(7, 7))

    ax.plot(closed[:, 0], closed[:, 1], "-", color="#1f77b4", linewidth=1.2, label="route")
    ax.scatter(coords[:, 0], coords[:, 1], s=14, c="0.2", zorder=3, label="cities")
    ax.scatter(
        [coords[0, 0]],
        [coords[0, 1]],
        marker="*",
        s=160,
        c="#9467bd",          # purple
        edgecolors="white",
        linewidths=1.0,
        zorder=4,
        label="start",
    )

    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    if title is None:
        title = f"Tour of {len(tour)} cities"
    fig.suptitle(title, fontsize=14, y=0.98)
    ax.set_title(f"distance = {tour.distance:.2f}", fontsize=10)

    fig.legend(loc="upper center", bbox_to_anchor=(0.5, 0.94), ncol=3, fontsize=9, frameon=False)
    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.92])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)
