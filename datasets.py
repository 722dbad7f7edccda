# datasets.py
"""
TSPLIB-style coordinate datasets.

Only the NODE_COORD_SECTION matters here: header lines before it are
ignored, parsing stops at EOF, and any line that does not hold numeric
coordinates is skipped without complaint.

    NAME : berlin52
    TYPE : TSP
    DIMENSION : 52
    EDGE_WEIGHT_TYPE : EUC_2D
    NODE_COORD_SECTION
    1 565.0 575.0
    2 25.0 185.0
    ...
    EOF
"""
from __future__ import annotations

import math
import random
from pathlib import Path
from typing import List, Union

from model import Point

PathLike = Union[str, Path]

COORD_SECTION = "NODE_COORD_SECTION"
END_MARKER = "EOF"


def parse_points(lines) -> List[Point]:
    """Parse coordinate records from an iterable of text lines."""
    points: List[Point] = []
    section_found = False
    auto_label = 1

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line == END_MARKER:
            break
        if not section_found:
            if COORD_SECTION in line:
                section_found = True
            continue

        parts = line.split()
        try:
            if len(parts) == 2:
                # unlabeled "x y"
                label = auto_label
                x, y = float(parts[0]), float(parts[1])
            elif len(parts) >= 3:
                label = int(parts[0])
                x, y = float(parts[1]), float(parts[2])
            else:
                continue
        except ValueError:
            continue

        # float() also takes "nan" and "inf"; those are not coordinates
        if not (math.isfinite(x) and math.isfinite(y)):
            continue

        points.append(Point(x, y, label=label))
        if len(parts) == 2:
            auto_label += 1

    return points


def load_points(path: PathLike) -> List[Point]:
    """Read a .tsp file. OSError propagates to the caller."""
    path = Path(path)
    with path.open("r", encoding="utf-8", errors="replace") as f:
        return parse_points(f)


def list_dataset_files(data_dir: PathLike, suffix: str = ".tsp") -> List[Path]:
    """Sorted dataset files in `data_dir` whose name ends with `suffix` (case-insensitive)."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Dataset directory not found: {data_dir}")
    suffix = suffix.lower()
    return sorted(p for p in data_dir.iterdir() if p.is_file() and p.name.lower().endswith(suffix))


def random_points(n: int, seed: int = 0, width: int = 1000, height: int = 1000) -> List[Point]:
    """n distinct integer-grid points, reproducible from `seed`."""
    if n > width * height:
        raise ValueError(f"Cannot place {n} distinct points on a {width}x{height} grid")
    rng = random.Random(seed)
    cells = rng.sample(range(width * height), n)
    return [Point(c % width, c // width, label=i + 1) for i, c in enumerate(cells)]
