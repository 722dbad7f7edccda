# model.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from math import sqrt
from typing import Iterable, Iterator, List, Optional
import random


@dataclass(frozen=True)
class Point:
    """A city: two coordinates plus an optional node label (ignored by ==)."""
    x: float
    y: float
    label: Optional[int] = field(default=None, compare=False)

    def distance_to(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return sqrt(dx * dx + dy * dy)


def distance(a: Point, b: Point) -> float:
    return a.distance_to(b)


class Tour:
    """
    Ordered cyclic permutation of points.

    The last point connects back to the first. The total distance is cached
    lazily; `_distance is None` means "not computed yet" and every write
    resets it to None, so a true zero-length tour caches 0.0 like any
    other value.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: List[Point] = list(points)
        self._distance: Optional[float] = None

    # ---- read API ----

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self) -> str:
        return f"Tour(n={len(self._points)}, distance={self.distance:.2f})"

    @property
    def points(self) -> tuple:
        return tuple(self._points)

    @property
    def distance(self) -> float:
        if self._distance is None:
            self._distance = self._compute_distance()
        return self._distance

    def _compute_distance(self) -> float:
        pts = self._points
        n = len(pts)
        if n < 2:
            return 0.0
        total = 0.0
        for i in range(n):
            total += pts[i].distance_to(pts[(i + 1) % n])
        return total

    # ---- write API (every write invalidates the cache) ----

    def __setitem__(self, index: int, point: Point) -> None:
        self._points[index] = point
        self._distance = None

    def append(self, point: Point) -> None:
        self._points.append(point)
        self._distance = None

    def swap(self, a: int, b: int) -> None:
        pts = self._points
        pts[a], pts[b] = pts[b], pts[a]
        self._distance = None

    def reverse_segment(self, i: int, k: int) -> None:
        """Reverse positions i..k (inclusive) in place, swapping inward."""
        pts = self._points
        while i < k:
            pts[i], pts[k] = pts[k], pts[i]
            i += 1
            k -= 1
        self._distance = None

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self._points)
        self._distance = None

    # ---- copies / checks ----

    def clone(self) -> "Tour":
        copy = Tour(self._points)
        copy._distance = self._distance
        return copy

    def reversed_tour(self) -> "Tour":
        return Tour(reversed(self._points))

    def is_permutation_of(self, other: "Tour") -> bool:
        if len(self) != len(other):
            return False
        return Counter(self._points) == Counter(other._points)

    def labels(self) -> List[Optional[int]]:
        return [p.label for p in self._points]
