"""Leaf-node geometry primitives: Vec3 and BoundingBox. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Vec3:
    """3-component vector. Integer components for lattice cells, floats after normalization."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __floordiv__(self, k: int) -> Vec3:
        return Vec3(self.x // k, self.y // k, self.z // k)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dist2(self, other: Vec3) -> float:
        """Squared Euclidean distance. Exact for integer vectors."""
        dx, dy, dz = self.x - other.x, self.y - other.y, self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction. The zero vector stays zero."""
        n = self.norm()
        if n == 0:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / n, self.y / n, self.z / n)

    def min(self, other: Vec3) -> Vec3:
        return Vec3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: Vec3) -> Vec3:
        return Vec3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


ORIGIN = Vec3(0, 0, 0)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box with inclusive integer corners."""

    lower: Vec3
    upper: Vec3

    def __post_init__(self) -> None:
        if self.lower.x > self.upper.x or self.lower.y > self.upper.y or self.lower.z > self.upper.z:
            raise ValueError(f"lower corner {self.lower} exceeds upper corner {self.upper}")

    @classmethod
    def enclosing(cls, points: Iterable[Vec3], padding: int = 0) -> BoundingBox:
        """Smallest box containing every point, grown by ``padding`` on each side."""
        it = iter(points)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("cannot compute the bounding box of no points") from None
        lower = upper = first
        for p in it:
            lower = lower.min(p)
            upper = upper.max(p)
        pad = Vec3(padding, padding, padding)
        return cls(lower - pad, upper + pad)

    @property
    def center(self) -> Vec3:
        """Integer midpoint, rounded toward negative infinity."""
        return (self.lower + self.upper) // 2

    @property
    def dimensions(self) -> Vec3:
        return self.upper - self.lower

    @property
    def volume(self) -> float:
        d = self.dimensions
        return d.x * d.y * d.z

    @property
    def is_degenerate(self) -> bool:
        """True when any side has zero length."""
        d = self.dimensions
        return d.x <= 0 or d.y <= 0 or d.z <= 0

    def contains(self, p: Vec3) -> bool:
        return (
            self.lower.x <= p.x <= self.upper.x
            and self.lower.y <= p.y <= self.upper.y
            and self.lower.z <= p.z <= self.upper.z
        )


INT64_MAX = int(np.iinfo(np.int64).max)


def int_array(values: Iterable[int], headroom: int = 1) -> NDArray:
    """Integer array that stays exact: int64 while ``max|v| * headroom`` fits, Python ints otherwise."""
    values = [int(v) for v in values]
    bound = max((abs(v) for v in values), default=0) * headroom
    return np.array(values, dtype=np.int64 if bound <= INT64_MAX else object)


def squared_distances(points: Iterable[Vec3], center: Vec3, headroom: int = 1) -> NDArray:
    """Exact squared distance of each point to ``center``.

    ``headroom`` is the largest factor the caller will multiply the
    distances by; the array falls back to object dtype when that product
    would overflow int64.
    """
    return int_array((p.dist2(center) for p in points), headroom=headroom)
