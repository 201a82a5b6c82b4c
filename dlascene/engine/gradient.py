"""Color gradient bucketing: distance shells around the bbox center.

Cells are sorted by squared distance to the center and consumed into
``gradients * 2`` cumulative shells; shell ``i`` takes every remaining cell
with ``d <= (i + 1) * max_d / n``. Each shell gets a base color from a fixed
table, dimmed by its position inside its group of ``gradients`` shells.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from dlascene.utils.geometry import Vec3, int_array, squared_distances

logger = logging.getLogger(__name__)

RGB = tuple[float, float, float]

DEFAULT_GRADIENTS = 3

# Offset added to the group index before the lookup
_GROUP_BASE = 5

# Inclusive g ranges -> base color. Only g 5 and 6 are reached with 3 gradients.
BASE_COLORS: tuple[tuple[int, int, RGB], ...] = (
    (0, 2, (0.27, 0.3, 0.02)),  # dark olive
    (3, 4, (0.0, 0.6, 0.02)),  # green
    (5, 5, (0.34, 0.7, 0.03)),  # bright green
    (6, 6, (0.85, 0.84, 0.0)),  # yellow
)


@dataclass(frozen=True)
class ColorBucket:
    index: int
    cells: tuple[Vec3, ...]
    color: RGB

    @property
    def is_empty(self) -> bool:
        return not self.cells


def base_color(g: int) -> RGB:
    for lo, hi, rgb in BASE_COLORS:
        if lo <= g <= hi:
            return rgb
    raise ValueError(f"no base color for gradient group {g}")


def bucket_color(i: int, gradients: int = DEFAULT_GRADIENTS) -> RGB:
    """Color of bucket ``i``: base color of its group scaled by its rank in the group."""
    r, g, b = base_color(_GROUP_BASE + i // gradients)
    f = (1.0 + i % gradients) / gradients
    return (r * f, g * f, b * f)


def shell_assignments(distances: Sequence[int] | np.ndarray, n: int) -> np.ndarray:
    """Bucket index of each (sorted or unsorted) squared distance.

    Exact integer form of ``d <= (i + 1) * max_d / n``: the smallest ``i``
    with ``d * n <= (i + 1) * max_d``. Distances whose product with ``n``
    would overflow int64 are handled as Python ints.
    """
    if isinstance(distances, np.ndarray):
        distances = distances.tolist()
    distances = int_array(distances, headroom=n)
    if distances.size == 0:
        return np.zeros(0, dtype=np.int64)
    max_d = int(distances.max())
    if max_d == 0:
        return np.zeros(distances.size, dtype=np.int64)
    # ceil(d * n / max_d) - 1, clamped at 0 for d == 0
    idx = -((-distances * n) // max_d) - 1
    return np.minimum(np.maximum(idx, 0), n - 1).astype(np.int64)


def bucket_cells(
    cells: Sequence[Vec3],
    center: Vec3,
    gradients: int = DEFAULT_GRADIENTS,
) -> list[ColorBucket]:
    """Partition ``cells`` into ``gradients * 2`` ordered, colored distance shells."""
    if gradients < 1:
        raise ValueError(f"gradients must be >= 1, got {gradients}")
    n = gradients * 2

    dists = squared_distances(cells, center, headroom=n)
    order = np.argsort(dists, kind="stable")
    assigned = shell_assignments(dists[order], n)

    members: list[list[Vec3]] = [[] for _ in range(n)]
    for k, i in zip(order.tolist(), assigned.tolist()):
        members[i].append(cells[k])

    buckets = [
        ColorBucket(index=i, cells=tuple(members[i]), color=bucket_color(i, gradients))
        for i in range(n)
    ]
    logger.debug(
        "Bucketed %d cells into %d shells: %s",
        len(cells),
        n,
        [len(b.cells) for b in buckets],
    )
    return buckets
