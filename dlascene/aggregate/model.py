"""Finished aggregate: the occupied cells and their bounding box.

The aggregation process lives elsewhere; the exporter only needs the
read-only view described by ``AggregateSource``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from dlascene.errors import AggregateError
from dlascene.utils.geometry import BoundingBox, Vec3

# Cells are drawn as unit-radius spheres, so the default box clears them by one.
DEFAULT_PADDING = 1


@runtime_checkable
class AggregateSource(Protocol):
    def occupied_cells(self) -> Sequence[Vec3]: ...

    def bounding_box(self) -> BoundingBox: ...

    def count(self) -> int: ...


@dataclass(frozen=True)
class Aggregate:
    """Immutable, non-empty, deduplicated set of lattice cells."""

    cells: tuple[Vec3, ...]
    bbox: BoundingBox

    def __post_init__(self) -> None:
        if not self.cells:
            raise AggregateError("aggregate has no cells")
        if len(set(self.cells)) != len(self.cells):
            raise AggregateError("aggregate cells must be unique")
        outside = [c for c in self.cells if not self.bbox.contains(c)]
        if outside:
            raise AggregateError(
                f"{len(outside)} cell(s) lie outside the bounding box, first {tuple(outside[0])}"
            )

    @classmethod
    def from_cells(cls, cells: Iterable[Vec3 | Sequence[int]], padding: int = DEFAULT_PADDING) -> Aggregate:
        """Build an aggregate, dropping duplicate cells and deriving a padded bbox."""
        unique: dict[Vec3, None] = {}
        for c in cells:
            v = c if isinstance(c, Vec3) else Vec3(*(int(x) for x in c))
            unique.setdefault(v, None)
        if not unique:
            raise AggregateError("aggregate has no cells")
        if padding < 0:
            raise AggregateError(f"padding must be >= 0, got {padding}")
        ordered = tuple(unique)
        return cls(cells=ordered, bbox=BoundingBox.enclosing(ordered, padding=padding))

    @classmethod
    def from_source(cls, source: AggregateSource) -> Aggregate:
        """Snapshot any collaborator that exposes cells and a bounding box."""
        if isinstance(source, Aggregate):
            return source
        cells = tuple(source.occupied_cells())
        agg = cls(cells=cells, bbox=source.bounding_box())
        if source.count() != len(agg.cells):
            raise AggregateError(
                f"aggregate reports {source.count()} cells but exposes {len(agg.cells)}"
            )
        return agg

    def occupied_cells(self) -> Sequence[Vec3]:
        return self.cells

    def bounding_box(self) -> BoundingBox:
        return self.bbox

    def count(self) -> int:
        return len(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def describe_aggregate(aggregate: Aggregate, elapsed_s: float | None = None) -> str:
    """Markdown summary printed once the aggregate is available."""
    lo, hi = aggregate.bbox.lower, aggregate.bbox.upper
    lines = ["# DLA", ""]
    if elapsed_s is not None:
        secs = int(elapsed_s)
        lines += [f"The DLA system was correctly loaded in {secs // 60}m {secs % 60}s.", ""]
    lines += [
        f"It contains {len(aggregate)} particles and its bounding box goes from",
        f"({lo.x},{lo.y},{lo.z}) to ({hi.x},{hi.y},{hi.z}) with a total volume of {aggregate.bbox.volume}.",
        "",
    ]
    return "\n".join(lines)
