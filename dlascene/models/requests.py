"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dlascene.aggregate.model import DEFAULT_PADDING, Aggregate
from dlascene.utils.geometry import BoundingBox, Vec3


class BBoxModel(BaseModel):
    lower: tuple[int, int, int]
    upper: tuple[int, int, int]

    def to_bbox(self) -> BoundingBox:
        return BoundingBox(Vec3(*self.lower), Vec3(*self.upper))


class SceneRequest(BaseModel):
    cells: list[tuple[int, int, int]] = Field(..., min_length=1, description="Occupied lattice cells")
    padding: int = Field(default=DEFAULT_PADDING, ge=0, description="Bounding box padding when bbox is omitted")
    bbox: BBoxModel | None = Field(default=None, description="Explicit bounding box (overrides padding)")

    def to_aggregate(self) -> Aggregate:
        if self.bbox is None:
            return Aggregate.from_cells(self.cells, padding=self.padding)
        derived = Aggregate.from_cells(self.cells, padding=0)
        return Aggregate(cells=derived.cells, bbox=self.bbox.to_bbox())
