"""Scene: camera, lights and the aggregate they frame."""

from __future__ import annotations

from dataclasses import dataclass

from dlascene.aggregate.model import Aggregate, AggregateSource
from dlascene.utils.geometry import BoundingBox, Vec3


@dataclass(frozen=True)
class Camera:
    position: Vec3
    target: Vec3


@dataclass(frozen=True)
class Light:
    """Point light with a gray color of the given intensity."""

    name: str
    position: Vec3
    intensity: float


@dataclass(frozen=True)
class Scene:
    camera: Camera
    lights: tuple[Light, ...]
    aggregate: Aggregate

    @classmethod
    def from_aggregate(cls, source: AggregateSource) -> Scene:
        """Place camera and lights around a finished aggregate."""
        from dlascene.engine.synthesis import synthesize

        aggregate = Aggregate.from_source(source)
        camera, lights = synthesize(aggregate.bbox)
        return cls(camera=camera, lights=lights, aggregate=aggregate)

    @property
    def bbox(self) -> BoundingBox:
        return self.aggregate.bbox

    @property
    def cells(self) -> tuple[Vec3, ...]:
        return self.aggregate.cells
