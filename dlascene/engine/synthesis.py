"""Scene synthesis: camera and lights placed from the bounding box alone.

The placement is arbitrary but fixed: a 3/4 view from in front of the
aggregate, and a six-light rig pushed outward from the box center by the
smallest box dimension. Only the box matters, so the same box always
yields the same scene.
"""

from __future__ import annotations

import logging

from dlascene.engine.scene import Camera, Light
from dlascene.errors import DegenerateBoundingBoxError
from dlascene.utils.geometry import ORIGIN, BoundingBox, Vec3

logger = logging.getLogger(__name__)

# (name, intensity) in emission order
LIGHT_RIG: tuple[tuple[str, float], ...] = (
    ("key", 1.0),
    ("front", 0.2),
    ("fill", 0.75),
    ("background", 0.5),
    ("bottom", 0.75),
    ("top", 0.5),
)


def standoff_distance(bbox: BoundingBox) -> int:
    """Smallest box dimension; camera and lights sit this far out."""
    d = bbox.dimensions
    return min(d.x, d.y, d.z)


def light_anchors(bbox: BoundingBox, away: int) -> tuple[Vec3, ...]:
    """Anchor point of each rig light, in ``LIGHT_RIG`` order."""
    lo, hi, c = bbox.lower, bbox.upper, bbox.center
    return (
        Vec3(lo.x, c.y, lo.z),
        Vec3(c.x, c.y, lo.z - away // 2),
        Vec3(hi.x, lo.y, lo.z),
        Vec3(lo.x, hi.y, hi.z),
        Vec3(c.x, lo.y, c.z),
        Vec3(c.x, hi.y, c.z),
    )


def push_outward(anchor: Vec3, center: Vec3, away: float) -> Vec3:
    """Move ``anchor`` by ``away`` along the center→anchor direction."""
    if anchor == center:
        return anchor
    return anchor + (anchor - center).normalized() * away


def synthesize(bbox: BoundingBox) -> tuple[Camera, tuple[Light, ...]]:
    """Derive the camera and the six-light rig for ``bbox``."""
    if bbox.is_degenerate:
        raise DegenerateBoundingBoxError(bbox)

    away = standoff_distance(bbox)
    center = bbox.center

    camera = Camera(
        position=Vec3(center.x - away, center.y, bbox.lower.z - away),
        target=ORIGIN,
    )

    lights = tuple(
        Light(name=name, position=push_outward(anchor, center, away), intensity=intensity)
        for (name, intensity), anchor in zip(LIGHT_RIG, light_anchors(bbox, away))
    )

    logger.debug(
        "Synthesized scene: away=%d camera=%s %d lights",
        away,
        camera.position.as_tuple(),
        len(lights),
    )
    return camera, lights
