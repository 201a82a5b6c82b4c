"""Shared test fixtures."""

from __future__ import annotations

import pytest

from dlascene.aggregate.model import Aggregate
from dlascene.engine.scene import Scene
from dlascene.utils.geometry import BoundingBox, Vec3


# Single seed at the origin; padding 1 gives the box (-1,-1,-1)..(1,1,1)
SEED_CELLS = [(0, 0, 0)]

# Squared distances 0, 1, 4, 9, 16, 25 from the origin
SHELL_CELLS = [
    (0, 0, 0),
    (1, 0, 0),
    (0, 2, 0),
    (0, 0, 3),
    (4, 0, 0),
    (0, 5, 0),
]

# A small branching cluster grown from the origin
CLUSTER_CELLS = [
    (0, 0, 0),
    (1, 0, 0),
    (2, 0, 0),
    (2, 1, 0),
    (2, 2, 0),
    (2, 2, 1),
    (-1, 0, 0),
    (-1, -1, 0),
    (-1, -2, 0),
    (-2, -2, 0),
    (0, 0, -1),
    (0, 0, -2),
    (0, 1, -2),
    (0, 0, 1),
    (0, -1, 1),
    (3, 2, 1),
    (-3, -2, 0),
    (-3, -3, 0),
]

CLUSTER_CSV = "\n".join(f"{x},{y},{z}" for x, y, z in CLUSTER_CELLS) + "\n"


@pytest.fixture
def seed_aggregate() -> Aggregate:
    return Aggregate.from_cells(SEED_CELLS)


@pytest.fixture
def shell_aggregate() -> Aggregate:
    cells = tuple(Vec3(*c) for c in SHELL_CELLS)
    return Aggregate(cells=cells, bbox=BoundingBox(Vec3(-6, -6, -6), Vec3(6, 6, 6)))


@pytest.fixture
def cluster_aggregate() -> Aggregate:
    return Aggregate.from_cells(CLUSTER_CELLS)


@pytest.fixture
def seed_scene(seed_aggregate: Aggregate) -> Scene:
    return Scene.from_aggregate(seed_aggregate)


@pytest.fixture
def cluster_scene(cluster_aggregate: Aggregate) -> Scene:
    return Scene.from_aggregate(cluster_aggregate)
