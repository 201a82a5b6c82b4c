"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from dlascene.main import app
from tests.conftest import CLUSTER_CELLS, SEED_CELLS


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["formats_registered"] == 3


def test_formats():
    response = client.get("/api/formats")
    assert response.status_code == 200
    ids = {f["id"]: f for f in response.json()}
    assert set(ids) == {"povray", "javascript", "csv"}
    assert ids["javascript"]["aliases"] == ["js"]
    assert ids["povray"]["extension"] == "pov"


def test_scene_seed():
    response = client.post("/api/scene", json={"cells": SEED_CELLS})
    assert response.status_code == 200
    data = response.json()
    assert data["particle_count"] == 1
    assert data["bbox"]["lower"] == {"x": -1, "y": -1, "z": -1}
    assert data["camera"]["look_at"] == {"x": 0, "y": 0, "z": 0}
    assert data["camera"]["position"] == {"x": -2, "y": 0, "z": -3}
    assert [light["intensity"] for light in data["lights"]] == [1.0, 0.2, 0.75, 0.5, 0.75, 0.5]
    assert [b["count"] for b in data["buckets"]] == [1, 0, 0, 0, 0, 0]


def test_scene_cluster_buckets_cover_cells():
    response = client.post("/api/scene", json={"cells": CLUSTER_CELLS})
    assert response.status_code == 200
    data = response.json()
    assert sum(b["count"] for b in data["buckets"]) == len(CLUSTER_CELLS)


def test_render_csv():
    response = client.post("/api/scene/csv", json={"cells": SEED_CELLS})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "0,0,0\n"


def test_render_povray_alias():
    response = client.post("/api/scene/pov", json={"cells": SEED_CELLS})
    assert response.status_code == 200
    assert response.text.count("sphere {") == 1


def test_render_unknown_format():
    response = client.post("/api/scene/gltf", json={"cells": SEED_CELLS})
    assert response.status_code == 404
    assert "not a valid scene format" in response.json()["detail"]


def test_explicit_degenerate_bbox():
    response = client.post(
        "/api/scene",
        json={"cells": [[0, 0, 0]], "bbox": {"lower": [0, 0, 0], "upper": [0, 0, 0]}},
    )
    assert response.status_code == 422
    assert "degenerate" in response.json()["detail"]


def test_bbox_not_enclosing_cells():
    response = client.post(
        "/api/scene",
        json={"cells": [[5, 0, 0]], "bbox": {"lower": [-1, -1, -1], "upper": [1, 1, 1]}},
    )
    assert response.status_code == 422


def test_empty_cells_rejected():
    response = client.post("/api/scene", json={"cells": []})
    assert response.status_code == 422
