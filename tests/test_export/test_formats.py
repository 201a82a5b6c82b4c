"""Tests for the povray / javascript / csv serializers."""

import re

from dlascene.engine.config import SceneConfig
from dlascene.engine.gradient import bucket_cells
from dlascene.engine.scene import Scene
from dlascene.export import render_scene


def test_csv_single_cell(seed_scene: Scene):
    assert render_scene(seed_scene, "csv") == "0,0,0\n"


def test_csv_round_trip(cluster_scene: Scene):
    lines = render_scene(cluster_scene, "csv").splitlines()
    assert len(lines) == len(cluster_scene.cells)
    parsed = {tuple(int(v) for v in line.split(",")) for line in lines}
    assert parsed == {c.as_tuple() for c in cluster_scene.cells}


def test_povray_single_sphere(seed_scene: Scene):
    text = render_scene(seed_scene, "povray")
    assert text.count("sphere {") == 1
    assert "  sphere { <0, 0, 0>, 1 }" in text
    assert text.count("union {") == 1


def test_povray_layout(seed_scene: Scene):
    text = render_scene(seed_scene, "povray")
    assert text.startswith("// 3D DLA geometry - generated by dla-scene\n")
    assert "#version 3.7;" in text
    assert '#include "colors.inc"' in text
    assert "background { color Black }" in text
    assert "// scene bbox <-1, -1, -1> <1, 1, 1>" in text
    assert "camera {\n  location <-2, 0, -3>\n  look_at <0, 0, 0>\n}" in text
    assert text.count("light_source {") == 6
    assert "light_source { <0, 0, -4> color rgb <0.2, 0.2, 0.2> }" in text
    # header, camera and lights come before any geometry
    assert text.index("camera {") < text.index("light_source") < text.index("union {")


def test_povray_skips_empty_buckets(cluster_scene: Scene):
    text = render_scene(cluster_scene, "povray")
    buckets = bucket_cells(cluster_scene.cells, cluster_scene.bbox.center)
    non_empty = [b for b in buckets if not b.is_empty]
    assert text.count("union {") == len(non_empty)
    assert text.count("sphere {") == len(cluster_scene.cells)
    assert text.count("finish { phong 0.5 }") == len(non_empty)


def test_povray_spheres_in_bucket_order(cluster_scene: Scene):
    text = render_scene(cluster_scene, "povray")
    center = cluster_scene.bbox.center
    spheres = re.findall(r"sphere \{ <(-?\d+), (-?\d+), (-?\d+)>, 1 \}", text)
    dists = [
        (int(x) - center.x) ** 2 + (int(y) - center.y) ** 2 + (int(z) - center.z) ** 2
        for x, y, z in spheres
    ]
    assert dists == sorted(dists)


def test_povray_config(seed_scene: Scene):
    config = SceneConfig(phong=0.9, sphere_radius=2, header="custom")
    text = render_scene(seed_scene, "povray", config)
    assert text.startswith("// custom\n")
    assert "finish { phong 0.9 }" in text
    assert "sphere { <0, 0, 0>, 2 }" in text


def test_javascript_layout(seed_scene: Scene):
    text = render_scene(seed_scene, "javascript")
    assert "var DLA = {" in text
    assert "lower: { x: -1, y: -1, z: -1 }," in text
    assert "upper: { x: 1, y: 1, z: 1 }," in text
    assert "position: { x: -2, y: 0, z: -3 }," in text
    assert "look_at: { x: 0, y: 0, z: 0 }," in text
    assert text.count("intensity:") == 6
    assert "{ position: { x: 0, y: 0, z: -4 }, intensity: 0.2 }," in text
    assert "particles: [\n        { x: 0, y: 0, z: 0 },\n    ],\n};" in text
    assert "rgb" not in text


def test_javascript_has_every_particle(cluster_scene: Scene):
    text = render_scene(cluster_scene, "js")
    particles = text.split("particles: [", 1)[1]
    found = re.findall(r"\{ x: (-?\d+), y: (-?\d+), z: (-?\d+) \}", particles)
    assert {tuple(map(int, p)) for p in found} == {c.as_tuple() for c in cluster_scene.cells}
    assert len(found) == len(cluster_scene.cells)


def test_formats_are_deterministic(cluster_scene: Scene):
    for fmt in ("povray", "javascript", "csv"):
        assert render_scene(cluster_scene, fmt) == render_scene(cluster_scene, fmt)
