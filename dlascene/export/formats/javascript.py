"""Javascript scene: one ``DLA`` object literal with bbox, camera, lights and particles."""

from __future__ import annotations

from typing import TextIO

from dlascene.engine.config import SceneConfig
from dlascene.engine.scene import Scene
from dlascene.export.registry import scene_format
from dlascene.utils.geometry import Vec3
from dlascene.utils.text import fmt_num

_REPORT = """## Javascript Scene

The DLA scene has been saved as a Javascript file ({path}) that contains a
single object `DLA` that has the `particles` alongside a `camera` and `lights`.
"""


def _xyz(v: Vec3) -> str:
    return f"{{ x: {fmt_num(v.x)}, y: {fmt_num(v.y)}, z: {fmt_num(v.z)} }}"


@scene_format(
    id="javascript",
    extension="js",
    aliases=("js",),
    description="Javascript object literal with the full scene, uncolored",
    report=_REPORT,
)
def write_javascript(scene: Scene, out: TextIO, config: SceneConfig) -> None:
    bbox = scene.bbox
    cam = scene.camera

    out.write(
        f"""// {config.header}

var DLA = {{
    bbox: {{
        lower: {_xyz(bbox.lower)},
        upper: {_xyz(bbox.upper)},
    }},
    camera: {{
        position: {_xyz(cam.position)},
        look_at: {_xyz(cam.target)},
    }},
    lights: [
"""
    )

    for light in scene.lights:
        out.write(f"        {{ position: {_xyz(light.position)}, intensity: {fmt_num(light.intensity)} }},\n")

    out.write("    ],\n    particles: [\n")
    for p in scene.cells:
        out.write(f"        {_xyz(p)},\n")
    out.write("    ],\n};\n")
