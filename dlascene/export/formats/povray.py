"""POV-Ray scene: camera, light rig and distance-colored sphere unions."""

from __future__ import annotations

from typing import TextIO

from dlascene.engine.config import SceneConfig
from dlascene.engine.gradient import bucket_cells
from dlascene.engine.scene import Scene
from dlascene.export.registry import scene_format
from dlascene.utils.text import fmt_num, fmt_vec

_REPORT = """## PovRay Scene

The DLA scene has been saved as a PovRay scene ({path}) which is possible to
render with a command like the following

`povray +A +W1600 +H1600 {path}`
"""


@scene_format(
    id="povray",
    extension="pov",
    aliases=("pov",),
    description="POV-Ray scene with camera, lights and distance-colored particles",
    report=_REPORT,
)
def write_povray(scene: Scene, out: TextIO, config: SceneConfig) -> None:
    bbox = scene.bbox
    cam = scene.camera

    out.write(
        f"""// {config.header}

#version 3.7;

#include "colors.inc"

global_settings {{ assumed_gamma {fmt_num(config.assumed_gamma)} }}
#default{{ finish {{ ambient {fmt_num(config.ambient)} diffuse {fmt_num(config.diffuse)} }} }}

background {{ color Black }}

// scene bbox <{fmt_vec(bbox.lower)}> <{fmt_vec(bbox.upper)}>

camera {{
  location <{fmt_vec(cam.position)}>
  look_at <{fmt_vec(cam.target)}>
}}

"""
    )

    for light in scene.lights:
        i = fmt_num(light.intensity)
        out.write(f"light_source {{ <{fmt_vec(light.position)}> color rgb <{i}, {i}, {i}> }}\n")

    radius = fmt_num(config.sphere_radius)
    for bucket in bucket_cells(scene.cells, bbox.center, config.gradients):
        if bucket.is_empty:
            continue
        out.write("\nunion {\n")
        for p in bucket.cells:
            out.write(f"  sphere {{ <{fmt_vec(p)}>, {radius} }}\n")
        r, g, b = (fmt_num(c) for c in bucket.color)
        out.write(
            f"""  texture {{
    pigment {{ color rgb<{r}, {g}, {b}> }}
    finish {{ phong {fmt_num(config.phong)} }}
  }}
}}
"""
        )
