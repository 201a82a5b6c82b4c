"""CSV scene: geometry only, one ``x,y,z`` line per cell, no header."""

from __future__ import annotations

from typing import TextIO

from dlascene.engine.config import SceneConfig
from dlascene.engine.scene import Scene
from dlascene.export.registry import scene_format
from dlascene.utils.text import fmt_vec

_REPORT = """## Csv Scene

The positions (x,y,z) of all the cells that form the DLA have been saved as a CSV file ({path}).
"""


@scene_format(
    id="csv",
    extension="csv",
    description="Cell positions as x,y,z lines",
    report=_REPORT,
)
def write_csv(scene: Scene, out: TextIO, config: SceneConfig) -> None:
    for c in scene.cells:
        out.write(fmt_vec(c, sep=","))
        out.write("\n")
