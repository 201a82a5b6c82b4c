"""Scene configuration: tunables for synthesis and the POV-Ray look."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SceneConfig:
    """Controls coloring and the fixed POV-Ray preamble."""

    # Color gradient: gradients * 2 distance shells
    gradients: int = 3

    # Particle primitive
    sphere_radius: int = 1

    # Surface finish
    ambient: float = 0.1
    diffuse: float = 0.9
    phong: float = 0.5
    assumed_gamma: float = 1.0

    # First line of every text artifact
    header: str = "3D DLA geometry - generated by dla-scene"

    @property
    def buckets(self) -> int:
        return self.gradients * 2
