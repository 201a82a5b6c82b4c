"""Scene synthesis engine."""

from dlascene.engine.config import SceneConfig
from dlascene.engine.gradient import ColorBucket, bucket_cells
from dlascene.engine.scene import Camera, Light, Scene
from dlascene.engine.synthesis import synthesize

__all__ = [
    "SceneConfig",
    "ColorBucket",
    "bucket_cells",
    "Camera",
    "Light",
    "Scene",
    "synthesize",
]
