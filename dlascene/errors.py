"""Exception hierarchy for scene synthesis and export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dlascene.utils.geometry import BoundingBox


class SceneError(Exception):
    """Base class for every error raised by dlascene."""


class UnknownSceneFormatError(SceneError, ValueError):
    """A requested output format is not registered."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        self.known = sorted(known or [])
        msg = f"`{name}` is not a valid scene format"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class DegenerateBoundingBoxError(SceneError, ValueError):
    """Camera and lights cannot be placed around a box with a zero-length side."""

    def __init__(self, bbox: BoundingBox) -> None:
        self.bbox = bbox
        d = bbox.dimensions
        super().__init__(
            f"degenerate bounding box {tuple(bbox.lower)}..{tuple(bbox.upper)} "
            f"(dimensions {d.x}x{d.y}x{d.z})"
        )


class AggregateError(SceneError, ValueError):
    """The aggregate handed to the exporter is unusable."""


class SceneExportError(SceneError, OSError):
    """Writing one output artifact failed."""

    def __init__(self, format_id: str, path: Path, reason: str) -> None:
        self.format_id = format_id
        self.path = Path(path)
        super().__init__(f"failed to write {format_id} scene to {self.path}: {reason}")
