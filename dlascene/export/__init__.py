"""Scene export: format registry, serializers and the export orchestrator."""

from dlascene.export.registry import FormatSpec, FormatRegistry, get_registry, render_scene, scene_format

# Import built-in format modules to trigger registration
from dlascene.export import formats  # noqa: F401
from dlascene.export.exporter import Exporter, ExportResult, export_scene

__all__ = [
    "FormatSpec",
    "FormatRegistry",
    "get_registry",
    "render_scene",
    "scene_format",
    "Exporter",
    "ExportResult",
    "export_scene",
]
