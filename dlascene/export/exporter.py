"""Export orchestrator: resolves formats, synthesizes once, writes one artifact per format."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from dlascene.aggregate.model import AggregateSource
from dlascene.engine.config import SceneConfig
from dlascene.engine.scene import Scene
from dlascene.errors import SceneExportError
from dlascene.export.registry import FormatRegistry, FormatSpec, get_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    format_id: str
    path: Path
    size: int


ExportObserver = Callable[[ExportResult], None]


def artifact_path(base: str | Path, spec: FormatSpec) -> Path:
    """``<base>.<ext>``, replacing any suffix ``base`` already has."""
    return Path(base).with_suffix(f".{spec.extension}")


class Exporter:
    """Writes a scene in every requested format, in first-requested order."""

    def __init__(
        self,
        registry: FormatRegistry | None = None,
        config: SceneConfig | None = None,
        observer: ExportObserver | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or SceneConfig()
        self.observer = observer

    def run(
        self,
        source: AggregateSource,
        base: str | Path,
        formats: Iterable[str],
    ) -> list[ExportResult]:
        """Export ``source`` as ``<base>.<ext>`` for each requested format.

        Unknown formats and degenerate boxes are rejected before any file is
        touched. The first write failure stops the run; artifacts written
        before it stay on disk.
        """
        specs = self.registry.resolve(formats)
        scene = Scene.from_aggregate(source)
        return self.write(scene, base, specs)

    def write(self, scene: Scene, base: str | Path, specs: list[FormatSpec]) -> list[ExportResult]:
        start = time.perf_counter()
        logger.info("Export: %d format(s) queued for %d cells", len(specs), len(scene.cells))

        results: list[ExportResult] = []
        for spec in specs:
            t0 = time.perf_counter()
            result = self._write_one(scene, base, spec)
            results.append(result)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.info("  %s -> %s (%d bytes) in %.1fms", spec.id, result.path, result.size, elapsed)
            if self.observer is not None:
                self.observer(result)

        total = (time.perf_counter() - start) * 1000
        logger.info("Export complete: %d artifact(s) in %.0fms", len(results), total)
        return results

    def _write_one(self, scene: Scene, base: str | Path, spec: FormatSpec) -> ExportResult:
        path = artifact_path(base, spec)
        text = spec.render(scene, self.config)
        data = text.encode("utf-8")
        try:
            path.write_bytes(data)
        except OSError as e:
            logger.warning("  %s FAILED: %s", spec.id, e)
            try:
                path.unlink(missing_ok=True)
            except OSError:
                logger.debug("  could not remove partial artifact %s", path)
            raise SceneExportError(spec.id, path, e.strerror or str(e)) from e
        return ExportResult(format_id=spec.id, path=path, size=len(data))


def export_scene(
    source: AggregateSource,
    base: str | Path,
    formats: Iterable[str] = ("povray",),
    config: SceneConfig | None = None,
    observer: ExportObserver | None = None,
) -> list[ExportResult]:
    """Convenience wrapper around ``Exporter.run``."""
    return Exporter(config=config, observer=observer).run(source, base, formats)
