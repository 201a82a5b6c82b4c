"""Format registry: every scene format is a serializer registered via decorator.

Usage:
    @scene_format(id="csv", extension="csv", description="Cell positions only")
    def write_csv(scene: Scene, out: TextIO, config: SceneConfig) -> None:
        for c in scene.cells:
            out.write(f"{c.x},{c.y},{c.z}\\n")

Adding a new format = creating one module with the decorator and importing it
from ``dlascene.export.formats``.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, TextIO

from dlascene.engine.config import SceneConfig
from dlascene.errors import UnknownSceneFormatError

if TYPE_CHECKING:
    from dlascene.engine.scene import Scene

logger = logging.getLogger(__name__)

Serializer = Callable[["Scene", TextIO, SceneConfig], None]


def _normalize(name: str) -> str:
    return name.strip().lower()


@dataclass
class FormatSpec:
    id: str
    extension: str
    fn: Serializer
    aliases: tuple[str, ...] = ()
    description: str = ""
    # Status text shown after a successful write; ``{path}`` is substituted
    report: str = ""

    def render(self, scene: Scene, config: SceneConfig | None = None) -> str:
        buf = io.StringIO()
        self.fn(scene, buf, config or SceneConfig())
        return buf.getvalue()


@dataclass
class FormatRegistry:
    """Registry of output formats, looked up by id or alias."""

    _formats: dict[str, FormatSpec] = field(default_factory=dict)
    _names: dict[str, str] = field(default_factory=dict)

    def register(self, spec: FormatSpec) -> None:
        names = [_normalize(n) for n in (spec.id, *spec.aliases)]
        for name in names:
            if name in self._names:
                raise ValueError(f"Duplicate scene format name: {name}")
        self._formats[spec.id] = spec
        for name in names:
            self._names[name] = spec.id
        logger.debug("Registered scene format %s (.%s)", spec.id, spec.extension)

    def get(self, name: str) -> FormatSpec:
        try:
            return self._formats[self._names[_normalize(name)]]
        except KeyError:
            raise UnknownSceneFormatError(name, list(self._formats)) from None

    def all(self) -> list[FormatSpec]:
        return sorted(self._formats.values(), key=lambda s: s.id)

    def resolve(self, names: Iterable[str]) -> list[FormatSpec]:
        """Map requested names to specs, deduplicated in first-requested order.

        Every name is checked before anything is returned, so an unknown
        name fails the whole request.
        """
        resolved: list[FormatSpec] = []
        seen: set[str] = set()
        for name in names:
            spec = self.get(name)
            if spec.id not in seen:
                seen.add(spec.id)
                resolved.append(spec)
        return resolved

    @property
    def count(self) -> int:
        return len(self._formats)


# Module-level singleton
_registry = FormatRegistry()


def get_registry() -> FormatRegistry:
    return _registry


def scene_format(
    *,
    id: str,
    extension: str,
    aliases: tuple[str, ...] = (),
    description: str = "",
    report: str = "",
):
    """Decorator to register a serializer function."""

    def decorator(fn: Serializer):
        spec = FormatSpec(
            id=id,
            extension=extension,
            fn=fn,
            aliases=aliases,
            description=description,
            report=report,
        )
        _registry.register(spec)
        return fn

    return decorator


def render_scene(scene: Scene, format_id: str, config: SceneConfig | None = None) -> str:
    """Serialize ``scene`` in the named format and return the text."""
    return get_registry().get(format_id).render(scene, config)
