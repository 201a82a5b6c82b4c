"""FastAPI dependency injection."""

from __future__ import annotations

from dlascene.config import Settings, settings
from dlascene.engine.config import SceneConfig


def get_settings() -> Settings:
    return settings


def get_scene_config() -> SceneConfig:
    return SceneConfig(gradients=settings.gradients)
