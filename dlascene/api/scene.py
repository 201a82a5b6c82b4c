"""POST /api/scene: synthesize a scene and render it in any registered format."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from dlascene.dependencies import get_scene_config
from dlascene.engine.config import SceneConfig
from dlascene.engine.gradient import bucket_cells
from dlascene.engine.scene import Scene
from dlascene.errors import UnknownSceneFormatError
from dlascene.export import get_registry
from dlascene.models.requests import SceneRequest
from dlascene.models.responses import SceneResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _build_scene(req: SceneRequest) -> Scene:
    try:
        return Scene.from_aggregate(req.to_aggregate())
    except ValueError as e:
        logger.info("Rejected scene request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/scene", response_model=SceneResponse)
async def scene(req: SceneRequest, config: SceneConfig = Depends(get_scene_config)) -> SceneResponse:
    s = _build_scene(req)
    buckets = bucket_cells(s.cells, s.bbox.center, config.gradients)
    return SceneResponse.of(s, buckets)


@router.post("/scene/{format_id}", response_class=PlainTextResponse)
async def render(
    format_id: str,
    req: SceneRequest,
    config: SceneConfig = Depends(get_scene_config),
) -> PlainTextResponse:
    try:
        spec = get_registry().get(format_id)
    except UnknownSceneFormatError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    s = _build_scene(req)
    return PlainTextResponse(spec.render(s, config))
