"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from dlascene import __version__
from dlascene.export import get_registry
from dlascene.models.responses import FormatInfo, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        formats_registered=get_registry().count,
    )


@router.get("/formats", response_model=list[FormatInfo])
async def formats() -> list[FormatInfo]:
    return [FormatInfo.of(spec) for spec in get_registry().all()]
