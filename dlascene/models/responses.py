"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dlascene.engine.gradient import ColorBucket
from dlascene.engine.scene import Light, Scene
from dlascene.export.registry import FormatSpec
from dlascene.utils.geometry import Vec3


class XYZ(BaseModel):
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, v: Vec3) -> XYZ:
        return cls(x=v.x, y=v.y, z=v.z)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    formats_registered: int = 0


class FormatInfo(BaseModel):
    id: str
    extension: str
    aliases: list[str] = Field(default_factory=list)
    description: str = ""

    @classmethod
    def of(cls, spec: FormatSpec) -> FormatInfo:
        return cls(id=spec.id, extension=spec.extension, aliases=list(spec.aliases), description=spec.description)


class BBoxInfo(BaseModel):
    lower: XYZ
    upper: XYZ
    center: XYZ
    volume: float


class CameraInfo(BaseModel):
    position: XYZ
    look_at: XYZ


class LightInfo(BaseModel):
    name: str
    position: XYZ
    intensity: float

    @classmethod
    def of(cls, light: Light) -> LightInfo:
        return cls(name=light.name, position=XYZ.of(light.position), intensity=light.intensity)


class BucketInfo(BaseModel):
    index: int
    color: tuple[float, float, float]
    count: int

    @classmethod
    def of(cls, bucket: ColorBucket) -> BucketInfo:
        return cls(index=bucket.index, color=bucket.color, count=len(bucket.cells))


class SceneResponse(BaseModel):
    bbox: BBoxInfo
    camera: CameraInfo
    lights: list[LightInfo]
    particle_count: int
    buckets: list[BucketInfo] = Field(default_factory=list)

    @classmethod
    def of(cls, scene: Scene, buckets: list[ColorBucket]) -> SceneResponse:
        bbox = scene.bbox
        return cls(
            bbox=BBoxInfo(
                lower=XYZ.of(bbox.lower),
                upper=XYZ.of(bbox.upper),
                center=XYZ.of(bbox.center),
                volume=bbox.volume,
            ),
            camera=CameraInfo(position=XYZ.of(scene.camera.position), look_at=XYZ.of(scene.camera.target)),
            lights=[LightInfo.of(light) for light in scene.lights],
            particle_count=len(scene.cells),
            buckets=[BucketInfo.of(b) for b in buckets],
        )
