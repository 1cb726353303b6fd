from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

FrameType = Literal["classic", "aluminium", "box", "spacer", "float"]
TextureMapType = Literal["diffuse", "normal", "roughness", "metalness"]
TextureResolution = Literal["1x", "2x"]
CanvasTextureName = Literal["substrate", "blank"]
CanvasWrapType = Literal["black", "white", "image", "mirror"]


class MaterialProperties(BaseModel):
    metalness: float = Field(ge=0, le=1)
    roughness: float = Field(ge=0, le=1)


class TextureRequest(BaseModel):
    frameType: FrameType
    color: str = Field(min_length=1)
    maps: list[TextureMapType] = Field(default_factory=lambda: ["diffuse"])
    resolution: TextureResolution = "1x"

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("color must not be blank")
        return stripped
