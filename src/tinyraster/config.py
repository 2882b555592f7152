from pathlib import Path
from typing import Optional

import numpy as np
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import InputError
from .models.mode import RenderMode


class RenderConfig(BaseModel):
    width: int = Field(1024, gt=0, description="Framebuffer width in pixels")
    height: int = Field(1024, gt=0, description="Framebuffer height in pixels")
    mode: RenderMode = RenderMode.textured
    light_dir: list[float] = Field(default_factory=lambda: [0.0, 0.0, -1.0],
                                   description="Direction towards which light travels; normalised")
    background: list[int] = Field(default_factory=lambda: [0, 0, 0])
    color: list[int] = Field(default_factory=lambda: [255, 255, 255],
                             description="Line colour (wireframe) or base fill colour (flat)")
    degeneracy_eps: float = Field(1e-9, ge=0.0,
                                  description="Relative area threshold below which a triangle is skipped")
    pixel_center: Optional[bool] = Field(None, description="Add +0.5 on projection; defaults per mode")

    @field_validator("light_dir")
    @classmethod
    def _unit_light(cls, v):
        if len(v) != 3:
            raise ValueError("light_dir needs 3 components")
        n = float(np.linalg.norm(v))
        if not np.isfinite(n) or n == 0.0:
            raise ValueError("light_dir must be a finite non-zero vector")
        return [float(c) / n for c in v]

    @field_validator("background", "color")
    @classmethod
    def _rgb(cls, v):
        if len(v) != 3 or any(c < 0 or c > 255 for c in v):
            raise ValueError("colours are 3 channels in 0..255")
        return v

    @property
    def use_pixel_center(self) -> bool:
        if self.pixel_center is None:
            return self.mode.fills
        return self.pixel_center


class PathsConfig(BaseModel):
    model: Path = Path("obj/african_head.obj")
    texture: Optional[Path] = Path("obj/african_head_diffuse.tga")
    output: Path = Path("output.jpg")
    format: Optional[str] = Field(None, description="Pillow format name; inferred from output suffix if unset")


class AppConfig(BaseModel):
    render: RenderConfig = RenderConfig()
    paths: PathsConfig = PathsConfig()

    @model_validator(mode="after")
    def _texture_for_textured(self):
        if self.render.mode is RenderMode.textured and self.paths.texture is None:
            raise ValueError("textured mode needs paths.texture")
        return self

    @classmethod
    def from_file(cls, path) -> "AppConfig":
        path = Path(path)
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise InputError(f"cannot read config {path}: {exc}") from exc
        except ValidationError as exc:
            raise InputError(f"invalid config {path}: {exc}") from exc
