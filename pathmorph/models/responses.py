"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class Frame(BaseModel):
    t: float
    d: str | None


class InterpolateResponse(BaseModel):
    start: str | None = Field(default=None, description="Normalized start path")
    end: str | None = Field(default=None, description="Normalized end path")
    frames: list[Frame] = Field(default_factory=list)
