"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class InterpolateRequest(BaseModel):
    a: str | None = Field(default=None, description="Start path `d` attribute (null for no path)")
    b: str | None = Field(default=None, description="End path `d` attribute (null for no path)")
    t: list[float] | None = Field(
        default=None,
        description="Explicit interpolation parameters to sample (mutually exclusive with frames)",
    )
    frames: int | None = Field(
        default=None,
        ge=2,
        description="Number of evenly spaced samples from t=0 to t=1 inclusive",
    )

    @model_validator(mode="after")
    def _one_sampling_mode(self) -> "InterpolateRequest":
        if self.t is not None and self.frames is not None:
            raise ValueError("Give either t or frames, not both")
        return self
