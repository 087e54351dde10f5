"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathmorph_env: str = "development"
    pathmorph_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Frame sampling limits for /api/interpolate
    default_frames: int = Field(default=11, ge=2)
    max_frames: int = Field(default=1000, ge=1)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
