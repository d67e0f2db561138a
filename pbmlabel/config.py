"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pbmlabel_log_level: str = "warning"

    # Largest raster (width * height) accepted before any pixel buffer is allocated
    pbmlabel_max_pixels: int = 64 * 1024 * 1024

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
