"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    spatialcore_env: str = "development"
    spatialcore_log_level: str = "info"

    # Snapping: on-screen size of the snap zone in pixels
    snap_threshold_base: float = 8.0
    snap_min_scale: float = 0.1

    # Zoom range
    zoom_min: float = 0.1
    zoom_max: float = 4.0
    zoom_default: float = 1.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install the root handler. Meant for the host application, not the library."""
    name = (level or settings.spatialcore_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
