"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vectorpath_log_level: str = "info"

    # Significant digits for coordinates written by the SVG surface
    vectorpath_svg_precision: int = 6

    # Font family used when a CSS font string names none
    vectorpath_default_font: str = "DejaVu Sans"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level."""
    name = (level or settings.vectorpath_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
