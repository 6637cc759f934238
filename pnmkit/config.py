"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pnmkit_log_level: str = "info"

    # Max sample value for grids built without an explicit one
    pnmkit_default_max_value: int = 255

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level."""
    name = (level or settings.pnmkit_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
