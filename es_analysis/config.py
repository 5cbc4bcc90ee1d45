"""Configuration management for es-analysis models."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ES_ANALYSIS_",
        case_sensitive=False,
    )

    log_level: str = "INFO"

    # Reject unknown keys in filter objects instead of dropping them
    strict_fields: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply the configured log level to the package logger.

    Args:
        settings: Settings to use; defaults to get_settings()

    Returns:
        The `es_analysis` logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger("es_analysis")
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger
