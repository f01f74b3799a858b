"""
Application-specific settings.
"""
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, environment and logging.

    Logging Note:
        - LOG_JSON should stay enabled in deployed environments so that log
          aggregation can parse the structured events emitted by the domain
          model; the console renderer is meant for local development.
    """
    PROJECT_NAME: str = "oai-pmh-domain"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Upper-cases the configured level and rejects names unknown to `logging`.

        Args:
            v: Raw level name from the environment.

        Returns:
            The canonical level name.
        """
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
