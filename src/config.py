"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The grammar and world are compiled in; settings only affect how the
    CLI logs and presents results.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Debug
    debug: bool = False  # Forces DEBUG logging
    log_level: str = "WARNING"

    # Interactive loop
    prompt: str = "> "
    show_error_codes: bool = True  # Print raw error codes next to messages

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
