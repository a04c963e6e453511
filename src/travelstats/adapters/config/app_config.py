"""12-factor configuration adapter using environment variables and a .env file."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Declarative operator definitions
    operators_file: str = Field(
        default="operators.json",
        description="Path to the JSON file with operator definitions (optional)",
    )

    # Report configuration
    top_limit: int | None = Field(
        default=None,
        description="Maximum number of rows in counted tables (unset shows every row)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level: CRITICAL, ERROR, WARNING, INFO or DEBUG",
    )

    @field_validator("top_limit")
    @classmethod
    def validate_top_limit(cls, v: int | None) -> int | None:
        """Validate top limit is positive when set."""
        if v is not None and v < 1:
            raise ValueError("top_limit must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def get_log_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelNamesMapping()[self.log_level]
