# src/ratetable/config/settings.py
"""
Settings - Pydantic-based Process Settings

Process-level settings read from environment variables (and an optional
.env file) using Pydantic Settings. The rate table itself is not a setting;
it comes from the JSON config files merged by
ratetable.application.config_merger.

Files that USE this module:
- ratetable.app (builds Settings at startup)

Files that this module USES:
- None
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for validation
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --- Listener ---
    # None means PORT is not set at all; an empty string still overrides
    port_override: Optional[str] = Field(default=None, alias="PORT")
    host: str = Field(default="0.0.0.0", alias="HOST")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="RATETABLE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @property
    def log_level_value(self) -> int:
        """Numeric stdlib logging level."""
        return logging.getLevelName(self.log_level)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
