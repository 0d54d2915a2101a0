"""
Configuration management for schema-descriptor.

This module provides environment-based configuration using Pydantic
BaseSettings. Settings only cover ambient concerns (logging and the optional
format configuration file); schema compilation itself is driven entirely by
the registry object handed to the compiler.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SDESC_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the SDESC_ prefix, except LOG_LEVEL
    which is shared with the host application.
    For example, SDESC_FORMATS_CONFIG points the default registry at a YAML
    file of pattern formats.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    log_to_file: bool = Field(
        default=False, description="Also write JSON logs to a daily rotated file"
    )
    log_file_dir: str = Field(
        default="logs", description="Directory for log files when log_to_file is set"
    )

    formats_config: Optional[str] = Field(
        default=None,
        description="YAML file of named pattern formats loaded into the default registry",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="SDESC_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
