"""Logging configuration."""

from logging import getLevelName

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_log_level(v: str) -> str:
    level = v.upper()
    if not isinstance(getLevelName(level), int):
        raise ValueError(f"Unknown log level: {v}")
    return level


def normalize_log_format(v: str) -> str:
    fmt = v.lower()
    if fmt not in ("console", "json"):
        raise ValueError("log_format must be 'console' or 'json'")
    return fmt


class LoggingConfig(BaseSettings):
    """Log level and output format."""

    model_config = SettingsConfigDict(env_prefix="EPHEMERAL_PG_", extra="ignore")

    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return normalize_log_format(v)
