"""Configuration management for ephemeral-pg.

Settings are read from ``EPHEMERAL_PG_*`` environment variables (and an
optional ``.env`` file) into a single flat Settings class, with grouped
views for the container runtime and logging.

Usage:
    from ephemeral_pg.config import settings

    # Grouped access
    settings.container.docker_binary
    settings.logging.log_format

    # Flat access
    settings.docker_binary
    settings.settle_delay_seconds
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .container import ContainerConfig, single_token
from .logging import LoggingConfig, normalize_log_format, normalize_log_level


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="EPHEMERAL_PG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Container runtime
    docker_binary: str = Field(default="docker", description="Docker CLI binary")
    postgres_image: str = Field(default="postgres", description="Image to run")
    container_port: int = Field(
        default=5432,
        ge=1,
        le=65535,
        description="Port PostgreSQL listens on inside the container",
    )
    host_auth_method: str = Field(
        default="trust",
        description="Value for POSTGRES_HOST_AUTH_METHOD",
    )
    settle_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        le=60.0,
        description="Fixed wait after start before the container is considered ready",
    )
    cleanup_on_failed_launch: bool = Field(
        default=False,
        description="Stop and remove the container when a launch fails after start",
    )

    # Connection defaults used to build DSNs
    postgres_user: str = Field(default="postgres")
    postgres_db: str = Field(default="postgres")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @field_validator("docker_binary", "postgres_image", "host_auth_method")
    @classmethod
    def reject_whitespace(cls, v: str) -> str:
        return single_token(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return normalize_log_format(v)

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def container(self) -> ContainerConfig:
        """Access container runtime configuration group."""
        return ContainerConfig(
            docker_binary=self.docker_binary,
            postgres_image=self.postgres_image,
            container_port=self.container_port,
            host_auth_method=self.host_auth_method,
            settle_delay_seconds=self.settle_delay_seconds,
            cleanup_on_failed_launch=self.cleanup_on_failed_launch,
            postgres_user=self.postgres_user,
            postgres_db=self.postgres_db,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(log_level=self.log_level, log_format=self.log_format)


settings = Settings()

__all__ = ["Settings", "settings", "ContainerConfig", "LoggingConfig"]
