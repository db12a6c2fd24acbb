"""Container runtime configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def single_token(v: str) -> str:
    """Command lines are split on whitespace, so values must be single tokens."""
    if not v or any(ch.isspace() for ch in v):
        raise ValueError("value must be a single non-empty token without whitespace")
    return v


class ContainerConfig(BaseSettings):
    """Docker CLI and PostgreSQL container settings."""

    model_config = SettingsConfigDict(env_prefix="EPHEMERAL_PG_", extra="ignore")

    docker_binary: str = Field(default="docker")
    postgres_image: str = Field(default="postgres")
    container_port: int = Field(default=5432, ge=1, le=65535)
    host_auth_method: str = Field(default="trust")
    settle_delay_seconds: float = Field(default=2.0, ge=0.0, le=60.0)
    cleanup_on_failed_launch: bool = Field(default=False)
    postgres_user: str = Field(default="postgres")
    postgres_db: str = Field(default="postgres")

    @field_validator("docker_binary", "postgres_image", "host_auth_method")
    @classmethod
    def reject_whitespace(cls, v: str) -> str:
        return single_token(v)

    def with_overrides(self, **overrides) -> "ContainerConfig":
        """Copy of this config with ``overrides`` applied and validated."""
        return ContainerConfig(**{**self.model_dump(), **overrides})
