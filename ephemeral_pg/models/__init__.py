"""Data models for ephemeral-pg."""

from .endpoint import Endpoint
from .errors import (
    ErrorType,
    ErrorDetail,
    EphemeralPgException,
    ContainerCommandError,
    InvalidOutputError,
    CommandFailedError,
    PortParseError,
    ContainerStartError,
)

__all__ = [
    # Value types
    "Endpoint",
    # Error models
    "ErrorType",
    "ErrorDetail",
    "EphemeralPgException",
    "ContainerCommandError",
    "InvalidOutputError",
    "CommandFailedError",
    "PortParseError",
    "ContainerStartError",
]
