"""Ephemeral PostgreSQL containers for tests.

Usage:
    from ephemeral_pg import PostgresContainer

    with PostgresContainer.start() as pg:
        connect(pg.dsn())

    async with await PostgresContainer.spawn() as pg:
        await connect(pg.dsn())
"""

from .config import Settings, settings
from .models import (
    Endpoint,
    ErrorType,
    EphemeralPgException,
    ContainerCommandError,
    InvalidOutputError,
    CommandFailedError,
    PortParseError,
    ContainerStartError,
)
from .services.container import (
    ContainerExecutor,
    ContainerManager,
    PostgresContainer,
    parse_first_endpoint,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "settings",
    "Endpoint",
    "ErrorType",
    "EphemeralPgException",
    "ContainerCommandError",
    "InvalidOutputError",
    "CommandFailedError",
    "PortParseError",
    "ContainerStartError",
    "ContainerExecutor",
    "ContainerManager",
    "PostgresContainer",
    "parse_first_endpoint",
]
