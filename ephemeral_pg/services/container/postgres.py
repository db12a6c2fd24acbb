"""Scoped handle for an ephemeral PostgreSQL container.

PostgresContainer is the object tests hold on to. It owns exactly one
container and tears it down once, on whichever of these happens first:
leaving a ``with``/``async with`` block, ``close()``, garbage collection of
the handle, or interpreter exit.
"""

import weakref
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Tuple, Union

import structlog

from ...models.endpoint import Endpoint
from .manager import ContainerManager
from .utils import run_in_executor

logger = structlog.get_logger(__name__)


class PostgresContainer:
    """Represents a running PostgreSQL container.

    Instances come from ``start()`` or ``spawn()``. The container id and
    endpoint are fixed at construction and never change.
    """

    def __init__(
        self,
        container_id: str,
        endpoint: Endpoint,
        manager: ContainerManager,
    ):
        if not container_id:
            raise ValueError("container_id must not be empty")

        self._container_id = container_id
        self._endpoint = endpoint
        self._user = manager.config.postgres_user
        self._database = manager.config.postgres_db
        # The callback must not reference self, or the handle is never collected
        self._finalizer = weakref.finalize(self, manager.teardown, container_id)

    @classmethod
    def start(cls, manager: Optional[ContainerManager] = None) -> "PostgresContainer":
        """Launch a container, blocking the calling thread.

        Takes three Docker round-trips plus the settling delay, typically a
        few seconds.

        Raises:
            ContainerStartError, PortParseError, InvalidOutputError
        """
        manager = manager or ContainerManager()
        container_id, endpoint = manager.launch()
        return cls(container_id, endpoint, manager)

    @classmethod
    async def spawn(cls, manager: Optional[ContainerManager] = None) -> "PostgresContainer":
        """Launch a container without blocking the event loop.

        The blocking launch runs in the loop's default executor. It cannot
        be cancelled once started: cancelling the awaiting task leaves the
        worker thread running, and the container it starts is not owned by
        any handle.

        Raises:
            ContainerStartError, PortParseError, InvalidOutputError
        """
        manager = manager or ContainerManager()
        container_id, endpoint = await run_in_executor(manager.launch)
        return cls(container_id, endpoint, manager)

    @property
    def container_id(self) -> str:
        return self._container_id

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def host(self) -> Union[IPv4Address, IPv6Address]:
        return self._endpoint.host

    @property
    def port(self) -> int:
        return self._endpoint.port

    def socket_addr(self) -> Tuple[str, int]:
        """(host, port) pair to pass to socket or driver connect calls."""
        return self._endpoint.as_tuple()

    def address(self) -> str:
        """Endpoint as ``host:port``, as reported by Docker."""
        return str(self._endpoint)

    def dsn(self, database: Optional[str] = None, user: Optional[str] = None) -> str:
        """Connection URL for drivers that take a libpq-style DSN."""
        host = self._endpoint.connect_host
        if self._endpoint.is_ipv6:
            host = f"[{host}]"
        return (
            f"postgresql://{user or self._user}@{host}:{self._endpoint.port}"
            f"/{database or self._database}"
        )

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """Stop and remove the container. Only the first call has an effect."""
        if self._finalizer.alive:
            logger.debug("Tearing down postgres container", container_id=self._container_id[:12])
        self._finalizer()

    def __enter__(self) -> "PostgresContainer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def __aenter__(self) -> "PostgresContainer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await run_in_executor(self.close)

    def __repr__(self) -> str:
        state = "closed" if self.closed else "running"
        return (
            f"<PostgresContainer id={self._container_id[:12]} "
            f"address={self.address()} {state}>"
        )
