"""Shared utilities for container operations."""

import asyncio
import socket
import time
from typing import Optional

import structlog

from ...models.endpoint import Endpoint

logger = structlog.get_logger(__name__)


def wait_until_ready(endpoint: Endpoint, settle_delay: float = 2.0) -> None:
    """Block until a freshly started container is considered ready.

    This is a fixed settling delay, not a probe: PostgreSQL may still be
    initializing when it returns. Use ``probe_endpoint`` for an active check.

    Args:
        endpoint: Host endpoint the container was bound to
        settle_delay: Seconds to wait
    """
    logger.debug("Waiting for container to settle", endpoint=str(endpoint), delay=settle_delay)
    if settle_delay > 0:
        time.sleep(settle_delay)


def probe_endpoint(
    endpoint: Endpoint,
    max_wait: float = 10.0,
    interval: float = 0.1,
    connect_timeout: Optional[float] = 1.0,
) -> bool:
    """
    Poll until a TCP connection to the endpoint succeeds.

    Args:
        endpoint: Endpoint to connect to
        max_wait: Maximum time to wait in seconds
        interval: Polling interval in seconds
        connect_timeout: Timeout for each connection attempt

    Returns:
        True if a connection was accepted, False otherwise
    """
    deadline = time.monotonic() + max_wait
    while True:
        try:
            with socket.create_connection(endpoint.as_tuple(), timeout=connect_timeout):
                return True
        except OSError:
            pass
        if time.monotonic() >= deadline:
            return False
        time.sleep(interval)


async def run_in_executor(func, *args):
    """
    Run a blocking function in the default thread pool executor.

    Args:
        func: Blocking function to run
        *args: Arguments to pass to the function

    Returns:
        Result of the function
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)
