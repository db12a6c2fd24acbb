"""Container management services.

This package provides Docker-backed PostgreSQL containers split into:
- commands.py: Docker CLI command lines built from settings
- executor.py: Blocking command execution and output decoding
- ports.py: Parsing of ``docker container port`` output
- manager.py: Container launch and teardown
- postgres.py: Scoped handle owning one container
- utils.py: Readiness waits and executor offloading
"""

from .commands import DockerCommands
from .executor import ContainerExecutor
from .manager import ContainerManager
from .ports import parse_first_endpoint
from .postgres import PostgresContainer
from .utils import wait_until_ready, probe_endpoint, run_in_executor

__all__ = [
    "DockerCommands",
    "ContainerExecutor",
    "ContainerManager",
    "parse_first_endpoint",
    "PostgresContainer",
    "wait_until_ready",
    "probe_endpoint",
    "run_in_executor",
]
