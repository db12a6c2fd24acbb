"""PostgreSQL container lifecycle management using the Docker CLI."""

import shutil
from typing import Optional, Tuple

import structlog

from ...config import ContainerConfig, settings
from ...models.endpoint import Endpoint
from ...models.errors import ContainerStartError, EphemeralPgException
from .commands import DockerCommands
from .executor import ContainerExecutor
from .ports import parse_first_endpoint
from .utils import wait_until_ready

logger = structlog.get_logger(__name__)


class ContainerManager:
    """Manages PostgreSQL container lifecycle operations.

    Launch starts a detached container, asks Docker which host port it was
    given, parses the binding and waits for the container to settle.
    Teardown stops and removes it, logging failures instead of raising.
    """

    def __init__(
        self,
        config: Optional[ContainerConfig] = None,
        executor: Optional[ContainerExecutor] = None,
    ):
        """Initialize the container manager.

        Args:
            config: Container settings, defaults to the global settings
            executor: Command executor, mainly overridden in tests
        """
        self._config = config or settings.container
        self._commands = DockerCommands(self._config)
        self._executor = executor or ContainerExecutor()

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def executor(self) -> ContainerExecutor:
        """Get the command executor."""
        return self._executor

    def is_available(self) -> bool:
        """Check if the Docker CLI is available."""
        return shutil.which(self._config.docker_binary) is not None

    def get_initialization_error(self) -> Optional[str]:
        """Get a description of why containers cannot be launched, if any."""
        if not self.is_available():
            return (
                f"docker binary not found: {self._config.docker_binary}. "
                "Ensure Docker is installed and in PATH."
            )
        return None

    def launch(self) -> Tuple[str, Endpoint]:
        """Start a container and wait for it to settle.

        Blocks for three Docker round-trips plus the settling delay.

        Returns:
            Tuple of (container_id, endpoint)

        Raises:
            ContainerStartError: the start command printed no container id
            PortParseError: no host binding could be parsed
            InvalidOutputError: a command printed non-UTF-8 output
        """
        container_id = self._executor.run(self._commands.run_postgres())
        if not container_id:
            raise ContainerStartError(image=self._config.postgres_image)

        logger.info(
            "Started postgres container",
            container_id=container_id[:12],
            image=self._config.postgres_image,
        )

        try:
            output = self._executor.run(self._commands.port(container_id))
            endpoint = parse_first_endpoint(output)
        except EphemeralPgException as e:
            self._handle_failed_launch(container_id, e)
            raise

        wait_until_ready(endpoint, self._config.settle_delay_seconds)

        logger.info(
            "Postgres container ready",
            container_id=container_id[:12],
            endpoint=str(endpoint),
        )
        return container_id, endpoint

    def teardown(self, container_id: str) -> bool:
        """Stop and remove a container.

        Each step is attempted even if the previous one failed. Errors are
        logged, never raised, so calling this for a container that is
        already gone is harmless.

        Args:
            container_id: Container to tear down

        Returns:
            True if either step succeeded, False if both failed
        """
        stopped = self._try(
            self._commands.stop(container_id),
            "Failed to stop docker container",
            container_id,
        )
        # Redundant with --rm. After a clean stop the container is usually
        # gone already, so a failed removal is only worth a debug line.
        removed = self._try(
            self._commands.remove(container_id),
            "Failed to remove docker container",
            container_id,
            quiet=stopped,
        )

        if stopped or removed:
            logger.debug("Destroyed postgres container", container_id=container_id[:12])
        return stopped or removed

    def exists(self, container_id: str) -> bool:
        """Check whether Docker still knows a container, running or stopped."""
        return bool(self._executor.run(self._commands.list_by_id(container_id)))

    def _try(
        self,
        command_line: str,
        failure_message: str,
        container_id: str,
        quiet: bool = False,
    ) -> bool:
        try:
            self._executor.run_for_effect(command_line)
            return True
        except EphemeralPgException as e:
            log = logger.debug if quiet else logger.warning
            log(failure_message, container_id=container_id[:12], **e.to_dict())
            return False

    def _handle_failed_launch(self, container_id: str, error: EphemeralPgException) -> None:
        if self._config.cleanup_on_failed_launch:
            logger.warning(
                "Launch failed after start, removing container",
                container_id=container_id[:12],
                error=error.message,
            )
            self.teardown(container_id)
        else:
            logger.warning(
                "Launch failed after start, container left running",
                container_id=container_id,
                error=error.message,
            )
