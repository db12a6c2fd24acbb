"""Docker CLI command lines.

DockerCommands translates container settings into the command lines the
executor runs. Lines are split on whitespace by the executor, so every
value interpolated here must be a single token.
"""

from typing import Optional

from ...config import ContainerConfig, settings


class DockerCommands:
    """Builds Docker CLI command lines from settings."""

    def __init__(self, config: Optional[ContainerConfig] = None):
        self._config = config or settings.container

    def run_postgres(self) -> str:
        """Start PostgreSQL detached with a runtime-assigned host port.

        ``--rm`` leaves no restart policy and removes the container on stop.
        The auth method accepts every connection, which is only acceptable
        for throwaway test databases.
        """
        cfg = self._config
        parts = [
            cfg.docker_binary,
            "run",
            "--rm",
            "-d",
            "-e",
            f"POSTGRES_HOST_AUTH_METHOD={cfg.host_auth_method}",
            "-p",
            str(cfg.container_port),
            cfg.postgres_image,
        ]
        return " ".join(parts)

    def port(self, container_id: str) -> str:
        """Query the host bindings of the PostgreSQL port."""
        return (
            f"{self._config.docker_binary} container port "
            f"{container_id} {self._config.container_port}"
        )

    def stop(self, container_id: str) -> str:
        return f"{self._config.docker_binary} stop {container_id}"

    def remove(self, container_id: str) -> str:
        return f"{self._config.docker_binary} rm {container_id}"

    def list_by_id(self, container_id: str) -> str:
        """List running or stopped containers matching an id, ids only."""
        return f"{self._config.docker_binary} ps -a -q --no-trunc --filter id={container_id}"
