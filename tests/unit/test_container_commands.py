"""Unit tests for DockerCommands."""

from ephemeral_pg.services.container.commands import DockerCommands


class TestDockerCommands:
    """Test command line construction."""

    def test_run_postgres(self, container_config):
        """Test the start command is detached, auto-removed and port-published."""
        commands = DockerCommands(container_config)
        assert commands.run_postgres() == (
            "docker run --rm -d -e POSTGRES_HOST_AUTH_METHOD=trust -p 5432 postgres"
        )

    def test_run_postgres_uses_settings(self, container_config):
        config = container_config.model_copy(
            update={
                "docker_binary": "podman",
                "postgres_image": "postgres:16-alpine",
                "container_port": 6543,
                "host_auth_method": "md5",
            }
        )
        commands = DockerCommands(config)
        assert commands.run_postgres() == (
            "podman run --rm -d -e POSTGRES_HOST_AUTH_METHOD=md5 -p 6543 postgres:16-alpine"
        )

    def test_port(self, container_config):
        commands = DockerCommands(container_config)
        assert commands.port("abc123") == "docker container port abc123 5432"

    def test_stop(self, container_config):
        assert DockerCommands(container_config).stop("abc123") == "docker stop abc123"

    def test_remove(self, container_config):
        assert DockerCommands(container_config).remove("abc123") == "docker rm abc123"

    def test_list_by_id(self, container_config):
        assert DockerCommands(container_config).list_by_id("abc123") == (
            "docker ps -a -q --no-trunc --filter id=abc123"
        )

    def test_tokens_survive_whitespace_split(self, container_config):
        """Test every command splits into the expected number of tokens."""
        commands = DockerCommands(container_config)
        assert len(commands.run_postgres().split()) == 9
        assert len(commands.port("abc").split()) == 5

    def test_defaults_to_global_settings(self):
        from ephemeral_pg.config import settings

        commands = DockerCommands()
        assert commands.stop("abc") == f"{settings.docker_binary} stop abc"
