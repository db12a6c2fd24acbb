"""Pytest configuration and shared fixtures."""

import os
import shutil
import subprocess

import pytest
from unittest.mock import MagicMock

# Keep tests independent of a developer's environment and .env file
os.environ.setdefault("EPHEMERAL_PG_LOG_LEVEL", "DEBUG")
os.environ.setdefault("EPHEMERAL_PG_LOG_FORMAT", "console")

from ephemeral_pg.config import ContainerConfig
from ephemeral_pg.services.container.executor import ContainerExecutor
from ephemeral_pg.services.container.manager import ContainerManager
from ephemeral_pg.utils.logging import setup_logging

setup_logging()


@pytest.fixture
def container_config():
    """Container settings with no settling delay."""
    return ContainerConfig(
        docker_binary="docker",
        postgres_image="postgres",
        container_port=5432,
        host_auth_method="trust",
        settle_delay_seconds=0.0,
        cleanup_on_failed_launch=False,
        postgres_user="postgres",
        postgres_db="postgres",
    )


@pytest.fixture
def mock_executor():
    """Mock ContainerExecutor for testing."""
    executor = MagicMock(spec=ContainerExecutor)
    executor.run.return_value = ""
    executor.run_for_effect.return_value = None
    return executor


@pytest.fixture
def manager(container_config, mock_executor):
    """ContainerManager wired to the mock executor."""
    return ContainerManager(config=container_config, executor=mock_executor)


@pytest.fixture
def mock_manager(container_config):
    """Mock ContainerManager that launches without Docker."""
    from ephemeral_pg.models.endpoint import Endpoint

    manager = MagicMock(spec=ContainerManager)
    manager.config = container_config
    manager.launch.return_value = (
        "3f2a9c1d7b8e4f5a6b7c8d9e0f1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a",
        Endpoint.parse("0.0.0.0:55837"),
    )
    manager.teardown.return_value = True
    return manager


# ============================================================================
# Integration Test Fixtures
# ============================================================================


def docker_available() -> bool:
    """True when the docker CLI exists and the daemon answers."""
    if shutil.which("docker") is None:
        return False
    try:
        result = subprocess.run(
            ["docker", "info"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=15,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0


@pytest.fixture(scope="session")
def require_docker():
    """Skip the test unless a Docker daemon is reachable."""
    if not docker_available():
        pytest.skip("Docker daemon not available")
