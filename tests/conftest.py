import subprocess

import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from container_selector.models.container import ContainerInfo


def make_docker_container(name, image, container_id=None):
    """Build a mock of a sparse docker-py container."""
    container = MagicMock()
    container.attrs = {
        "Id": container_id or f"{name}-0123456789abcdef",
        "Names": [f"/{name}"],
        "Image": image,
    }
    return container


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def containers():
    """Two running containers used across selection tests."""
    return [
        ContainerInfo(id="aaa111", names=["/web-1"], image="nginx"),
        ContainerInfo(id="bbb222", names=["/db-1"], image="postgres"),
    ]


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker client with two running containers."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.containers.list.return_value = [
        make_docker_container("web-1", "nginx"),
        make_docker_container("db-1", "postgres"),
    ]
    return mock_client


@pytest.fixture
def mock_runner():
    """Provides a process runner that reports success."""
    return MagicMock(side_effect=lambda args, **kwargs: subprocess.CompletedProcess(args, 0))


@pytest.fixture
def docker_container():
    """Factory for sparse docker-py container mocks."""
    return make_docker_container
