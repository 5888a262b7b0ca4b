"""Docker service for listing running containers."""

import logging
from typing import List

import docker
import docker.errors

from ..models.container import ContainerInfo
from .exceptions import NoContainersError, RuntimeUnavailableError

logger = logging.getLogger(__name__)


class DockerService:
    """Service for the read-only Docker operations container-selector needs."""

    def __init__(self):
        """Initialize Docker service and test connection."""
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise RuntimeUnavailableError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise RuntimeUnavailableError(f"failed to connect to Docker: {e}") from e
        except Exception as e:
            raise RuntimeUnavailableError(f"failed to connect to Docker: {e}") from e

    def list_running_containers(self) -> List[ContainerInfo]:
        """List running containers.

        Uses the sparse list payload so names and images come straight from
        the list call without inspecting every container.

        Returns:
            Running containers in the order the daemon reports them

        Raises:
            RuntimeUnavailableError: If the daemon cannot be queried
            NoContainersError: If no container is running
        """
        try:
            containers = self.client.containers.list(sparse=True)
        except docker.errors.APIError as e:
            raise RuntimeUnavailableError(f"failed to list containers: {e}") from e
        except Exception as e:
            raise RuntimeUnavailableError(f"Unexpected error listing containers: {e}") from e

        infos = [ContainerInfo.from_attrs(container.attrs) for container in containers]
        logger.debug("Found %d running containers", len(infos))

        if not infos:
            raise NoContainersError()
        return infos

    def close(self) -> None:
        """Close the underlying Docker client."""
        self.client.close()
