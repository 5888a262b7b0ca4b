"""Exceptions raised while selecting a container and running a command in it."""

from typing import List, Optional


class ContainerSelectorError(Exception):
    """Base exception for all container-selector errors."""

    pass


class RuntimeUnavailableError(ContainerSelectorError):
    """Exception raised when the Docker daemon cannot be reached or queried."""

    pass


class NoContainersError(ContainerSelectorError):
    """Exception raised when no containers are running."""

    def __init__(self, message: str = "no running containers found"):
        super().__init__(message)


class NoMatchError(ContainerSelectorError):
    """Exception raised when a filter matches no running container."""

    def __init__(self, container_filter: str):
        self.container_filter = container_filter
        super().__init__(f"no containers found matching filter: {container_filter}")


class AmbiguousMatchError(ContainerSelectorError):
    """Exception raised when a filter matches more than one container."""

    def __init__(self, container_filter: str, matches: Optional[List] = None):
        self.container_filter = container_filter
        self.matches = list(matches or [])
        super().__init__("please use a more specific filter")


class SelectionCancelledError(ContainerSelectorError):
    """Exception raised when the interactive picker is cancelled or fails."""

    def __init__(self, message: str = "container selection cancelled"):
        super().__init__(message)


class InputReadError(ContainerSelectorError):
    """Exception raised when the command prompt cannot read standard input."""

    pass


class CommandFailedError(ContainerSelectorError):
    """Exception raised when the command inside the container exits non-zero."""

    def __init__(self, exit_code: int):
        self.exit_code = exit_code
        super().__init__(f"command exited with status {exit_code}")


class ExecLaunchError(ContainerSelectorError):
    """Exception raised when `docker exec` itself cannot be started."""

    pass
