"""Service layer for abstracting Docker operations."""

from .docker_service import DockerService
from .exceptions import (
    ContainerSelectorError,
    RuntimeUnavailableError,
    NoContainersError,
    NoMatchError,
    AmbiguousMatchError,
    SelectionCancelledError,
    InputReadError,
    CommandFailedError,
    ExecLaunchError,
)

__all__ = [
    "DockerService",
    "ContainerSelectorError",
    "RuntimeUnavailableError",
    "NoContainersError",
    "NoMatchError",
    "AmbiguousMatchError",
    "SelectionCancelledError",
    "InputReadError",
    "CommandFailedError",
    "ExecLaunchError",
]
