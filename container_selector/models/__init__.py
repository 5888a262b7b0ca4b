"""Models for container-selector."""

from .config import SelectorConfig
from .container import ContainerInfo

__all__ = [
    'SelectorConfig',
    'ContainerInfo',
]
