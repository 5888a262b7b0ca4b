"""container-selector - pick a running Docker container and exec into it."""

__version__ = "1.0.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
