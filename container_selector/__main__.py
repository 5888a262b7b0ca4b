"""Allow running as `python -m container_selector`."""

from .cli.main import cli


if __name__ == '__main__':
    cli()
