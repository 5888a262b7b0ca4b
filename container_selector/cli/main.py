"""Main CLI entry point for container-selector."""

import logging
import sys

import click
from rich.console import Console

from .. import __version__
from ..core.constants import DOCKER_BINARY
from ..core.session import run_session
from ..models.config import SelectorConfig
from ..services.docker_service import DockerService
from ..services.exceptions import ContainerSelectorError


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, keeping stdout for the container."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


@click.command()
@click.version_option(__version__, prog_name='container-selector')
@click.option('--command', '-c', 'command', help='Command to run in the container')
@click.option('--no-prompt', is_flag=True, help='Skip command prompt and use default bash')
@click.option('--filter', '-f', 'container_filter',
              help='Auto-select container matching this pattern (skips the picker)')
@click.option('--docker-binary', envvar='CONTAINER_SELECTOR_DOCKER', default=DOCKER_BINARY,
              show_default=True, help='Docker CLI executable used for exec')
@click.option('--verbose', '-v', is_flag=True, help='Log debug information to stderr')
def cli(command, no_prompt, container_filter, docker_binary, verbose):
    """Select and connect to a Docker container.

    A simple tool to interactively select a running Docker container and
    execute a command in it.
    """
    configure_logging(verbose)
    console = Console(stderr=True)
    config = SelectorConfig(
        command=command,
        no_prompt=no_prompt,
        container_filter=container_filter,
        docker_binary=docker_binary,
    )

    try:
        docker_service = DockerService()
        try:
            run_session(config, docker_service)
        finally:
            docker_service.close()
    except ContainerSelectorError as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
