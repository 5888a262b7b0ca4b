"""Resolve the command to run inside the selected container."""

import logging

import click

from ..models.config import SelectorConfig
from ..services.exceptions import InputReadError
from .constants import COMMAND_PROMPT, DEFAULT_COMMAND

logger = logging.getLogger(__name__)


def prompt_for_command() -> str:
    """Prompt on stdout and read one line from stdin.

    An empty or whitespace-only answer falls back to the default shell.
    """
    try:
        answer = click.prompt(
            COMMAND_PROMPT,
            default="",
            show_default=False,
            prompt_suffix="",
        )
    except click.Abort as e:
        # click turns EOF and Ctrl-C on the prompt into Abort
        raise InputReadError("failed to read command: input aborted") from e
    except OSError as e:
        raise InputReadError(f"failed to read command: {e}") from e

    return answer.strip() or DEFAULT_COMMAND


def resolve_command(config: SelectorConfig) -> str:
    """Pick the command: explicit flag, then --no-prompt default, then prompt."""
    if config.command:
        command = config.command
    elif config.no_prompt:
        command = DEFAULT_COMMAND
    else:
        command = prompt_for_command()

    logger.debug("Resolved command: %r", command)
    return command
