"""Build the `docker exec` argument vector for a resolved command."""

import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from .constants import (
    DOCKER_BINARY,
    INTERACTIVE_SHELLS,
    SHELL_METACHARACTERS,
    STDIN_FLAG,
    TTY_FLAG,
    WRAPPER_SHELL,
)


@dataclass(frozen=True)
class ExecPlan:
    """Everything needed to launch one `docker exec`."""

    container_name: str
    command: List[str] = field(default_factory=list)
    tty: bool = False
    docker_binary: str = DOCKER_BINARY

    @property
    def mode_flag(self) -> str:
        return TTY_FLAG if self.tty else STDIN_FLAG

    @property
    def args(self) -> List[str]:
        """Arguments after the docker binary."""
        return ["exec", self.mode_flag, self.container_name, *self.command]

    @property
    def argv(self) -> List[str]:
        return [self.docker_binary, *self.args]


def stdin_is_terminal(stream: Optional[TextIO] = None) -> bool:
    """Check whether stdin is attached to a terminal."""
    stream = stream if stream is not None else sys.stdin
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def is_interactive_shell(tokens: List[str]) -> bool:
    return len(tokens) == 1 and tokens[0] in INTERACTIVE_SHELLS


def needs_shell(command: str) -> bool:
    """Whether the command has to run through `sh -c`.

    Any space means several words, so the metacharacter check only matters
    for single-word commands.
    """
    return any(char in SHELL_METACHARACTERS for char in command) or " " in command


def plan_exec(command: str, container_name: str, stdin_is_tty: bool,
              docker_binary: str = DOCKER_BINARY) -> ExecPlan:
    """Decide TTY attachment and shell wrapping for a command.

    Args:
        command: Command string as resolved, passed verbatim to `sh -c` when wrapped
        container_name: Display name of the target container
        stdin_is_tty: Whether the local stdin is a terminal
        docker_binary: Docker CLI executable

    Returns:
        ExecPlan ready to run
    """
    tokens = command.split()
    tty = is_interactive_shell(tokens) and stdin_is_tty

    if needs_shell(command):
        argv = [WRAPPER_SHELL, "-c", command]
    else:
        argv = tokens

    return ExecPlan(
        container_name=container_name,
        command=argv,
        tty=tty,
        docker_binary=docker_binary,
    )
