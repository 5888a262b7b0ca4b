"""End-to-end flow: list, select, resolve, plan, exec."""

import logging
import subprocess
from typing import Optional

from ..models.config import SelectorConfig
from ..services.docker_service import DockerService
from .command_resolver import resolve_command
from .exec_planner import plan_exec, stdin_is_terminal
from .exec_runner import Runner, run_exec
from .selector import Picker, select_container

logger = logging.getLogger(__name__)


def run_session(config: SelectorConfig, docker_service: DockerService,
                picker: Optional[Picker] = None,
                runner: Optional[Runner] = None,
                stdin_is_tty: Optional[bool] = None) -> subprocess.CompletedProcess:
    """Select a running container and execute the configured command in it.

    Args:
        config: Parsed command-line options
        docker_service: Source of running containers
        picker: Interactive picker used when no filter is configured
        runner: Process runner for `docker exec`
        stdin_is_tty: Override terminal detection for the local stdin

    Returns:
        Completed `docker exec` process
    """
    containers = docker_service.list_running_containers()
    selected = select_container(containers, config.container_filter, picker)
    command = resolve_command(config)

    if stdin_is_tty is None:
        stdin_is_tty = stdin_is_terminal()
    logger.debug("Local stdin is a terminal: %s", stdin_is_tty)

    plan = plan_exec(command, selected.name, stdin_is_tty, config.docker_binary)
    return run_exec(plan, runner=runner)
