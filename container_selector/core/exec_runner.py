"""Run a planned `docker exec` attached to the caller's terminal."""

import logging
import subprocess
from typing import Callable, IO, Optional

from ..services.exceptions import CommandFailedError, ExecLaunchError
from .exec_planner import ExecPlan

Runner = Callable[..., subprocess.CompletedProcess]

logger = logging.getLogger(__name__)


def run_exec(plan: ExecPlan, stdin: Optional[IO] = None, stdout: Optional[IO] = None,
             stderr: Optional[IO] = None,
             runner: Optional[Runner] = None) -> subprocess.CompletedProcess:
    """Run the plan and wait for it to finish.

    Streams left as None are inherited from this process, so the child talks
    to the terminal directly.

    Raises:
        ExecLaunchError: If the docker binary cannot be started
        CommandFailedError: If the command exits with a non-zero status
    """
    runner = runner or subprocess.run
    logger.debug("Running: %s", " ".join(plan.argv))
    try:
        result = runner(plan.argv, stdin=stdin, stdout=stdout, stderr=stderr)
    except OSError as e:
        raise ExecLaunchError(f"failed to execute docker exec: {e}") from e

    logger.debug("docker exec exited with status %d", result.returncode)
    if result.returncode != 0:
        raise CommandFailedError(result.returncode)
    return result
