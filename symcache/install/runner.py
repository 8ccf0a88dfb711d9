"""Runs the external install command."""

import logging
import subprocess
from pathlib import Path
from typing import Callable

from symcache.exceptions import InstallCommandError

logger = logging.getLogger(__name__)

InstallRunner = Callable[[str, Path], subprocess.CompletedProcess]


def run_install_command(command: str, cwd: Path) -> subprocess.CompletedProcess:
    """
    Run ``command`` through the shell in ``cwd`` and wait for it.

    Standard output is logged once the command completes.

    Raises:
        InstallCommandError: The command exited with a non-zero code. Its
            standard error is logged and attached to the exception.
    """
    logger.info(f"Running '{command}'.")

    result = subprocess.run(
        command,
        cwd=cwd,
        text=True,
        errors="replace",
        capture_output=True,
        check=False,
        shell=True,
    )

    if result.stdout:
        logger.info(result.stdout.rstrip())

    if result.returncode != 0:
        if result.stderr:
            logger.error(result.stderr.rstrip())
        raise InstallCommandError(command, result.returncode, result.stderr or "")

    if result.stderr:
        logger.debug(result.stderr.rstrip())
    return result
