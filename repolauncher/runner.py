"""External command launch for the selected project.

Runs the assistant command in the project directory with the terminal
handed over to the child. The caller leaves raw mode before calling in.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .config import DANGEROUS_FLAG, LAUNCH_COMMAND

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when the project directory or the command cannot be used."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


def build_launch_command(dangerous: bool) -> list[str]:
    """Return the safe command, or the dangerous variant when enabled."""
    command = list(LAUNCH_COMMAND)
    if dangerous:
        command.append(DANGEROUS_FLAG)
    return command


def _wait_through_interrupts(process: subprocess.Popen) -> int:
    # Ctrl+C reaches the child too; the child decides whether to exit.
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            continue


def launch_in_directory(target: Path, command: Sequence[str]) -> int:
    """Run ``command`` inside ``target`` and return the child's exit status.

    The child inherits stdin, stdout and stderr. The previous working
    directory is restored before returning, including on failure. A child
    killed by a signal has no exit status and reports ``1``.
    """
    original_dir = Path.cwd()
    try:
        os.chdir(target)
    except OSError as exc:
        raise LaunchError(f"Error changing directory: {exc}") from exc

    logger.info("launching %s in %s", " ".join(command), target)
    try:
        process = subprocess.Popen(list(command))
    except OSError as exc:
        os.chdir(original_dir)
        raise LaunchError(f"Failed to launch {command[0]}: {exc}") from exc
    try:
        returncode = _wait_through_interrupts(process)
    finally:
        os.chdir(original_dir)

    logger.info("%s exited with status %s", command[0], returncode)
    if returncode < 0:
        return 1
    return returncode


__all__ = ["LaunchError", "build_launch_command", "launch_in_directory"]
