"""Command-line front door for repolauncher.

Resolves the projects root, scans it once, and dispatches into the
interactive menu. Fatal startup and launch failures end up here.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import termios
from collections.abc import Sequence
from pathlib import Path

from .app import run_selector
from .config import APP_NAME, LOG_FILE_ENV, default_projects_root
from .runner import LaunchError
from .scanner import DirectoryUnreadable, scan_projects


def _configure_logging() -> None:
    """Send debug logs to the file named by the environment, if any."""
    log_file = os.environ.get(LOG_FILE_ENV, "").strip()
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None, root: Path | None = None) -> None:
    """Pick a project directory and launch the assistant inside it.

    ``root`` is primarily for tests; when omitted the platform projects
    folder is used. Always exits through ``SystemExit`` with the final
    status.
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Pick a recent project and launch the assistant in it.",
    )
    parser.parse_args(argv)
    _configure_logging()

    if root is None:
        root = default_projects_root()

    try:
        entries = scan_projects(root)
    except DirectoryUnreadable as exc:
        raise SystemExit(f"Error reading directory {root}: {exc.reason}") from exc
    if not entries:
        raise SystemExit(f"No directories found in {root}")

    try:
        status = run_selector(entries)
    except termios.error as exc:
        raise SystemExit(f"{APP_NAME} needs an interactive terminal") from exc
    except LaunchError as exc:
        print(exc.message, file=sys.stderr)
        raise SystemExit(exc.exit_code) from exc
    raise SystemExit(status)


if __name__ == "__main__":
    main()
