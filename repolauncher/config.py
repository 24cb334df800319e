"""Launcher constants and the platform projects directory.

Nothing here is persisted or read from flags; the values are fixed so the
launcher always behaves the same way on one machine.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_documents_dir

APP_NAME = "repolauncher"
PROJECTS_DIRNAME = "GitHub"
BROWSE_LIMIT = 9
LAUNCH_COMMAND: tuple[str, ...] = ("claude",)
DANGEROUS_FLAG = "--dangerously-skip-permissions"
LOG_FILE_ENV = "REPOLAUNCHER_LOG_FILE"


def default_projects_root() -> Path:
    """Return the projects folder inside the user's documents directory."""
    return Path(user_documents_dir()) / PROJECTS_DIRNAME


__all__ = [
    "APP_NAME",
    "PROJECTS_DIRNAME",
    "BROWSE_LIMIT",
    "LAUNCH_COMMAND",
    "DANGEROUS_FLAG",
    "LOG_FILE_ENV",
    "default_projects_root",
]
