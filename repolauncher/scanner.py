"""Project directory scanning.

Lists the immediate subdirectories of the projects root once at startup and
orders them so the most recently modified project comes first.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One selectable project directory plus its cached modification time."""

    name: str
    path: Path
    modified_at: float


class DirectoryUnreadable(Exception):
    """Raised when the projects root cannot be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"{root}: {reason}")
        self.root = root
        self.reason = reason


def scan_projects(root: Path) -> tuple[Entry, ...]:
    """Return visible subdirectories of ``root`` sorted newest first.

    Dot-prefixed names and non-directories are skipped, and symlinks are not
    followed. Children whose stat fails between listing and stat are dropped
    rather than failing the whole scan.
    """
    try:
        resolved_root = root.resolve()
    except OSError:
        resolved_root = root

    entries: list[Entry] = []
    try:
        with os.scandir(resolved_root) as children:
            for child in children:
                if child.name.startswith("."):
                    continue
                try:
                    if not child.is_dir(follow_symlinks=False):
                        continue
                    stat = child.stat(follow_symlinks=False)
                except OSError:
                    continue
                entries.append(
                    Entry(
                        name=child.name,
                        path=resolved_root / child.name,
                        modified_at=float(stat.st_mtime),
                    )
                )
    except OSError as exc:
        raise DirectoryUnreadable(root, exc.strerror or str(exc)) from exc

    entries.sort(key=lambda entry: entry.name)
    entries.sort(key=lambda entry: entry.modified_at, reverse=True)
    logger.debug("scanned %d project directories under %s", len(entries), resolved_root)
    return tuple(entries)


__all__ = ["Entry", "DirectoryUnreadable", "scan_projects"]
