from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .scanner import Entry

BROWSE_MODE = "browse"
FILTER_MODE = "filter"


def filter_entries(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Return entries whose name contains ``query`` ignoring case, in order."""
    needle = query.lower()
    return [entry for entry in entries if needle in entry.name.lower()]


@dataclass
class SessionState:
    all_entries: tuple[Entry, ...]
    mode: str = BROWSE_MODE
    filter_text: str = ""
    filtered_entries: list[Entry] = field(init=False)
    cursor: int = 0
    dangerous: bool = False

    def __post_init__(self) -> None:
        self.filtered_entries = filter_entries(self.all_entries, self.filter_text)

    @property
    def filtering(self) -> bool:
        return self.mode == FILTER_MODE
