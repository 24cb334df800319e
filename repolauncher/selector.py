"""Key handling for the browse and filter modes of the project menu.

Every function here mutates one ``SessionState`` in place and reports what
the caller should do next through a ``KeyOutcome``. Nothing touches the
terminal, so the whole state machine is testable without a tty.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import BROWSE_LIMIT
from .scanner import Entry
from .state import BROWSE_MODE, FILTER_MODE, SessionState, filter_entries


@dataclass(frozen=True)
class KeyOutcome:
    """Result of one key press: keep going, quit, or launch ``selected``."""

    quit: bool = False
    selected: Entry | None = None


CONTINUE = KeyOutcome()
QUIT = KeyOutcome(quit=True)


def browse_count(state: SessionState) -> int:
    """Return how many entries browse mode shows and numbers."""
    return min(BROWSE_LIMIT, len(state.all_entries))


def clamp_cursor(cursor: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(cursor, count - 1))


def apply_filter(state: SessionState, text: str) -> None:
    """Replace the filter text, recompute matches, and clamp the cursor."""
    state.filter_text = text
    state.filtered_entries = filter_entries(state.all_entries, text)
    state.cursor = clamp_cursor(state.cursor, len(state.filtered_entries))


def open_filter(state: SessionState) -> None:
    state.mode = FILTER_MODE
    apply_filter(state, "")


def close_filter(state: SessionState) -> None:
    state.mode = BROWSE_MODE
    apply_filter(state, "")
    state.cursor = clamp_cursor(state.cursor, browse_count(state))


def move_cursor(state: SessionState, delta: int) -> bool:
    """Move the cursor within the visible list; return whether it moved."""
    if state.filtering:
        limit = len(state.filtered_entries)
    else:
        limit = browse_count(state)
    target = clamp_cursor(state.cursor + delta, limit)
    if target == state.cursor:
        return False
    state.cursor = target
    return True


def toggle_dangerous(state: SessionState) -> None:
    state.dangerous = not state.dangerous


def handle_browse_key(state: SessionState, key: str) -> KeyOutcome:
    """Handle one key while the numbered recent-projects list is shown."""
    if key == "UP":
        move_cursor(state, -1)
        return CONTINUE
    if key == "DOWN":
        move_cursor(state, 1)
        return CONTINUE
    if key == "ENTER":
        if not state.all_entries:
            return CONTINUE
        return KeyOutcome(selected=state.all_entries[state.cursor])
    if key == "/":
        open_filter(state)
        return CONTINUE
    if key == "d":
        toggle_dangerous(state)
        return CONTINUE
    if key in {"q", "CTRL_C"}:
        return QUIT
    if len(key) == 1 and "1" <= key <= "9":
        index = int(key) - 1
        if index < browse_count(state):
            state.cursor = index
            return KeyOutcome(selected=state.all_entries[index])
    return CONTINUE


def handle_filter_key(state: SessionState, key: str) -> KeyOutcome:
    """Handle one key while the search prompt is active."""
    if key == "CTRL_C":
        return QUIT
    if key == "ESC":
        close_filter(state)
        return CONTINUE
    if key == "UP":
        move_cursor(state, -1)
        return CONTINUE
    if key == "DOWN":
        move_cursor(state, 1)
        return CONTINUE
    if key == "ENTER":
        if not state.filtered_entries:
            return CONTINUE
        return KeyOutcome(selected=state.filtered_entries[state.cursor])
    if key == "BACKSPACE":
        if state.filter_text:
            apply_filter(state, state.filter_text[:-1])
        return CONTINUE
    if len(key) == 1 and " " <= key <= "~":
        apply_filter(state, state.filter_text + key)
    return CONTINUE


def handle_key(state: SessionState, key: str) -> KeyOutcome:
    """Dispatch ``key`` to the handler for the current mode."""
    if state.filtering:
        return handle_filter_key(state, key)
    return handle_browse_key(state, key)


__all__ = [
    "KeyOutcome",
    "CONTINUE",
    "QUIT",
    "filter_entries",
    "browse_count",
    "clamp_cursor",
    "apply_filter",
    "open_filter",
    "close_filter",
    "move_cursor",
    "toggle_dangerous",
    "handle_browse_key",
    "handle_filter_key",
    "handle_key",
]
