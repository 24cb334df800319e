"""Runtime composition for the launcher.

Builds the initial session state, runs the key loop inside raw mode, and
hands the terminal to the selected project's command.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .input import read_key
from .render import render_screen
from .runner import build_launch_command, launch_in_directory
from .scanner import Entry
from .selector import handle_key
from .state import SessionState
from .terminal import TerminalController
from .ui_theme import UITheme, color_disabled, resolve_theme

logger = logging.getLogger(__name__)


def run_main_loop(
    state: SessionState,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
) -> Entry | None:
    """Render and dispatch keys until a selection or a quit action.

    Returns the selected entry, or ``None`` when the user quit or stdin hit
    end of input.
    """
    while True:
        terminal.write(render_screen(state, theme))
        key = read_key(stdin_fd)
        if not key:
            return None
        outcome = handle_key(state, key)
        if outcome.quit:
            return None
        if outcome.selected is not None:
            return outcome.selected


def run_selector(
    entries: Sequence[Entry],
    *,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
    terminal: TerminalController | None = None,
    theme: UITheme | None = None,
    launch: Callable[[Path, Sequence[str]], int] = launch_in_directory,
) -> int:
    """Run the interactive menu and return the process exit status.

    Raw mode is always restored before the screen is cleared, whether the
    user quit, interrupted, or picked a project. A pick runs the launch
    command and its status becomes the return value.
    """
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()
    if terminal is None:
        terminal = TerminalController(stdin_fd, stdout_fd)
    if theme is None:
        theme = resolve_theme(no_color=color_disabled(os.environ))

    state = SessionState(all_entries=tuple(entries))
    selected: Entry | None = None
    try:
        with terminal.raw_mode():
            selected = run_main_loop(state, terminal, stdin_fd, theme)
    except KeyboardInterrupt:
        selected = None
    terminal.clear_screen()

    if selected is None:
        logger.debug("quit without selection")
        return 0
    return launch(selected.path, build_launch_command(state.dangerous))


__all__ = ["run_main_loop", "run_selector"]
