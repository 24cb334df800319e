"""Terminal control helpers for the launcher menu.

Owns the raw-mode lifecycle and the few escape sequences the menu needs.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_raw_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Hide cursor while the menu owns the screen.
        os.write(self.stdout_fd, b"\x1b[?25l")

    def disable_raw_mode(self) -> None:
        os.write(self.stdout_fd, b"\x1b[?25h")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8"))

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_raw_mode()
            yield
        finally:
            self.disable_raw_mode()
