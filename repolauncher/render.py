"""Menu rendering for browse and filter modes.

Rendering is presentation-only: ``render_screen`` reads a ``SessionState``
and returns the full frame as text, never mutating the state it is given.
"""

from __future__ import annotations

import re

from .ansi import center_text, display_width
from .config import BROWSE_LIMIT
from .selector import browse_count
from .state import SessionState
from .terminal import CLEAR_SCREEN
from .ui_theme import UITheme

BROWSE_TITLE = "Project Launcher"
FILTER_TITLE = "🔍 Search Projects"
BROWSE_HELP_LINES: tuple[str, ...] = (
    "[1-9] or [↑↓] navigate  •  [enter] select  •  [/] search",
)
FILTER_HELP_LINES: tuple[str, ...] = (
    "[↑↓] navigate  •  [enter] select  •  [esc] back  •  [backspace] delete",
)
LINE_BREAK = "\r\n"

_KEY_LABEL_RE = re.compile(r"\[[^\]]+\]")


def frame_width(help_lines: tuple[str, ...]) -> int:
    """Return framing width: the display width of the longest help line."""
    return max(display_width(line) for line in help_lines)


def style_keys(text: str, theme: UITheme) -> str:
    """Highlight every ``[key]`` label in a help line."""
    return _KEY_LABEL_RE.sub(lambda match: f"{theme.key}{match.group(0)}{theme.reset}", text)


def _header_lines(title: str, width: int, theme: UITheme) -> list[str]:
    border = "═" * width
    return [
        f"{theme.border}╭{border}╮{theme.reset}",
        f"{theme.border}│{theme.reset}{theme.title}{center_text(title, width)}{theme.reset}{theme.border}│{theme.reset}",
        f"{theme.border}╰{border}╯{theme.reset}",
        "",
    ]


def _rule_lines(width: int, theme: UITheme) -> list[str]:
    return ["", f"{theme.border}{'─' * width}{theme.reset}", ""]


def _selected_row(label: str, theme: UITheme) -> str:
    return f" {theme.selected_marker}{theme.selected} {label} {theme.reset}"


def render_browse_lines(state: SessionState, theme: UITheme) -> list[str]:
    """Build the numbered recent-projects view."""
    width = frame_width(BROWSE_HELP_LINES)
    lines = _header_lines(BROWSE_TITLE, width, theme)

    for idx, entry in enumerate(state.all_entries[: browse_count(state)]):
        number = idx + 1
        if idx == state.cursor:
            lines.append(_selected_row(f"{number}  {entry.name}", theme))
        else:
            lines.append(f"  {theme.number}{number}{theme.reset}  {theme.project}{entry.name}{theme.reset}")

    hidden = len(state.all_entries) - BROWSE_LIMIT
    if hidden > 0:
        lines.append("")
        lines.append(
            f"{theme.dim}  ... and {hidden} more (use {theme.reset}{style_keys('[/]', theme)}"
            f"{theme.dim} to search){theme.reset}"
        )

    lines.extend(_rule_lines(width, theme))
    lines.extend(f"  {style_keys(line, theme)}" for line in BROWSE_HELP_LINES)
    if state.dangerous:
        status = f"{theme.dangerous}ON{theme.reset}"
    else:
        status = f"{theme.dim}off{theme.reset}"
    lines.append(f"  {style_keys('[d]', theme)} dangerous {status}  •  {style_keys('[q]', theme)} quit")
    lines.append("")
    return lines


def render_filter_lines(state: SessionState, theme: UITheme) -> list[str]:
    """Build the search prompt and its uncapped match list."""
    width = frame_width(FILTER_HELP_LINES)
    lines = _header_lines(FILTER_TITLE, width, theme)
    lines.append(f"Search: {theme.selected} {state.filter_text}█ {theme.reset}")
    lines.append("")

    if not state.filtered_entries:
        if state.filter_text:
            lines.append(f"{theme.dim}  No projects found matching \"{state.filter_text}\"{theme.reset}")
        else:
            lines.append(f"{theme.dim}  Start typing to search projects...{theme.reset}")
    else:
        for idx, entry in enumerate(state.filtered_entries):
            if idx == state.cursor:
                lines.append(_selected_row(f"● {entry.name}", theme))
            else:
                lines.append(f"  {theme.project}○ {entry.name}{theme.reset}")

    lines.extend(_rule_lines(width, theme))
    lines.extend(f"  {style_keys(line, theme)}" for line in FILTER_HELP_LINES)
    lines.append("")
    return lines


def render_screen(state: SessionState, theme: UITheme) -> str:
    """Return one full frame, starting from a cleared screen."""
    if state.filtering:
        lines = render_filter_lines(state, theme)
    else:
        lines = render_browse_lines(state, theme)
    return CLEAR_SCREEN + LINE_BREAK.join(lines) + LINE_BREAK


__all__ = [
    "BROWSE_TITLE",
    "FILTER_TITLE",
    "BROWSE_HELP_LINES",
    "FILTER_HELP_LINES",
    "frame_width",
    "style_keys",
    "render_browse_lines",
    "render_filter_lines",
    "render_screen",
]
