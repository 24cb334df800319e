"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the launcher menu. The plain theme carries no
escape codes so the menu stays usable where color is unavailable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the menu renderer."""

    name: str
    reset: str
    title: str
    number: str
    project: str
    selected: str
    selected_marker: str
    key: str
    dim: str
    dangerous: str
    border: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[96m\033[1m",
    number="\033[95m\033[1m",
    project="\033[97m",
    selected="\033[45m\033[97m\033[1m",
    selected_marker=" ",
    key="\033[93m\033[1m",
    dim="\033[90m",
    dangerous="\033[91m\033[1m",
    border="\033[90m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    number="",
    project="",
    selected="",
    selected_marker=">",
    key="",
    dim="",
    dangerous="",
    border="",
)


def color_disabled(environ: Mapping[str, str]) -> bool:
    """Return whether the environment asks for monochrome output."""
    if environ.get("NO_COLOR"):
        return True
    return environ.get("TERM", "").strip().lower() == "dumb"


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return concrete theme for the requested color mode."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "color_disabled",
    "resolve_theme",
]
