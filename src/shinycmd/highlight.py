"""Syntax highlighting for classified command parts, rendered with rich styles."""

from __future__ import annotations

import re

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from shinycmd.classifier import ClassifiedPart, PartKind

# Sentinel: read the terminal's color capability at call time
AUTO = "auto"

COMMAND_STYLE = Style.parse("bold cyan")
OPERATOR_STYLE = Style.parse("bold yellow")
FLAG_STYLE = Style.parse("green")
PATH_STYLE = Style.parse("blue")
KEY_VALUE_STYLE = Style.parse("magenta")
URL_STYLE = Style.parse("underline blue")

_URL_RE = re.compile(r"^https?://")


def detect_color_system(console: Console | None = None) -> ColorSystem | None:
    """Return the color system of a console, or None when colors are off.

    Defaults to a fresh console, which honors NO_COLOR, FORCE_COLOR, TERM and
    tty detection the way rich does.
    """
    console = console or Console()
    if console.no_color or console.color_system is None:
        return None
    return COLOR_SYSTEMS.get(console.color_system)


def resolve_color_system(color_system: ColorSystem | str | None) -> ColorSystem | None:
    if color_system == AUTO:
        return detect_color_system()
    return color_system


def style_for(part: ClassifiedPart) -> Style | None:
    """Pick the style for a part. Plain arguments get None.

    Argument checks run in priority order: path, then key=value, then URL.
    """
    if part.kind is PartKind.COMMAND:
        return COMMAND_STYLE
    if part.kind is PartKind.OPERATOR:
        return OPERATOR_STYLE
    if part.is_option:
        return FLAG_STYLE

    value = part.value
    if "/" in value or "\\" in value:
        return PATH_STYLE
    if "=" in value:
        return KEY_VALUE_STYLE
    if _URL_RE.match(value):
        return URL_STYLE
    return None


def highlight(part: ClassifiedPart, color_system: ColorSystem | None) -> str:
    """Wrap the part's value in ANSI codes, or return it unchanged without colors."""
    style = style_for(part)
    if style is None or color_system is None:
        return part.value
    return style.render(part.value, color_system=color_system)
