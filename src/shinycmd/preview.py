"""Preview and batch helpers built on the layout engine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rich.color import ColorSystem

from shinycmd.config import LayoutConfig
from shinycmd.heuristics import should_prettify
from shinycmd.highlight import AUTO
from shinycmd.layout import prettify


@dataclass(frozen=True)
class CommandPreview:
    original: str
    pretty: str | None
    should_prettify: bool


def preview(
    command: str,
    config: LayoutConfig | None = None,
    *,
    show_pretty: bool = False,
    color_system: ColorSystem | str | None = AUTO,
) -> CommandPreview:
    """Return the original command, the prettify decision, and the pretty form.

    ``pretty`` is only filled in when ``show_pretty`` is set and the command
    should be prettified. The decision uses ``max_width`` as its threshold.
    """
    config = config or LayoutConfig()
    decision = should_prettify(command, config.max_width)
    pretty = None
    if show_pretty and decision:
        pretty = prettify(command, config, color_system=color_system)
    return CommandPreview(original=command, pretty=pretty, should_prettify=decision)


def prettify_batch(
    commands: Iterable[str],
    config: LayoutConfig | None = None,
    *,
    color_system: ColorSystem | str | None = AUTO,
) -> list[str]:
    """Prettify each command with one shared config, preserving order."""
    return [prettify(cmd, config, color_system=color_system) for cmd in commands]
