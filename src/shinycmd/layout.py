"""Layout engine - pure function, no side effects.

Breaks long commands after ``&&``/``||``/``|``/``;`` and wherever the next
argument would overflow ``max_width``, continuing wrapped lines with a
trailing backslash and an indent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.color import ColorSystem

from shinycmd.classifier import ClassifiedPart, PartKind, parse_command
from shinycmd.config import LayoutConfig
from shinycmd.highlight import AUTO, highlight, resolve_color_system
from shinycmd.tokenizer import TokenizeError

logger = logging.getLogger(__name__)

CONTINUATION = " \\"

# Operators that end the current line, keeping the operator on it
_LINE_ENDING_OPERATORS: frozenset[str] = frozenset({"&&", "||", "|"})


@dataclass(frozen=True)
class FormatResult:
    text: str
    original: str
    degraded: bool = False  # True when the command could not be parsed

    @property
    def changed(self) -> bool:
        return self.text != self.original


class _LineBuilder:
    """Accumulates rendered lines, tracking the width of the current one.

    Widths count the rendered text, ANSI codes included, unless
    ``measure_visible_width`` is set.
    """

    def __init__(self, config: LayoutConfig, color_system: ColorSystem | None) -> None:
        self.config = config
        self.color_system = color_system
        self.lines: list[str] = []
        self.text = ""
        self.width = 0

    def render(self, part: ClassifiedPart) -> str:
        if self.config.disable_colors:
            return part.value
        return highlight(part, self.color_system)

    def measure(self, part: ClassifiedPart, rendered: str) -> int:
        if self.config.measure_visible_width:
            return len(part.value)
        return len(rendered)

    def start(self, rendered: str, width: int) -> None:
        self.text = rendered
        self.width = width

    def append(self, rendered: str, width: int, sep: str = " ") -> None:
        self.text += sep + rendered
        self.width += len(sep) + width

    def emit(self, suffix: str = "") -> None:
        self.lines.append(self.text + suffix)
        self.text = ""
        self.width = 0

    def wrap(self, rendered: str, width: int) -> None:
        """End the current line with a continuation marker, start an indented one."""
        self.emit(CONTINUATION)
        indent = self.config.indent
        self.start(indent + rendered, len(indent) + width)

    def overflows(self, width: int) -> bool:
        return self.width + 1 + width > self.config.max_width


def _layout(parts: list[ClassifiedPart], builder: _LineBuilder) -> list[str]:
    config = builder.config
    i = 0
    while i < len(parts):
        part = parts[i]
        rendered = builder.render(part)
        width = builder.measure(part, rendered)

        if part.kind is PartKind.COMMAND and not builder.text:
            builder.start(rendered, width)

        elif part.kind is PartKind.COMMAND:
            # Head after a non-breaking operator such as "&": stays inline
            if builder.overflows(width):
                builder.wrap(rendered, width)
            else:
                builder.append(rendered, width)

        elif part.kind is PartKind.OPERATOR:
            if part.value in _LINE_ENDING_OPERATORS:
                builder.append(rendered, width)
                builder.emit()
            elif part.value == ";":
                builder.append(rendered, width, sep="")
                builder.emit()
            else:
                builder.append(rendered, width)

        else:
            if config.flags_on_new_line and part.is_option:
                if builder.text.strip():
                    builder.wrap(rendered, width)
                else:
                    builder.append(rendered, width)
            elif builder.text and builder.overflows(width):
                builder.wrap(rendered, width)
            else:
                builder.append(rendered, width)

            # Keep a long option's value from dangling: break before it instead
            if part.is_long_option and not config.flags_on_new_line and i + 1 < len(parts):
                nxt = parts[i + 1]
                if nxt.kind is PartKind.ARGUMENT and not nxt.is_option:
                    nxt_rendered = builder.render(nxt)
                    nxt_width = builder.measure(nxt, nxt_rendered)
                    if builder.overflows(nxt_width):
                        builder.wrap(nxt_rendered, nxt_width)
                        i += 1

        i += 1

    if builder.text:
        builder.emit()
    return builder.lines


def prettify_result(
    command: str,
    config: LayoutConfig | None = None,
    *,
    color_system: ColorSystem | str | None = AUTO,
) -> FormatResult:
    """Format a command and report whether formatting degraded.

    Commands no longer than ``max_width`` come back unchanged without being
    tokenized. Unparseable commands come back unchanged with ``degraded``
    set.
    """
    config = config or LayoutConfig()
    if len(command) <= config.max_width:
        return FormatResult(text=command, original=command)

    try:
        parts = parse_command(command)
        if not parts:
            return FormatResult(text=command, original=command)
        colors = None if config.disable_colors else resolve_color_system(color_system)
        lines = _layout(parts, _LineBuilder(config, colors))
    except TokenizeError as exc:
        logger.debug("Leaving command unformatted, tokenizer failed: %s", exc)
        return FormatResult(text=command, original=command, degraded=True)
    except Exception as exc:
        logger.debug("Leaving command unformatted, layout failed: %s", exc)
        return FormatResult(text=command, original=command, degraded=True)

    return FormatResult(text="\n".join(lines), original=command)


def prettify(
    command: str,
    config: LayoutConfig | None = None,
    *,
    color_system: ColorSystem | str | None = AUTO,
) -> str:
    """Format a command for display across multiple lines.

    Best effort: any failure returns the original command.

    Example::

        >>> print(prettify(
        ...     "npm run build && npm run test --coverage --verbose && npm run deploy --env=production",
        ...     LayoutConfig(max_width=30, disable_colors=True),
        ... ))
        npm run build &&
        npm run test --coverage \\
          --verbose &&
        npm run deploy \\
          --env=production
    """
    return prettify_result(command, config, color_system=color_system).text
