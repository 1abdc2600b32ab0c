"""Cheap, syntax-unaware check for whether a command deserves prettifying."""

from __future__ import annotations

import re

OPERATOR_MARKERS: tuple[str, ...] = ("&&", "||", ";", "|")
MAX_LONG_OPTIONS = 3

# Counted on the raw string, so "--x" inside quotes counts too
_LONG_OPTION_RE = re.compile(r"--\w+", re.ASCII)


def should_prettify(command: str, threshold: int = 80) -> bool:
    """Return True if the command is long, chained, or carries many long options.

    - longer than ``threshold`` characters
    - contains ``&&``, ``||``, ``;`` or ``|`` anywhere
    - more than three ``--word`` matches
    """
    return (
        len(command) > threshold
        or any(marker in command for marker in OPERATOR_MARKERS)
        or len(_LONG_OPTION_RE.findall(command)) > MAX_LONG_OPTIONS
    )
