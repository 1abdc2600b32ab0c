"""Command collections: batch input files and the packaged demo samples."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

SAMPLES_PATH = Path(__file__).parent / "samples.yaml"

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _string_items(items: object) -> list[str]:
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, str) and item.strip()]


def load_commands(path: Path) -> list[str]:
    """Load commands to format from a file.

    YAML files hold a ``commands:`` list or a bare list. Any other file is
    read as one command per line, skipping blanks and ``#`` comments.

    Raises ValueError if a YAML file cannot be parsed.
    """
    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
        if isinstance(data, dict):
            data = data.get("commands", [])
        return _string_items(data)

    commands = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            commands.append(stripped)
    return commands


def load_samples(path: Path | None = None) -> dict:
    """Load the demo sample commands, grouped by section."""
    samples_file = path or SAMPLES_PATH
    if not samples_file.exists():
        logger.warning("Samples file not found: %s", samples_file)
        return {}

    try:
        with open(samples_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.warning("Failed to parse samples YAML: %s", exc)
        return {}

    return data if isinstance(data, dict) else {}
