"""Layout options, config file loading, defaults and validation."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = ".shinycmd"
CONFIG_FILE = "config.json"

DEFAULT_CONFIG: dict = {
    "version": 1,
    "max_width": 80,
    "indent": "  ",
    "flags_on_new_line": False,
    "disable_colors": False,
    "measure_visible_width": False,
    "threshold": 80,
}


@dataclass(frozen=True)
class LayoutConfig:
    """Immutable per-call layout options."""

    max_width: int = 80
    indent: str = "  "
    flags_on_new_line: bool = False
    disable_colors: bool = False
    # Count widths on unstyled text instead of the ANSI-rendered text
    measure_visible_width: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_width, bool) or not isinstance(self.max_width, int):
            raise ValueError(f"max_width must be an integer, got {self.max_width!r}")
        if self.max_width <= 0:
            raise ValueError(f"max_width must be positive, got {self.max_width}")
        if not isinstance(self.indent, str):
            raise ValueError(f"indent must be a string, got {self.indent!r}")

    @classmethod
    def from_dict(cls, config: dict) -> LayoutConfig:
        """Build layout options from a loaded config dict, ignoring unrelated keys."""
        return cls(
            max_width=config.get("max_width", DEFAULT_CONFIG["max_width"]),
            indent=config.get("indent", DEFAULT_CONFIG["indent"]),
            flags_on_new_line=bool(config.get("flags_on_new_line", False)),
            disable_colors=bool(config.get("disable_colors", False)),
            measure_visible_width=bool(config.get("measure_visible_width", False)),
        )

    def replace(self, **overrides) -> LayoutConfig:
        """Return a copy with the non-None overrides applied."""
        return dataclasses.replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        )


def get_config_path(start_dir: Path | None = None) -> Path:
    """Find .shinycmd/config.json by walking up from start_dir."""
    search = start_dir or Path.cwd()
    for d in [search, *search.parents]:
        candidate = d / CONFIG_DIR / CONFIG_FILE
        if candidate.exists():
            return candidate
    return search / CONFIG_DIR / CONFIG_FILE


def _read_config_file(path: Path) -> dict | None:
    """Read a JSON config object. None means the file is unreadable or not an object."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def load_config(start_dir: Path | None = None) -> dict:
    """Load config from .shinycmd/config.json, merged over the defaults."""
    config_path = get_config_path(start_dir)
    if not config_path.exists():
        return DEFAULT_CONFIG.copy()

    user_config = _read_config_file(config_path)
    if user_config is None:
        logger.warning(
            "Config file exists but could not be loaded (corrupt?): %s "
            "Using defaults.", config_path
        )
        return DEFAULT_CONFIG.copy()
    return {**DEFAULT_CONFIG, **user_config}


def save_config(config: dict, target_dir: Path | None = None) -> Path:
    """Save config to .shinycmd/config.json under target_dir."""
    config_path = (target_dir or Path.cwd()) / CONFIG_DIR / CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    return config_path


def validate_config(config: dict) -> list[str]:
    """Validate config, returning list of error messages (empty if valid)."""
    errors = []
    for key in ("max_width", "threshold"):
        value = config.get(key, DEFAULT_CONFIG[key])
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(f"'{key}' must be a positive integer, got {value!r}")
    if not isinstance(config.get("indent", ""), str):
        errors.append(f"'indent' must be a string, got {config['indent']!r}")
    for key in ("flags_on_new_line", "disable_colors", "measure_visible_width"):
        if not isinstance(config.get(key, False), bool):
            errors.append(f"'{key}' must be true or false, got {config[key]!r}")
    return errors
