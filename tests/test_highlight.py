"""Tests for syntax highlighting."""
import pytest
from rich.color import ColorSystem
from rich.console import Console
from shinycmd.classifier import ClassifiedPart, PartKind
from shinycmd.highlight import (
    AUTO,
    COMMAND_STYLE,
    FLAG_STYLE,
    KEY_VALUE_STYLE,
    OPERATOR_STYLE,
    PATH_STYLE,
    detect_color_system,
    highlight,
    resolve_color_system,
    style_for,
)


def arg(value: str, **kwargs) -> ClassifiedPart:
    return ClassifiedPart(kind=PartKind.ARGUMENT, value=value, **kwargs)


class TestStyleFor:
    def test_command(self):
        assert style_for(ClassifiedPart(kind=PartKind.COMMAND, value="npm")) == COMMAND_STYLE

    def test_operator(self):
        assert style_for(ClassifiedPart(kind=PartKind.OPERATOR, value="&&")) == OPERATOR_STYLE

    def test_flags(self):
        assert style_for(arg("--verbose", is_long_option=True)) == FLAG_STYLE
        assert style_for(arg("-v", is_short_option=True)) == FLAG_STYLE

    @pytest.mark.parametrize("value", ["./src/index.js", "C:\\temp", "/etc/hosts"])
    def test_paths(self, value: str):
        assert style_for(arg(value)) == PATH_STYLE

    def test_key_value(self):
        assert style_for(arg("NODE_ENV=production")) == KEY_VALUE_STYLE

    def test_path_checked_before_key_value(self):
        assert style_for(arg("out=/tmp/x")) == PATH_STYLE

    def test_url_with_slashes_counts_as_path(self):
        assert style_for(arg("https://api.example.com/endpoint")) == PATH_STYLE

    def test_plain_argument(self):
        assert style_for(arg("build")) is None


class TestHighlight:
    def test_no_color_system_returns_value(self):
        part = ClassifiedPart(kind=PartKind.COMMAND, value="npm")
        assert highlight(part, None) == "npm"

    def test_command_ansi(self):
        part = ClassifiedPart(kind=PartKind.COMMAND, value="npm")
        assert highlight(part, ColorSystem.STANDARD) == "\x1b[1;36mnpm\x1b[0m"

    def test_plain_argument_never_styled(self):
        assert highlight(arg("build"), ColorSystem.TRUECOLOR) == "build"

    def test_flag_styled(self):
        rendered = highlight(arg("--coverage", is_long_option=True), ColorSystem.STANDARD)
        assert rendered.startswith("\x1b[")
        assert "--coverage" in rendered


class TestColorCapability:
    def test_explicit_value_passes_through(self):
        assert resolve_color_system(None) is None
        assert resolve_color_system(ColorSystem.EIGHT_BIT) is ColorSystem.EIGHT_BIT

    def test_no_color_env_disables(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("NO_COLOR", "1")
        assert detect_color_system() is None
        assert resolve_color_system(AUTO) is None

    def test_forced_terminal_has_colors(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("TERM", "xterm-256color")
        assert detect_color_system() is not None

    def test_reads_given_console(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        console = Console(force_terminal=True, color_system="truecolor")
        assert detect_color_system(console) is ColorSystem.TRUECOLOR

    def test_given_console_without_colors(self):
        assert detect_color_system(Console(color_system=None)) is None
        assert detect_color_system(Console(force_terminal=True, no_color=True)) is None
