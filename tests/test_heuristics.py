"""Tests for the should_prettify heuristic."""
import pytest
from shinycmd.heuristics import should_prettify


class TestShouldPrettify:
    def test_short_simple_command(self):
        assert should_prettify("ls -la") is False

    def test_operator_triggers(self):
        assert should_prettify("npm run build && npm run test") is True

    @pytest.mark.parametrize("cmd", [
        "a && b",
        "a || b",
        "a; b",
        "cat f | wc -l",
    ])
    def test_each_operator_marker(self, cmd: str):
        assert should_prettify(cmd)

    def test_length_over_threshold(self):
        assert should_prettify("x" * 81)
        assert not should_prettify("x" * 80)

    def test_custom_threshold(self):
        assert should_prettify("echo hello world", threshold=10)
        assert not should_prettify("echo hello world", threshold=16)

    def test_more_than_three_long_options(self):
        assert should_prettify("cmd --a --b --c --d") is True

    def test_exactly_three_long_options(self):
        assert should_prettify("cmd --a --b --c") is False

    def test_quoted_long_options_still_counted(self):
        # Syntax-unaware on purpose: text inside quotes counts too
        assert should_prettify('echo "--a --b --c --d"') is True

    def test_quoted_operator_still_counted(self):
        assert should_prettify('echo "a && b"') is True

    def test_bare_double_dash_not_counted(self):
        assert should_prettify("cmd -- -- -- --") is False

    def test_non_ascii_long_options_not_counted(self):
        assert should_prettify("cmd --é --ü --ö --ß") is False

    def test_ascii_long_options_with_accented_suffix_counted(self):
        assert should_prettify("cmd --aé --bü --cö --dß") is True
