"""Tests for command collection loading."""
from pathlib import Path

import pytest

from shinycmd.commands import load_commands, load_samples


class TestLoadCommands:
    def test_text_file(self, tmp_path: Path):
        path = tmp_path / "commands.txt"
        path.write_text("# build steps\nnpm install\n\n  npm run build && npm test  \n")
        assert load_commands(path) == ["npm install", "npm run build && npm test"]

    def test_yaml_mapping(self, tmp_path: Path):
        path = tmp_path / "commands.yaml"
        path.write_text("commands:\n  - ls -la\n  - 'git add . && git push'\n")
        assert load_commands(path) == ["ls -la", "git add . && git push"]

    def test_yaml_bare_list(self, tmp_path: Path):
        path = tmp_path / "commands.yml"
        path.write_text("- echo one\n- 42\n- ''\n- echo two\n")
        assert load_commands(path) == ["echo one", "echo two"]

    def test_yaml_without_commands(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("other: value\n")
        assert load_commands(path) == []

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("commands: [unclosed\n")
        with pytest.raises(ValueError):
            load_commands(path)


class TestLoadSamples:
    def test_packaged_samples(self):
        samples = load_samples()
        assert "ls -la" in samples["analysis"]
        assert len(samples["batch"]) == 3
        assert samples["flags"].startswith("docker run -d")

    def test_folded_commands_are_single_line(self):
        samples = load_samples()
        for cmd in samples["analysis"] + samples["batch"]:
            assert "\n" not in cmd

    def test_missing_file(self, tmp_path: Path):
        assert load_samples(tmp_path / "nope.yaml") == {}

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("analysis: [unclosed\n")
        assert load_samples(path) == {}
