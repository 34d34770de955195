"""Shared fixtures for semgov tests."""

import json
from pathlib import Path

import pytest

from semgov.errors import OracleError


class FakeOracle:
    """Oracle returning canned answers and recording every prompt."""

    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.prompts = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if callable(self.response):
            return self.response(prompt)
        return self.response


@pytest.fixture
def fake_oracle():
    return FakeOracle


@pytest.fixture
def failing_oracle():
    return FakeOracle(error=OracleError("claude exited with code 1"))


@pytest.fixture
def write_manifest(tmp_path):
    """Write plugins/<name>/.claude-plugin/plugin.json under tmp_path."""

    def _write(plugin: str, data: dict, root: Path = tmp_path) -> Path:
        path = root / "plugins" / plugin / ".claude-plugin" / "plugin.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n")
        return path

    return _write


@pytest.fixture
def sample_manifest():
    return {
        "name": "bar",
        "description": "Example plugin",
        "version": "0.1.0",
        "author": {"name": "Plugin Author"},
    }
