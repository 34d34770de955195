"""Tests for semgov configuration loading."""

from pathlib import Path

import pytest

from semgov.config.loader import ConfigError, load_config, load_yaml, resolve_config
from semgov.config.models import GovernanceConfig


@pytest.fixture
def tmp_yaml(tmp_path):
    """Create a temporary YAML file."""

    def _create(content: str, filename: str = "semgov.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _create


class TestLoadYaml:
    def test_valid_yaml(self, tmp_yaml):
        data = load_yaml(tmp_yaml("plugins_root: extensions"))
        assert data["plugins_root"] == "extensions"

    def test_empty_yaml(self, tmp_yaml):
        assert load_yaml(tmp_yaml("")) == {}

    def test_file_not_found(self):
        with pytest.raises(ConfigError, match="not found"):
            load_yaml(Path("/nonexistent/semgov.yaml"))

    def test_invalid_yaml(self, tmp_yaml):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_yaml(tmp_yaml("invalid: [yaml: {broken"))

    def test_non_mapping(self, tmp_yaml):
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml(tmp_yaml("- a\n- b\n"))


class TestLoadConfig:
    def test_nested_sections(self, tmp_yaml):
        path = tmp_yaml(
            """
plugins_root: extensions
git:
  remote: upstream
  base_branch: develop
oracle:
  model: sonnet
  timeout: 30
"""
        )
        config = load_config(path)
        assert config.plugins_root == "extensions"
        assert config.git.base_ref == "upstream/develop"
        assert config.oracle.model == "sonnet"
        assert config.oracle.command == "claude"
        assert config.oracle.timeout == 30

    def test_validation_error(self, tmp_yaml):
        with pytest.raises(ConfigError, match="validation failed"):
            load_config(tmp_yaml("oracle:\n  timeout: -5\n"))


class TestResolveConfig:
    def test_defaults_without_file(self, tmp_path):
        config = resolve_config(tmp_path)
        assert config == GovernanceConfig()
        assert config.manifest_relpath("foo") == "plugins/foo/.claude-plugin/plugin.json"

    def test_repo_file_is_used(self, tmp_path, tmp_yaml):
        tmp_yaml("manifest_file: manifest.json\n")
        config = resolve_config(tmp_path)
        assert config.manifest_relpath("foo") == "plugins/foo/.claude-plugin/manifest.json"

    def test_explicit_path_wins(self, tmp_path, tmp_yaml):
        tmp_yaml("plugins_root: ignored\n")
        explicit = tmp_yaml("plugins_root: chosen\n", filename="other.yaml")
        assert resolve_config(tmp_path, explicit).plugins_root == "chosen"
