"""Tests for the validate command and global CLI options."""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from semgov import __version__
from semgov.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def repo(tmp_path, write_manifest):
    marketplace = tmp_path / ".claude-plugin" / "marketplace.json"
    marketplace.parent.mkdir()
    marketplace.write_text(json.dumps({"name": "market", "plugins": []}))
    write_manifest("bar", {"name": "bar", "version": "0.1.0"})
    write_manifest("foo", {"name": "foo", "version": "0.1.0"})
    return tmp_path


class TestValidate:
    def test_local_only_passes(self, runner, repo):
        result = runner.invoke(cli, ["--repo", str(repo), "validate", "--local-only"])
        assert result.exit_code == 0, result.output
        assert "Passed: 3" in result.output
        assert "Failed: 0" in result.output

    def test_local_failure(self, runner, repo, write_manifest):
        write_manifest("foo", {"name": "foo", "version": "one"})
        result = runner.invoke(cli, ["--repo", str(repo), "validate", "--local-only"])
        assert result.exit_code == 1
        assert "Invalid version" in result.output
        assert "Failed: 1" in result.output

    @patch("semgov.plugins.validator.subprocess.run")
    def test_external_validator_called_per_manifest(self, mock_run, runner, repo):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        result = runner.invoke(cli, ["--repo", str(repo), "validate"])
        assert result.exit_code == 0
        validated = [call.args[0][-1] for call in mock_run.call_args_list]
        assert validated == [
            str(repo / ".claude-plugin" / "marketplace.json"),
            str(repo / "plugins" / "bar" / ".claude-plugin" / "plugin.json"),
            str(repo / "plugins" / "foo" / ".claude-plugin" / "plugin.json"),
        ]

    def test_missing_marketplace_is_reported(self, runner, tmp_path, write_manifest):
        write_manifest("bar", {"name": "bar", "version": "0.1.0"})
        result = runner.invoke(cli, ["--repo", str(tmp_path), "validate", "--local-only"])
        assert result.exit_code == 0
        assert "No marketplace manifest" in result.output


class TestGlobalOptions:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_config_exits_one(self, runner, tmp_path):
        config = tmp_path / "semgov.yaml"
        config.write_text("git: [not, a, mapping]\n")
        result = runner.invoke(cli, ["--repo", str(tmp_path), "changed"])
        assert result.exit_code == 1
        assert "validation failed" in result.output

    def test_config_changes_manifest_layout(self, runner, tmp_path):
        (tmp_path / "semgov.yaml").write_text("plugins_root: ext\n")
        path = tmp_path / "ext" / "bar" / ".claude-plugin" / "plugin.json"
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"name": "bar", "version": "0.1.0"}))
        result = runner.invoke(cli, ["--repo", str(tmp_path), "validate", "--local-only"])
        assert result.exit_code == 0
        assert "ext/bar/.claude-plugin/plugin.json" in result.output
