"""Pydantic models for semgov configuration."""

from pydantic import BaseModel, Field


class GitConfig(BaseModel):
    """Comparison base used for committed-range diffs."""

    remote: str = "origin"
    base_branch: str = "main"

    @property
    def base_ref(self) -> str:
        return f"{self.remote}/{self.base_branch}"


class OracleConfig(BaseModel):
    """Classification oracle invocation settings."""

    command: str = "claude"
    model: str = "haiku"
    timeout: float | None = Field(default=None, gt=0)  # None = no limit


class ValidatorConfig(BaseModel):
    """External manifest schema validator settings."""

    command: str = "claude"


class GovernanceConfig(BaseModel):
    """Top-level configuration for a plugin repository."""

    plugins_root: str = "plugins"
    manifest_dir: str = ".claude-plugin"
    manifest_file: str = "plugin.json"
    marketplace_manifest: str = ".claude-plugin/marketplace.json"
    git: GitConfig = Field(default_factory=GitConfig)
    oracle: OracleConfig = Field(default_factory=OracleConfig)
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)

    def manifest_relpath(self, plugin: str) -> str:
        """Manifest path for a plugin, relative to the repository root."""
        return f"{self.plugins_root}/{plugin}/{self.manifest_dir}/{self.manifest_file}"
