"""Shared state handed from the CLI group to its commands."""

from dataclasses import dataclass
from pathlib import Path

from semgov.config.models import GovernanceConfig


@dataclass
class GovernanceContext:
    """Repository root and configuration for one invocation."""

    repo_root: Path
    config: GovernanceConfig

    def diff_source(self):
        from semgov.git_ops import DiffSource

        return DiffSource(self.repo_root, self.config)

    def change_locator(self):
        from semgov.git_ops import ChangeLocator

        return ChangeLocator(self.repo_root, self.config)

    def classifier(self):
        from semgov.oracle import ClaudeCliOracle, VersionBumpClassifier

        return VersionBumpClassifier(ClaudeCliOracle(self.config.oracle))

    def manifest_store(self):
        from semgov.plugins.store import ManifestStore

        return ManifestStore(self.repo_root, self.config)

    def orchestrator(self):
        from semgov.governance import GovernanceOrchestrator

        return GovernanceOrchestrator(
            diff_source=self.diff_source(),
            locator=self.change_locator(),
            classifier=self.classifier(),
            store=self.manifest_store(),
        )
