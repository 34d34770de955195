"""Per-plugin unified diffs for a comparison scope."""

import logging
from pathlib import Path

from semgov.config.models import GovernanceConfig

from .runner import GitCommandError, fetch_base, run_git
from .scope import ComparisonScope

logger = logging.getLogger(__name__)


class DiffSource:
    """Produce the diff of a single plugin's subtree.

    An empty string means the plugin has nothing to classify. Git failures
    are logged and reported the same way, never raised.
    """

    def __init__(self, repo_root: Path, config: GovernanceConfig | None = None) -> None:
        self.repo_root = Path(repo_root)
        self.config = config or GovernanceConfig()

    def plugin_path(self, plugin: str) -> str:
        return f"{self.config.plugins_root}/{plugin}"

    def get_diff(self, plugin: str, scope: ComparisonScope, refresh: bool = True) -> str:
        """Return the unified diff for ``plugin`` within ``scope``.

        Args:
            plugin: Plugin identifier (directory name under the plugins root).
            scope: Committed range and optional staged changes to include.
            refresh: Fetch the comparison base first. Callers that have just
                fetched it skip the second round trip.

        Returns:
            The committed-range diff, the staged diff, or both joined by a
            newline when both are non-empty. Empty when nothing changed.
        """
        if refresh:
            self.refresh_base()

        path = self.plugin_path(plugin)
        try:
            committed = self._committed_diff(path, scope.branch_ref)
            staged = ""
            if scope.include_staged:
                staged = run_git(self.repo_root, "diff", "--cached", "--", path)
        except GitCommandError as e:
            logger.warning(f"Could not diff plugin '{plugin}': {e}")
            return ""

        if committed and staged:
            return committed + "\n" + staged
        return committed or staged

    def refresh_base(self) -> None:
        """Fetch the comparison base; a failure leaves the existing tracking ref."""
        try:
            fetch_base(self.repo_root, self.config.git)
        except GitCommandError as e:
            logger.warning(f"Could not refresh {self.config.git.base_ref}: {e}")

    def _committed_diff(self, path: str, branch_ref: str) -> str:
        revision_range = f"{self.config.git.base_ref}...{branch_ref}"
        return run_git(self.repo_root, "diff", revision_range, "--", path)
