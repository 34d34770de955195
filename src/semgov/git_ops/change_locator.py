"""Detect which plugins a comparison scope touches."""

import logging
from pathlib import Path
from typing import Iterable

from semgov.config.models import GovernanceConfig

from .runner import GitCommandError, fetch_base, run_git, split_paths
from .scope import ComparisonScope

logger = logging.getLogger(__name__)


def extract_plugins(paths: Iterable[str], plugins_root: str = "plugins") -> set[str]:
    """Map changed file paths to the plugin identifiers they belong to.

    A path belongs to a plugin when its first segment is ``plugins_root`` and
    at least one segment follows it.
    """
    plugins = set()
    for path in paths:
        parts = path.split("/")
        if len(parts) >= 2 and parts[0] == plugins_root and parts[1]:
            plugins.add(parts[1])
    return plugins


class ChangeLocator:
    """List plugins with changes in a comparison scope."""

    def __init__(self, repo_root: Path, config: GovernanceConfig | None = None) -> None:
        self.repo_root = Path(repo_root)
        self.config = config or GovernanceConfig()

    def changed_files(self, scope: ComparisonScope) -> list[str]:
        """Changed paths in scope, committed range first, without duplicates.

        Paths are read NUL-separated so git leaves non-ASCII names unquoted.

        Raises:
            GitCommandError: If any git query fails.
        """
        fetch_base(self.repo_root, self.config.git)

        revision_range = f"{self.config.git.base_ref}...{scope.branch_ref}"
        files = split_paths(
            run_git(self.repo_root, "diff", "--name-only", "-z", revision_range)
        )
        if scope.include_staged:
            files += split_paths(
                run_git(self.repo_root, "diff", "--name-only", "-z", "--cached")
            )
        return list(dict.fromkeys(files))

    def list_changed_plugins(self, scope: ComparisonScope) -> set[str]:
        """Return the set of plugin identifiers touched in ``scope``.

        VCS failures (unreachable remote, unknown ref) yield an empty set.
        """
        try:
            files = self.changed_files(scope)
        except GitCommandError as e:
            logger.warning(f"Could not determine changed files: {e}")
            return set()
        plugins = extract_plugins(files, self.config.plugins_root)
        logger.info(f"{len(plugins)} changed plugin(s) in scope")
        return plugins
