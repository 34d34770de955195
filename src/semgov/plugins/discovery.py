"""Locate manifest files in a plugin repository."""

import logging
from pathlib import Path

from semgov.config.models import GovernanceConfig

logger = logging.getLogger(__name__)


def _find_plugin_manifests(directory: Path, config: GovernanceConfig) -> list[Path]:
    """Walk ``directory``; a folder holding a manifest is a plugin, others are searched."""
    manifests = []
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return manifests

    for entry in entries:
        if not entry.is_dir():
            continue
        candidate = entry / config.manifest_dir / config.manifest_file
        if candidate.is_file():
            manifests.append(candidate)
        else:
            manifests.extend(_find_plugin_manifests(entry, config))
    return manifests


def discover_manifests(
    repo_root: Path, config: GovernanceConfig | None = None
) -> dict[str, list[Path]]:
    """Find the marketplace manifest and every plugin manifest.

    Returns:
        Dict with ``"marketplace"`` (zero or one path) and ``"plugins"`` lists.
    """
    config = config or GovernanceConfig()
    repo_root = Path(repo_root)

    marketplace = repo_root / config.marketplace_manifest
    return {
        "marketplace": [marketplace] if marketplace.is_file() else [],
        "plugins": _find_plugin_manifests(repo_root / config.plugins_root, config),
    }
