"""Read and atomically rewrite plugin manifest files."""

import json
import logging
import tempfile
from pathlib import Path

from pydantic import ValidationError

from semgov.config.models import GovernanceConfig
from semgov.errors import ManifestMalformedError, ManifestNotFoundError

from .manifest import PluginManifest

logger = logging.getLogger(__name__)


def read_manifest(path: Path) -> PluginManifest:
    """Load and validate a manifest file.

    Raises:
        ManifestNotFoundError: If the file does not exist.
        ManifestMalformedError: If it is not a valid manifest record.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestNotFoundError(f"Manifest not found: {path}") from None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestMalformedError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestMalformedError(f"Manifest {path} is not a JSON object")

    try:
        return PluginManifest.from_dict(data)
    except ValidationError as e:
        raise ManifestMalformedError(f"Manifest validation failed for {path}: {e}") from e


def dump_manifest(manifest: PluginManifest) -> str:
    """Canonical file content: 2-space JSON with a trailing newline."""
    return json.dumps(manifest.to_dict(), indent=2, ensure_ascii=False) + "\n"


class ManifestStore:
    """Sole reader and writer of plugin manifest files."""

    def __init__(self, repo_root: Path, config: GovernanceConfig | None = None) -> None:
        self.repo_root = Path(repo_root)
        self.config = config or GovernanceConfig()

    def path_for(self, plugin: str) -> Path:
        return self.repo_root / self.config.manifest_relpath(plugin)

    def load(self, plugin: str) -> PluginManifest:
        """Load the manifest of ``plugin``."""
        return read_manifest(self.path_for(plugin))

    def save(self, plugin: str, manifest: PluginManifest) -> None:
        """Replace the manifest file of ``plugin`` with ``manifest``.

        The full record is written to a temporary file next to the target and
        renamed over it, so readers see either the old or the new file.
        """
        path = self.path_for(plugin)
        content = dump_manifest(manifest)

        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            Path(tmp_path).replace(path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise
        logger.info(f"Wrote {path}")
