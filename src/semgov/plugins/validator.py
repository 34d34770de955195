"""Manifest validation: local structure checks plus the external schema validator."""

import json
import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from semgov.config.models import ValidatorConfig
from semgov.utils.versioning import SemanticVersion

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of validating one manifest file."""

    path: Path
    errors: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors


class ManifestValidator:
    """Validate plugin and marketplace manifests."""

    def __init__(self, config: ValidatorConfig | None = None, local_only: bool = False) -> None:
        self.config = config or ValidatorConfig()
        self.local_only = local_only

    def validate_manifest(self, manifest_data: Dict) -> Tuple[bool, List[str]]:
        """Validate a plugin manifest has the fields semgov relies on.

        Returns:
            Tuple of (is_valid, list_of_errors).
        """
        errors = []
        for name in ("name", "version"):
            if not manifest_data.get(name):
                errors.append(f"Missing required field: {name}")

        version = manifest_data.get("version")
        if version:
            try:
                SemanticVersion.parse(version)
            except ValueError:
                errors.append(f"Invalid version: {version!r}. Expected MAJOR.MINOR.PATCH")

        description = manifest_data.get("description")
        if description is not None and not isinstance(description, str):
            errors.append("Field 'description' must be a string")

        author = manifest_data.get("author")
        if author is not None and not (isinstance(author, dict) and author.get("name")):
            errors.append("Field 'author' must be an object with a 'name'")

        return len(errors) == 0, errors

    def run_external(self, path: Path) -> Tuple[bool, str]:
        """Run ``<command> plugin validate <path>``.

        Returns:
            Tuple of (passed, combined_output).
        """
        cmd = [self.config.command, "plugin", "validate", str(path)]
        try:
            result = subprocess.run(
                cmd, capture_output=True, encoding="utf-8", errors="replace"
            )
        except FileNotFoundError:
            return False, f"Validator command not found: {self.config.command}"
        except OSError as e:
            return False, f"Could not run {self.config.command}: {e}"
        output = "\n".join(part.strip() for part in (result.stdout, result.stderr) if part.strip())
        return result.returncode == 0, output

    def validate_file(self, path: Path, plugin: bool = True) -> ValidationResult:
        """Validate one manifest file.

        Args:
            path: Manifest file to check.
            plugin: Apply plugin field checks; the marketplace manifest only has
                to be a JSON object before the external validator sees it.
        """
        result = ValidationResult(path=path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            result.errors.append(f"Could not read manifest: {e}")
            return result

        if not isinstance(data, dict):
            result.errors.append("Manifest is not a JSON object")
            return result

        if plugin:
            _, errors = self.validate_manifest(data)
            result.errors.extend(errors)

        if not self.local_only and result.passed:
            passed, output = self.run_external(path)
            if not passed:
                result.errors.append(output or "External validation failed")

        logger.info(f"Validated {path}: {'ok' if result.passed else 'failed'}")
        return result
