"""YAML configuration file loading with Pydantic validation."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from semgov.errors import SemgovError

from .models import GovernanceConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "semgov.yaml"


class ConfigError(SemgovError):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Expected a mapping at the top of {path}")
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: Path) -> GovernanceConfig:
    """Load and validate a governance config file.

    Raises:
        ConfigError: If validation fails.
    """
    data = load_yaml(path)
    try:
        return GovernanceConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def resolve_config(repo_root: Path, config_path: Path | None = None) -> GovernanceConfig:
    """Find the configuration for a repository.

    An explicit path wins; otherwise ``semgov.yaml`` in the repository root is
    used when present, and the defaults when it is not.
    """
    if config_path is not None:
        return load_config(config_path)

    candidate = repo_root / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        logger.info(f"Using configuration from {candidate}")
        return load_config(candidate)
    return GovernanceConfig()
