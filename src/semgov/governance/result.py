"""Governance result dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from semgov.oracle.classifier import BumpVerdict


class BumpStatus(Enum):
    """What the apply pipeline did to a plugin."""

    NO_CHANGES = "no_changes"
    NOT_REQUIRED = "not_required"
    BUMPED = "bumped"


@dataclass
class BumpOutcome:
    """Result of the apply pipeline for one plugin."""

    plugin: str
    status: BumpStatus
    verdict: Optional[BumpVerdict] = None
    old_version: str = ""
    new_version: str = ""

    @property
    def bumped(self) -> bool:
        return self.status is BumpStatus.BUMPED


@dataclass
class CheckReport:
    """Aggregated result of the check pipeline.

    Results are keyed by plugin so the report reads the same whatever order
    the per-plugin checks finished in.
    """

    required: Dict[str, bool] = field(default_factory=dict)
    manifest_paths: Dict[str, str] = field(default_factory=dict)

    @property
    def checked(self) -> List[str]:
        return sorted(self.required)

    @property
    def non_compliant(self) -> List[str]:
        return sorted(plugin for plugin, needed in self.required.items() if needed)

    @property
    def passed(self) -> bool:
        return not self.non_compliant
