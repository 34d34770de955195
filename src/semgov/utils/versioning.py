"""Semantic version arithmetic."""

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from semgov import __version__

_SEMVER_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@total_ordering
class BumpKind(Enum):
    """Severity of a change, lowest first."""

    NONE = "NONE"
    PATCH = "PATCH"
    MINOR = "MINOR"
    MAJOR = "MAJOR"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BumpKind):
            return NotImplemented
        return self.severity < other.severity


_SEVERITY = {
    BumpKind.NONE: 0,
    BumpKind.PATCH: 1,
    BumpKind.MINOR: 2,
    BumpKind.MAJOR: 3,
}


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A ``major.minor.patch`` version number."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse a ``major.minor.patch`` string.

        Raises:
            ValueError: If the text is not three dot-separated non-negative integers.
        """
        match = _SEMVER_RE.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ValueError(f"Not a semantic version: {text!r}")
        return cls(*(int(part) for part in match.groups()))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def next_version(current: SemanticVersion, kind: BumpKind) -> SemanticVersion:
    """Compute the version that follows ``current`` for a bump of ``kind``.

    Args:
        current: Version currently recorded in the manifest.
        kind: Bump decided for the change.

    Returns:
        The bumped version, or ``current`` itself for ``BumpKind.NONE``.
    """
    if kind is BumpKind.MAJOR:
        return SemanticVersion(current.major + 1, 0, 0)
    if kind is BumpKind.MINOR:
        return SemanticVersion(current.major, current.minor + 1, 0)
    if kind is BumpKind.PATCH:
        return SemanticVersion(current.major, current.minor, current.patch + 1)
    return current


def get_semgov_version() -> str:
    """Get the current semgov version."""
    return __version__
