"""Change classification via an external oracle."""

from .base import ClassificationOracle
from .claude_cli import ClaudeCliOracle
from .classifier import BumpVerdict, VersionBumpClassifier

__all__ = [
    "BumpVerdict",
    "ClassificationOracle",
    "ClaudeCliOracle",
    "VersionBumpClassifier",
]
