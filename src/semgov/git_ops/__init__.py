"""Git queries scoped to plugin subtrees."""

from .change_locator import ChangeLocator, extract_plugins
from .diff_source import DiffSource
from .scope import ComparisonScope

__all__ = [
    "ChangeLocator",
    "ComparisonScope",
    "DiffSource",
    "extract_plugins",
]
