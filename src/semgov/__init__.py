"""semgov - semantic version governance for multi-plugin repositories."""

__version__ = "0.1.0"
