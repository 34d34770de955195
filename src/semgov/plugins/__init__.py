"""Plugin manifests: model, storage, discovery and validation."""

from .discovery import discover_manifests
from .manifest import PluginAuthor, PluginManifest
from .store import ManifestStore, read_manifest

__all__ = [
    "discover_manifests",
    "ManifestStore",
    "PluginAuthor",
    "PluginManifest",
    "read_manifest",
]
