"""Plugin manifest model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from semgov.utils.versioning import SemanticVersion


class PluginAuthor(BaseModel):
    """Manifest author entry."""

    model_config = ConfigDict(extra="allow")

    name: str


class PluginManifest(BaseModel):
    """Metadata describing a plugin.

    Unknown fields are kept as extras so a load/save cycle never drops them.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    description: str = ""
    version: str
    author: PluginAuthor | None = None

    _key_order: list[str] = PrivateAttr(default_factory=list)

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        SemanticVersion.parse(value)
        return value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PluginManifest":
        """Validate a raw manifest record, remembering its key order."""
        manifest = cls.model_validate(data)
        manifest._key_order = list(data)
        return manifest

    @property
    def semantic_version(self) -> SemanticVersion:
        return SemanticVersion.parse(self.version)

    def with_version(self, version: SemanticVersion) -> "PluginManifest":
        """Copy of this manifest with only the version replaced."""
        return self.model_copy(update={"version": str(version)})

    def to_dict(self) -> dict[str, Any]:
        """Serializable record in the original key order, new keys last."""
        data = self.model_dump(mode="json", exclude_unset=True)
        ordered = {key: data[key] for key in self._key_order if key in data}
        ordered.update((key, value) for key, value in data.items() if key not in ordered)
        return ordered
