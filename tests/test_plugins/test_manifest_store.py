"""Tests for the plugin manifest model and store."""

import json

import pytest

from semgov.config.models import GovernanceConfig
from semgov.errors import ManifestMalformedError, ManifestNotFoundError
from semgov.plugins.manifest import PluginManifest
from semgov.plugins.store import ManifestStore, dump_manifest
from semgov.utils.versioning import SemanticVersion


@pytest.fixture
def store(tmp_path):
    return ManifestStore(tmp_path)


class TestLoad:
    def test_load_fields(self, store, write_manifest, sample_manifest):
        write_manifest("bar", sample_manifest)
        manifest = store.load("bar")
        assert manifest.name == "bar"
        assert manifest.description == "Example plugin"
        assert manifest.semantic_version == SemanticVersion(0, 1, 0)
        assert manifest.author.name == "Plugin Author"

    def test_author_optional(self, store, write_manifest):
        write_manifest("bar", {"name": "bar", "description": "d", "version": "1.0.0"})
        assert store.load("bar").author is None

    def test_missing_file(self, store):
        with pytest.raises(ManifestNotFoundError, match="not found"):
            store.load("ghost")

    def test_invalid_json(self, store, tmp_path):
        path = store.path_for("bar")
        path.parent.mkdir(parents=True)
        path.write_text("{ not json")
        with pytest.raises(ManifestMalformedError, match="Invalid JSON"):
            store.load("bar")

    def test_not_an_object(self, store, tmp_path):
        path = store.path_for("bar")
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2, 3]")
        with pytest.raises(ManifestMalformedError, match="not a JSON object"):
            store.load("bar")

    @pytest.mark.parametrize("version", ["1.0", "latest", 1, None])
    def test_bad_version(self, store, write_manifest, version):
        write_manifest("bar", {"name": "bar", "version": version})
        with pytest.raises(ManifestMalformedError, match="validation failed"):
            store.load("bar")

    def test_missing_version(self, store, write_manifest):
        write_manifest("bar", {"name": "bar", "description": "d"})
        with pytest.raises(ManifestMalformedError):
            store.load("bar")

    def test_custom_layout(self, tmp_path):
        config = GovernanceConfig(plugins_root="ext", manifest_dir="meta", manifest_file="m.json")
        store = ManifestStore(tmp_path, config)
        assert store.path_for("foo") == tmp_path / "ext" / "foo" / "meta" / "m.json"


class TestSave:
    def test_round_trip_preserves_unknown_fields_and_order(self, store, write_manifest):
        original = {
            "version": "1.4.2",
            "name": "bar",
            "homepage": "https://example.com/bar",
            "description": "Überplugin",
            "keywords": ["deploy", "ci"],
            "author": {"name": "A. Author", "email": "a@example.com"},
            "hooks": {"pre": None},
        }
        path = write_manifest("bar", original)

        manifest = store.load("bar")
        store.save("bar", manifest.with_version(SemanticVersion(1, 5, 0)))

        text = path.read_text(encoding="utf-8")
        saved = json.loads(text)
        assert list(saved) == list(original)
        assert saved == {**original, "version": "1.5.0"}
        assert text.endswith("}\n")
        assert "Überplugin" in text

    def test_save_unchanged_is_canonical(self, store, write_manifest, sample_manifest):
        path = write_manifest("bar", sample_manifest)
        store.save("bar", store.load("bar"))
        assert path.read_text() == json.dumps(sample_manifest, indent=2) + "\n"

    def test_leaves_no_temp_files(self, store, write_manifest, sample_manifest):
        path = write_manifest("bar", sample_manifest)
        store.save("bar", store.load("bar").with_version(SemanticVersion(0, 1, 1)))
        assert [p.name for p in path.parent.iterdir()] == ["plugin.json"]

    def test_with_version_does_not_mutate(self, store, write_manifest, sample_manifest):
        write_manifest("bar", sample_manifest)
        manifest = store.load("bar")
        bumped = manifest.with_version(SemanticVersion(0, 2, 0))
        assert manifest.version == "0.1.0"
        assert bumped.version == "0.2.0"


def test_dump_manifest_appends_new_keys_last():
    manifest = PluginManifest.from_dict({"name": "x", "version": "0.1.0"})
    manifest.description = "added later"
    content = dump_manifest(manifest)
    assert list(json.loads(content)) == ["name", "version", "description"]
