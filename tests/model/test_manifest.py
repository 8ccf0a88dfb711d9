"""Tests for manifest reading and identity resolution."""

import json

import pytest

from symcache.cache.fingerprint import fingerprint
from symcache.exceptions import ManifestError
from symcache.model.manifest import (
    parse_manifest,
    read_manifest,
    resolve_identity,
    sanitize_identity,
)


@pytest.fixture
def manifest_file(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "my-app", "version": "1.0.0"}))
    return path


@pytest.mark.short
class TestReadManifest:
    def test_snapshot(self, manifest_file):
        snapshot = read_manifest(manifest_file)
        assert snapshot.path == manifest_file
        assert snapshot.content == manifest_file.read_bytes()
        assert snapshot.fingerprint == fingerprint(manifest_file.read_bytes())

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError, match="cannot be read"):
            read_manifest(tmp_path / "package.json")

    def test_snapshot_is_immutable(self, manifest_file):
        snapshot = read_manifest(manifest_file)
        with pytest.raises(AttributeError):
            snapshot.fingerprint = "other"


@pytest.mark.short
class TestParseManifest:
    def test_name(self):
        assert parse_manifest(b'{"name": "app", "dependencies": {}}').name == "app"

    def test_invalid_json(self):
        with pytest.raises(ManifestError, match="not valid JSON"):
            parse_manifest(b"{name: app")

    def test_missing_name(self):
        with pytest.raises(ManifestError, match="name"):
            parse_manifest(b'{"version": "1.0.0"}')

    def test_name_wrong_type(self):
        with pytest.raises(ManifestError, match="name"):
            parse_manifest(b'{"name": 42}')

    def test_empty_name(self):
        with pytest.raises(ManifestError):
            parse_manifest(b'{"name": "  "}')

    def test_not_an_object(self):
        with pytest.raises(ManifestError):
            parse_manifest(b'["app"]')


@pytest.mark.short
class TestResolveIdentity:
    def test_from_manifest(self, manifest_file):
        assert resolve_identity(manifest_file) == "my-app"

    def test_override_skips_manifest(self, tmp_path):
        # the manifest does not even exist
        assert resolve_identity(tmp_path / "package.json", "custom") == "custom"

    def test_override_on_malformed_manifest(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("not json")
        assert resolve_identity(path, "custom") == "custom"

    def test_uses_snapshot(self, manifest_file, tmp_path):
        snapshot = read_manifest(manifest_file)
        manifest_file.unlink()
        assert resolve_identity(manifest_file, snapshot=snapshot) == "my-app"

    def test_scoped_name(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "@scope/pkg"}')
        assert resolve_identity(path) == "@scope_pkg"

    def test_unusable_override(self, tmp_path):
        with pytest.raises(ManifestError):
            resolve_identity(tmp_path / "package.json", "..")


@pytest.mark.short
def test_sanitize_identity():
    assert sanitize_identity("a/b\\c:d") == "a_b_c_d"
    assert sanitize_identity("plain-name") == "plain-name"
    with pytest.raises(ValueError):
        sanitize_identity(".")


@pytest.mark.short
def test_parse_manifest_with_bom():
    assert parse_manifest(b'\xef\xbb\xbf{"name": "app"}').name == "app"
