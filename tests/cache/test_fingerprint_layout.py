"""Tests for fingerprints and the cache layout."""

import pytest

from symcache.cache.fingerprint import fingerprint
from symcache.cache.layout import CacheLayout, marker_path
from symcache.model.manifest import read_manifest


@pytest.mark.short
class TestFingerprint:
    def test_known_digest(self):
        assert fingerprint(b"") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_deterministic(self):
        content = b'{"name": "app"}'
        assert fingerprint(content) == fingerprint(content)

    def test_formatting_changes_fingerprint(self):
        assert fingerprint(b'{"name": "app"}') != fingerprint(b'{"name":"app"}')

    def test_single_byte_difference(self):
        assert fingerprint(b"abc") != fingerprint(b"abd")

    def test_same_content_different_paths(self, tmp_path):
        a = tmp_path / "a" / "package.json"
        b = tmp_path / "b" / "package.json"
        for p in (a, b):
            p.parent.mkdir()
            p.write_bytes(b'{"name": "app"}')
        assert read_manifest(a).fingerprint == read_manifest(b).fingerprint


@pytest.mark.short
class TestCacheLayout:
    def test_entry_path(self, tmp_path):
        layout = CacheLayout(tmp_path)
        assert layout.entry_path("app", "h1") == tmp_path / "app" / "h1"
        assert layout.identity_dir("app") == tmp_path / "app"

    def test_marker_path(self, tmp_path):
        entry = CacheLayout(tmp_path).entry_path("app", "h1")
        assert marker_path(entry) == entry / ".symcache"

    def test_root_placeholder_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SYMCACHE_TEST_ROOT", str(tmp_path))
        layout = CacheLayout("%SYMCACHE_TEST_ROOT%/symcache")
        assert layout.root == tmp_path / "symcache"

    def test_entries(self, tmp_path):
        layout = CacheLayout(tmp_path)
        assert layout.entries("app") == []

        (tmp_path / "app" / "h2").mkdir(parents=True)
        (tmp_path / "app" / "h1").mkdir()
        (tmp_path / "app" / "stray-file").write_text("")
        (tmp_path / "other" / "h3").mkdir(parents=True)

        assert layout.entries("app") == [tmp_path / "app" / "h1", tmp_path / "app" / "h2"]
