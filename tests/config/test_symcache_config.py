"""
Unit tests for symcache.config.
"""

import os
from pathlib import Path

import pytest

from symcache import config as config_module
from symcache.config import (
    ConfigAccessor,
    config_dir,
    expand_path,
    get_cache_dir,
    get_cache_limit,
    get_install_command,
)


@pytest.fixture
def temp_config_file(tmp_path):
    path = tmp_path / "symcache.cfg"
    path.write_text(
        """
[cache]
dir = /srv/cache
limit = 3

[install]
command = yarn install --frozen-lockfile
"""
    )
    return path


@pytest.fixture
def use_config(monkeypatch):
    """Swap the module-level config accessor."""

    def _use(path):
        monkeypatch.setattr(config_module, "config", ConfigAccessor(path))

    return _use


@pytest.mark.short
def test_config_accessor_get_existing(temp_config_file):
    config = ConfigAccessor(temp_config_file)

    assert config.get("cache", "dir") == "/srv/cache"
    assert config.get("cache", "limit") == "3"
    assert config.get("install", "command") == "yarn install --frozen-lockfile"


@pytest.mark.short
def test_config_accessor_get_missing_with_default(temp_config_file):
    config = ConfigAccessor(temp_config_file)

    assert config.get("cache", "missing", default="default") == "default"
    assert config.get("missing_section", "key") is None


@pytest.mark.short
def test_default_config_path():
    config = ConfigAccessor()
    assert config.config_path == config_dir / "symcache.cfg"


@pytest.mark.short
class TestExpandPath:
    def test_dollar_placeholder(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SYMCACHE_TEST_ROOT", str(tmp_path))
        assert expand_path("$SYMCACHE_TEST_ROOT/cache") == tmp_path / "cache"

    def test_percent_placeholder(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SYMCACHE_TEST_ROOT", str(tmp_path))
        assert expand_path("%SYMCACHE_TEST_ROOT%/cache") == tmp_path / "cache"

    def test_unknown_placeholder_is_kept(self, monkeypatch):
        monkeypatch.delenv("SYMCACHE_UNSET_VAR", raising=False)
        assert "%SYMCACHE_UNSET_VAR%" in str(expand_path("%SYMCACHE_UNSET_VAR%/x"))

    def test_home(self):
        assert expand_path("~/cache") == Path(os.path.expanduser("~")) / "cache"

    def test_relative_becomes_absolute(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert expand_path("cache") == tmp_path / "cache"


@pytest.mark.short
class TestGetters:
    def test_cache_dir_override_wins(self, temp_config_file, use_config, tmp_path):
        use_config(temp_config_file)
        assert get_cache_dir(str(tmp_path)) == tmp_path

    def test_cache_dir_from_config(self, temp_config_file, use_config):
        use_config(temp_config_file)
        assert get_cache_dir() == Path("/srv/cache").absolute()

    def test_limit_from_config(self, temp_config_file, use_config):
        use_config(temp_config_file)
        assert get_cache_limit() == 3
        assert get_cache_limit(0) == 0

    def test_limit_default(self, tmp_path, use_config):
        use_config(tmp_path / "absent.cfg")
        assert get_cache_limit() == 5

    def test_limit_invalid(self, tmp_path, use_config):
        path = tmp_path / "bad.cfg"
        path.write_text("[cache]\nlimit = many\n")
        use_config(path)
        with pytest.raises(ValueError, match="not an integer"):
            get_cache_limit()

    def test_limit_negative(self):
        with pytest.raises(ValueError, match="negative"):
            get_cache_limit(-1)

    def test_install_command(self, temp_config_file, use_config):
        use_config(temp_config_file)
        assert get_install_command() == "yarn install --frozen-lockfile"
        assert get_install_command("pnpm install") == "pnpm install"
