"""Configuration for the cache root, retention limit and install command"""

import configparser
import os
import platform
import re
from typing import Optional, Any

from pathlib import Path

from symcache.constants import (
    APP_NAME,
    DEFAULT_CACHE_LIMIT,
    DEFAULT_INSTALL_COMMAND,
    DEFAULT_LINK_NAME,
)

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")
xdg_data_home = os.environ.get("XDG_DATA_HOME") or os.path.join(
    _home, ".local", "share"
)

if platform.system() == "Windows":
    default_cache_dir = f"%APPDATA%\\{APP_NAME}"
    config_dir = Path(os.environ.get("APPDATA", _home)) / APP_NAME
elif platform.system() == "Darwin":
    # macOS
    default_cache_dir = f"~/Library/Application Support/{APP_NAME}"
    config_dir = Path(f"~/Library/Application Support/{APP_NAME}").expanduser()
else:
    # Linux or others
    default_cache_dir = os.path.join(xdg_data_home, APP_NAME)
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


default_cfg = {
    "cache": {"dir": default_cache_dir, "limit": str(DEFAULT_CACHE_LIMIT)},
    "install": {"command": DEFAULT_INSTALL_COMMAND, "link_name": DEFAULT_LINK_NAME},
}

_WINDOWS_PLACEHOLDER = re.compile(r"%([A-Za-z_][A-Za-z0-9_()]*)%")


def get_config_file():
    return config_dir / f"{APP_NAME}.cfg"


def expand_path(value: str | Path) -> Path:
    """
    Resolve environment placeholders and the user's home in a path.

    Both ``%VAR%`` and ``$VAR`` / ``${VAR}`` forms are expanded on every
    platform. Unknown variables are left untouched.

    Returns:
        An absolute path
    """
    text = str(value)
    text = _WINDOWS_PLACEHOLDER.sub(
        lambda m: os.environ.get(m.group(1), m.group(0)), text
    )
    text = os.path.expandvars(text)
    return Path(text).expanduser().absolute()


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    This class provides a way to access configuration options with a dictionary-like
    interface while handling missing sections or keys gracefully.

    Usage:
        config = ConfigAccessor()
        value = config.get('cache', 'dir', default='~/cache')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = config_path

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default


# Create a global config accessor instance
config = ConfigAccessor()


def get_cache_dir(override: Optional[str] = None) -> Path:
    """
    Get the cache root, with placeholders expanded.

    Args:
        override: Explicit directory (e.g. from the command line), wins over
            the config file

    Returns:
        Absolute path of the cache root. The directory is not created.
    """
    if override:
        return expand_path(override)
    return expand_path(config.get("cache", "dir", default_cfg["cache"]["dir"]))


def get_cache_limit(override: Optional[int] = None) -> int:
    """
    Get the number of cache entries to keep per package.

    Raises:
        ValueError: If the configured value is not a non-negative integer
    """
    if override is not None:
        limit = override
    else:
        raw = config.get("cache", "limit", default_cfg["cache"]["limit"])
        try:
            limit = int(raw)
        except ValueError:
            raise ValueError(f"Configured cache limit is not an integer: {raw!r}")
    if limit < 0:
        raise ValueError(f"Cache limit must not be negative, got {limit}")
    return limit


def get_install_command(override: Optional[str] = None) -> str:
    if override:
        return override
    return config.get("install", "command", default_cfg["install"]["command"])


def get_link_name() -> str:
    return config.get("install", "link_name", default_cfg["install"]["link_name"])
