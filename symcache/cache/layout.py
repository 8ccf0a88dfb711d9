"""
On-disk layout of the cache.

Cache Structure Example:
    ~/.local/share/symcache/
    ├── my-app/
    │   ├── 0f343b0931126a20f133d67c2b018a3b/    # one install result
    │   │   ├── .symcache                        # fingerprint marker
    │   │   └── ...
    │   └── 9e107d9d372bb6826bd81d3542a419d6/
    └── other-app/
        └── e4d909c290d0fb1ca068ffaddf22cbd0/
"""

from pathlib import Path
from typing import List

from symcache.config import expand_path
from symcache.constants import MARKER_FILENAME


def marker_path(entry: Path) -> Path:
    """Location of the fingerprint marker inside a cache entry."""
    return entry / MARKER_FILENAME


class CacheLayout:
    """Maps a package identity and a fingerprint to cache directories."""

    def __init__(self, root: str | Path):
        self.root: Path = expand_path(root)

    def identity_dir(self, identity: str) -> Path:
        return self.root / identity

    def entry_path(self, identity: str, fingerprint: str) -> Path:
        return self.identity_dir(identity) / fingerprint

    def entries(self, identity: str) -> List[Path]:
        """
        List every cache entry stored for a package identity.

        Returns:
            Immediate subdirectories of the identity directory, sorted by
            name. Empty if nothing was cached for this identity yet.
        """
        parent = self.identity_dir(identity)
        if not parent.is_dir():
            return []
        return sorted(p for p in parent.iterdir() if p.is_dir())

    def __repr__(self) -> str:
        return f"CacheLayout(root={str(self.root)!r})"
