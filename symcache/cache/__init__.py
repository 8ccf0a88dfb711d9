"""
Content-addressed cache entries.

Each entry lives at ``{root}/{identity}/{fingerprint}`` and carries a marker
file recording the fingerprint that produced it.
"""

from .fingerprint import fingerprint
from .layout import CacheLayout, marker_path
from .validity import EntryState, check_entry, discard_entry, read_marker, write_marker
from .eviction import EvictionResult, entry_created_at, evict_entries

__all__ = [
    "fingerprint",
    "CacheLayout",
    "marker_path",
    "EntryState",
    "check_entry",
    "discard_entry",
    "read_marker",
    "write_marker",
    "EvictionResult",
    "entry_created_at",
    "evict_entries",
]
