"""Classification of a cache entry against the current manifest fingerprint."""

import logging
import shutil
from enum import Enum
from pathlib import Path

from symcache.cache.layout import marker_path
from symcache.exceptions import CacheFilesystemError

logger = logging.getLogger(__name__)


class EntryState(str, Enum):
    """State of a cache entry directory."""

    ABSENT = "absent"
    VALID = "valid"
    CORRUPT = "corrupt"


def read_marker(entry: Path) -> str | None:
    """Content of the entry's marker, or None if there is no marker.

    Undecodable bytes are replaced, so a damaged marker reads as a mismatch.
    """
    marker = marker_path(entry)
    if not marker.is_file():
        return None
    return marker.read_bytes().decode("utf-8", errors="replace").strip()


def write_marker(entry: Path, fingerprint: str) -> Path:
    """Record the fingerprint that produced the entry."""
    marker = marker_path(entry)
    try:
        marker.write_text(fingerprint, encoding="utf-8")
    except OSError as e:
        raise CacheFilesystemError("write fingerprint marker", marker, e)
    return marker


def check_entry(entry: Path, fingerprint: str) -> EntryState:
    """
    Classify a cache entry.

    Args:
        entry: Cache entry directory
        fingerprint: Fingerprint of the manifest governing the working directory

    Returns:
        ABSENT if the directory does not exist, VALID if its marker records
        ``fingerprint``, CORRUPT otherwise (marker missing or different).
    """
    if not entry.is_dir():
        return EntryState.ABSENT

    recorded = read_marker(entry)
    if recorded == fingerprint:
        return EntryState.VALID

    if recorded is None:
        logger.debug(f"No fingerprint marker in {entry}")
    else:
        logger.debug(f"Marker in {entry} records {recorded}, expected {fingerprint}")
    return EntryState.CORRUPT


def discard_entry(entry: Path) -> None:
    """Recursively delete a cache entry if it exists."""
    if not entry.exists():
        return
    try:
        shutil.rmtree(entry)
    except OSError as e:
        raise CacheFilesystemError("delete cache entry", entry, e)
