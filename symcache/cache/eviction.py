"""Recency-ranked pruning of cache entries for one package identity."""

import logging
import os
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

import humanfriendly

logger = logging.getLogger(__name__)


@dataclass
class EvictionResult:
    kept: List[Path] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def entry_created_at(path: Path) -> float:
    """
    Creation time of a directory.

    Uses ``st_birthtime`` where the platform reports it and falls back to
    ``st_ctime``. On Windows that is the creation time; on Linux it is the
    last metadata change of the directory itself, so an old entry whose top
    level was modified (a file added or removed directly inside it) ranks as
    newer than it is.
    """
    st = os.stat(path)
    return getattr(st, "st_birthtime", None) or st.st_ctime


def evict_entries(
    entries: Iterable[Path],
    limit: int,
    created_at: Optional[Callable[[Path], float]] = None,
) -> EvictionResult:
    """
    Keep the ``limit`` most recently created of ``entries``.

    Every other entry is deleted recursively. The entry the
    working link points at gets no special protection.

    Args:
        entries: Cache entries of one package identity, as listed by
            ``CacheLayout.entries``
        limit: Number of entries to keep
        created_at: Timestamp function used for ranking, defaults to
            ``entry_created_at``

    Returns:
        EvictionResult listing kept, removed and undeletable entries.
        Deletion failures are reported, not raised.
    """
    if limit < 0:
        raise ValueError(f"Cache limit must not be negative, got {limit}")

    if created_at is None:
        created_at = entry_created_at

    result = EvictionResult()
    ranked = sorted(
        ((created_at(p), p) for p in entries), key=lambda t: t[0], reverse=True
    )
    result.kept = [p for _, p in ranked[:limit]]
    stale = ranked[limit:]

    if not stale:
        return result

    logger.info("Cleaning old cache items ...")
    logger.info(f"Pruning {len(stale)} items...")
    now = time.time()
    for created, entry in stale:
        age = humanfriendly.format_timespan(max(0.0, now - created), max_units=2)
        logger.info(f"Deleting '{entry}'. (created {age} ago)")
        try:
            shutil.rmtree(entry)
            result.removed.append(entry)
        except OSError as e:
            logger.warning(f"Could not delete '{entry}': {e}")
            result.failed.append((entry, str(e)))

    return result
