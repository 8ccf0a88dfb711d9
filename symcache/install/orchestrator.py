"""
Install orchestration.

One call walks through the following states:

    Start -> LinkChecked -> ValidityChecked -> (InstallSkipped | InstallRan)
          -> Linked -> Evicted

The working link is swapped before the install command runs, since the
install writes into the cache entry through that link. A failed install
leaves the link pointing at an entry without a marker; the next run then
sees that entry as corrupt and starts over.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from symcache.cache.eviction import EvictionResult, evict_entries
from symcache.cache.layout import CacheLayout
from symcache.cache.validity import (
    EntryState,
    check_entry,
    discard_entry,
    write_marker,
)
from symcache.install.runner import InstallRunner, run_install_command
from symcache.links.manager import LinkKind, LinkManager, LinkState
from symcache.model.manifest import ManifestSnapshot

logger = logging.getLogger(__name__)


@dataclass
class InstallOutcome:
    entry: Path
    fingerprint: str
    state: EntryState
    cache_hit: bool
    eviction: EvictionResult = field(default_factory=EvictionResult)


class InstallOrchestrator:
    """
    Links the working directory to the cache entry of the current manifest,
    installing into it when the entry is absent or corrupt.

    Args:
        layout: Cache layout rooted at the cache directory
        link_manager: Manager of the working directory link
        command: Shell command performing the install
        limit: Number of entries kept per package identity after an install
        runner: Callable running ``command`` in a directory
        cwd: Directory the install command runs in, defaults to the link's parent
    """

    def __init__(
        self,
        layout: CacheLayout,
        link_manager: LinkManager,
        command: str,
        limit: int,
        runner: InstallRunner = run_install_command,
        cwd: Optional[Path] = None,
    ):
        self.layout = layout
        self.link_manager = link_manager
        self.command = command
        self.limit = limit
        self.runner = runner
        self.cwd = cwd if cwd is not None else link_manager.link_path.parent

    def install(self, manifest: ManifestSnapshot, identity: str) -> InstallOutcome:
        link_state = self._check_link()
        return self._install(manifest, identity, link_state)

    def reinstall(self, manifest: ManifestSnapshot, identity: str) -> InstallOutcome:
        """Delete the current cache entry, then install from scratch."""
        link_state = self._check_link()

        entry = self.layout.entry_path(identity, manifest.fingerprint)
        logger.warning("Deleting current cache directory...")
        discard_entry(entry)

        return self._install(manifest, identity, link_state)

    def clean(self, identity: str) -> EvictionResult:
        return evict_entries(self.layout.entries(identity), self.limit)

    def _check_link(self) -> LinkState:
        link_state = self.link_manager.inspect()
        name = self.link_manager.link_path.name
        if link_state.kind != LinkKind.NOT_PRESENT:
            logger.warning(f"'{name}' exists. verifying...")
        return self.link_manager.ensure_replaceable(link_state)

    def _install(
        self, manifest: ManifestSnapshot, identity: str, link_state: LinkState
    ) -> InstallOutcome:
        entry = self.layout.entry_path(identity, manifest.fingerprint)
        state = check_entry(entry, manifest.fingerprint)

        if state == EntryState.ABSENT:
            logger.info("cache not found, creating...")
        elif state == EntryState.VALID:
            logger.info("cache exists")
        else:
            logger.warning("cache exists but is corrupted, recreating...")
            discard_entry(entry)

        self.link_manager.replace(entry, link_state)

        if state == EntryState.VALID:
            return InstallOutcome(entry, manifest.fingerprint, state, cache_hit=True)

        self.runner(self.command, self.cwd)
        write_marker(entry, manifest.fingerprint)

        eviction = self.clean(identity)
        if not eviction.ok:
            logger.warning(
                f"Install succeeded but {len(eviction.failed)} old cache entries could not be removed"
            )

        return InstallOutcome(
            entry, manifest.fingerprint, state, cache_hit=False, eviction=eviction
        )
