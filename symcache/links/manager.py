"""Inspection and replacement of the working directory link."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from symcache.exceptions import CacheFilesystemError, LinkPreconditionError
from symcache.links.backends import LinkBackend, default_backend

logger = logging.getLogger(__name__)


class LinkKind(str, Enum):
    NOT_PRESENT = "not_present"
    POINTS_TO = "points_to"
    NOT_A_LINK = "not_a_link"


@dataclass(frozen=True)
class LinkState:
    kind: LinkKind
    target: Optional[Path] = None


class LinkManager:
    """
    Keeps the working directory link pointing at one cache entry.

    The link location must be either absent or a directory link. Anything
    else (a real ``node_modules`` folder, a file) is left alone and reported
    as a precondition violation, since its contents are not ours to delete.

    Args:
        link_path: Location of the working link (e.g. ``./node_modules``)
        backend: Platform link implementation, picked automatically if omitted
    """

    def __init__(self, link_path: str | Path, backend: Optional[LinkBackend] = None):
        self.link_path = Path(os.path.abspath(link_path))
        self.backend = backend if backend is not None else default_backend()

    def inspect(self) -> LinkState:
        path = self.link_path
        if self.backend.is_link(path):
            return LinkState(LinkKind.POINTS_TO, self.backend.read_link_target(path))
        if os.path.lexists(path):
            return LinkState(LinkKind.NOT_A_LINK)
        return LinkState(LinkKind.NOT_PRESENT)

    def ensure_replaceable(self, state: Optional[LinkState] = None) -> LinkState:
        """
        Raise unless the link location may be replaced.

        Raises:
            LinkPreconditionError: The location exists and is not a link
        """
        if state is None:
            state = self.inspect()
        if state.kind == LinkKind.NOT_A_LINK:
            raise LinkPreconditionError(self.link_path)
        return state

    def replace(self, new_target: Path, state: Optional[LinkState] = None) -> None:
        """
        Point the working link at ``new_target``.

        ``new_target`` and its parents are created if missing.

        Raises:
            LinkPreconditionError: The location exists and is not a link
            CacheFilesystemError: Removing the old link, creating the target or
                creating the new link failed
        """
        new_target = Path(os.path.abspath(new_target))
        state = self.ensure_replaceable(state)

        if state.kind == LinkKind.POINTS_TO:
            if state.target != new_target:
                logger.warning(
                    f"'{self.link_path.name}' is a link pointing to the incorrect cache location."
                )
                logger.warning(f"    Old: {state.target}")
                logger.warning(f"    New: {new_target}")
            try:
                self.backend.remove_link(self.link_path)
            except OSError as e:
                raise CacheFilesystemError("remove link", self.link_path, e)

        try:
            new_target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheFilesystemError("create cache directory", new_target, e)

        try:
            self.backend.create_link(self.link_path, new_target)
        except OSError as e:
            raise CacheFilesystemError("create link", self.link_path, e)

        logger.debug(f"Linked {self.link_path} -> {new_target}")
