"""
Platform backends for directory links.

Every backend exposes the same capabilities so the link manager stays
platform neutral:

    create_link(path, target)   create a directory link at ``path``
    read_link_target(path)      target of the link, or None if not a link
    is_link(path)               whether ``path`` is a directory link
    remove_link(path)           remove the link, never its target's contents
"""

import os
import platform
import subprocess
from pathlib import Path
from typing import Optional, Protocol


class LinkBackend(Protocol):
    def create_link(self, path: Path, target: Path) -> None: ...

    def read_link_target(self, path: Path) -> Optional[Path]: ...

    def is_link(self, path: Path) -> bool: ...

    def remove_link(self, path: Path) -> None: ...


class SymlinkBackend:
    """Directory symbolic links (POSIX, or Windows with symlink privilege)."""

    def create_link(self, path: Path, target: Path) -> None:
        os.symlink(target, path, target_is_directory=True)

    def read_link_target(self, path: Path) -> Optional[Path]:
        if not self.is_link(path):
            return None
        target = Path(os.readlink(path))
        if not target.is_absolute():
            target = path.parent / target
        return Path(os.path.abspath(target))

    def is_link(self, path: Path) -> bool:
        return path.is_symlink()

    def remove_link(self, path: Path) -> None:
        if platform.system() == "Windows":
            # directory symlinks are removed like directories on Windows
            os.rmdir(path)
        else:
            os.unlink(path)


class JunctionBackend(SymlinkBackend):
    """NTFS directory junctions, which need no special privilege."""

    def create_link(self, path: Path, target: Path) -> None:
        result = subprocess.run(
            ["cmd", "/C", "mklink", "/J", str(path), str(target)],
            text=True,
            capture_output=True,
            check=False,
        )
        if result.returncode != 0:
            raise OSError(
                f"mklink /J exited with code {result.returncode}: "
                f"{result.stderr.strip() or result.stdout.strip()}"
            )

    def is_link(self, path: Path) -> bool:
        isjunction = getattr(os.path, "isjunction", None)
        if isjunction is not None and isjunction(path):
            return True
        return path.is_symlink()

    def remove_link(self, path: Path) -> None:
        os.rmdir(path)


def default_backend() -> LinkBackend:
    if platform.system() == "Windows":
        return JunctionBackend()
    return SymlinkBackend()
