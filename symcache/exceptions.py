"""
Exception classes for symcache.
"""

from pathlib import Path


class SymcacheError(Exception):
    """Base exception for all symcache errors."""

    pass


class ManifestError(SymcacheError):
    """Raised when the manifest is missing, unreadable or malformed."""

    def __init__(self, manifest_path: Path | str, message: str):
        self.manifest_path = manifest_path
        super().__init__(f"Invalid manifest '{manifest_path}': {message}")


class LinkPreconditionError(SymcacheError):
    """Raised when the working link location holds something that is not a link."""

    def __init__(self, link_path: Path):
        self.link_path = link_path
        super().__init__(
            f"'{link_path}' exists and is not a directory link. "
            "Delete it manually before trying again."
        )


class CacheFilesystemError(SymcacheError):
    """Raised when creating, deleting or linking a directory fails."""

    def __init__(self, action: str, path: Path, error: OSError):
        self.action = action
        self.path = path
        self.error = error
        super().__init__(f"Failed to {action} '{path}': {error}")


class InstallCommandError(SymcacheError):
    """Raised when the install command exits with a non-zero code."""

    def __init__(self, command: str, returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"'{command}' exited with code: {returncode}")
