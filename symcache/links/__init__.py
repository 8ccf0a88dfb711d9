from .backends import JunctionBackend, LinkBackend, SymlinkBackend, default_backend
from .manager import LinkKind, LinkManager, LinkState

__all__ = [
    "JunctionBackend",
    "LinkBackend",
    "SymlinkBackend",
    "default_backend",
    "LinkKind",
    "LinkManager",
    "LinkState",
]
