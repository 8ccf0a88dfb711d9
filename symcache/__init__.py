"""symcache: a content-addressed cache for dependency-install outputs."""

__version__ = "0.1.0"
