"""Manifest models for symcache."""

from symcache.model.manifest import (
    ManifestSnapshot,
    PackageManifest,
    parse_manifest,
    read_manifest,
    resolve_identity,
    sanitize_identity,
)

__all__ = [
    "ManifestSnapshot",
    "PackageManifest",
    "parse_manifest",
    "read_manifest",
    "resolve_identity",
    "sanitize_identity",
]
