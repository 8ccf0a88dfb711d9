"""Typed access to the dependency manifest."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from symcache.cache.fingerprint import fingerprint
from symcache.exceptions import ManifestError

UNSAFE_CHARS = {
    "/": "_",
    "\\": "_",
    ":": "_",
    "*": "_",
    "?": "_",
    '"': "_",
    "<": "_",
    ">": "_",
    "|": "_",
}


class PackageManifest(BaseModel):
    """The part of a package.json this tool cares about."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field(..., description="Package name, used as cache identity")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v


@dataclass(frozen=True)
class ManifestSnapshot:
    """Manifest bytes and their fingerprint, read once per command."""

    path: Path
    content: bytes
    fingerprint: str


def read_manifest(path: str | Path) -> ManifestSnapshot:
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ManifestError(path, f"cannot be read ({e})")
    return ManifestSnapshot(path=path, content=content, fingerprint=fingerprint(content))


def parse_manifest(content: bytes, path: str | Path = "<memory>") -> PackageManifest:
    try:
        data = json.loads(content.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(path, f"not valid JSON ({e})")
    try:
        return PackageManifest.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'document'}: {err['msg']}"
            for err in e.errors()
        )
        raise ManifestError(path, problems)


def sanitize_identity(name: str) -> str:
    """Make a package name usable as a single directory name."""
    for unsafe, safe in UNSAFE_CHARS.items():
        name = name.replace(unsafe, safe)
    name = name.strip()
    if name in ("", ".", ".."):
        raise ValueError(f"'{name}' cannot be used as a cache identity")
    return name


def resolve_identity(
    manifest_path: str | Path,
    override: Optional[str] = None,
    snapshot: Optional[ManifestSnapshot] = None,
) -> str:
    """
    Determine the package identity used as the cache subfolder.

    The override wins and the manifest is then never read. Otherwise the
    ``name`` field of the manifest is used.

    Args:
        manifest_path: Location of the manifest
        override: Identity supplied by the user
        snapshot: Already read manifest, avoids a second read

    Raises:
        ManifestError: The manifest is needed and is unreadable or has no
            usable ``name``
    """
    if override is not None:
        raw = override
        source: str | Path = "--key"
    else:
        if snapshot is None:
            snapshot = read_manifest(manifest_path)
        raw = parse_manifest(snapshot.content, snapshot.path).name
        source = snapshot.path

    try:
        return sanitize_identity(raw)
    except ValueError as e:
        raise ManifestError(source, str(e))
