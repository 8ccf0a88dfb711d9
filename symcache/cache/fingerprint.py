"""Content fingerprints used as cache keys."""

import hashlib


def fingerprint(content: bytes) -> str:
    """
    Compute the fingerprint of raw manifest content.

    Any byte difference, including whitespace, yields a different value.
    The digest is a cache key, not a security primitive.

    Args:
        content: Raw manifest bytes

    Returns:
        Lowercase hex MD5 digest
    """
    return hashlib.md5(content, usedforsecurity=False).hexdigest()
