"""Hashing utilities for cache key generation."""

import hashlib
import json
import zlib
from typing import Any


def canonical_json(value: Any) -> str:
    """Encode a value as compact JSON with sorted keys.

    Empty mappings are encoded as ``[]`` so that keys for calls without
    arguments match the ones already stored in shared caches.

    Args:
        value: Any JSON-serializable value.

    Returns:
        The canonical JSON string.
    """
    if isinstance(value, dict) and not value:
        value = []
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def crc32_hash(text: str) -> str:
    """Return the unsigned CRC32 checksum of ``text`` as a decimal string."""
    return str(zlib.crc32(text.encode("utf-8")))


def sha256_hash(text: str) -> str:
    """Return the first 16 hex chars of the SHA-256 digest of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:16]
