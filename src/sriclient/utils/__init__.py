"""Utility helpers for sriclient."""

from sriclient.utils.hashing import canonical_json, crc32_hash, sha256_hash

__all__ = [
    "canonical_json",
    "crc32_hash",
    "sha256_hash",
]
