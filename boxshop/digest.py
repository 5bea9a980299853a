"""Password hashing helpers."""

from __future__ import annotations

import hashlib

DIGEST_LENGTH = 32


def sha256(text: str | bytes) -> bytes:
    """Return the SHA-256 digest of ``text`` (UTF-8 encoded when a str)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return hashlib.sha256(data).digest()


def to_hex(data: bytes) -> str:
    """Return the lower-case hexadecimal form of ``data``."""
    return bytes(data).hex()