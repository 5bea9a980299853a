"""Decoding of form- and query-encoded text."""

from __future__ import annotations

import re

_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")
_ESCAPE = re.compile(rb"%([0-9A-Fa-f]{2})")


def url_decode(url: str | bytes) -> str:
    """Decode ``+`` and ``%XX`` escapes.

    Raises ValueError on a malformed escape. Text after a decoded NUL byte
    is dropped.
    """
    raw = url.encode("utf-8") if isinstance(url, str) else bytes(url)
    if _BAD_ESCAPE.search(raw):
        raise ValueError(f"malformed percent escape in {url!r}")
    decoded = _ESCAPE.sub(
        lambda found: bytes([int(found.group(1), 16)]),
        raw.replace(b"+", b" "),
    )
    decoded = decoded.split(b"\0", 1)[0]
    return decoded.decode("utf-8", errors="replace")