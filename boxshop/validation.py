"""Validation of user-supplied form entries."""

from __future__ import annotations

import string

from .regex import VALID_ENTRY, has_match


def validate_entry(entry: str | None) -> bool:
    """Tell whether an entry is free of the characters ``( ; " )``."""
    if entry is None:
        return False
    return has_match(entry, VALID_ENTRY)


def validate_password(password: str) -> bool:
    """Require an upper-case letter, a lower-case letter, a digit and a punctuation mark."""
    return (
        any(c in string.ascii_uppercase for c in password)
        and any(c in string.ascii_lowercase for c in password)
        and any(c in string.digits for c in password)
        and any(c in string.punctuation for c in password)
    )


def validate_length(entry: str | bytes | None, length: int) -> bool:
    """Tell whether an entry is present and at most ``length`` long."""
    if entry is None:
        return False
    return len(entry) <= length