"""Small helpers shared across modules."""

from __future__ import annotations

import secrets
import string

_ALPHABET = string.ascii_letters + string.digits


def random_string(length: int) -> str:
    """Return a cryptographically random alphanumeric string of *length*."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))
