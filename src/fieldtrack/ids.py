"""Opaque record identifiers."""

from __future__ import annotations

import secrets

# 64 random bits; collisions are negligible for a single local dataset.
_TOKEN_BYTES = 8


def new_id(prefix: str) -> str:
    """Return a fresh identifier such as ``drv-3f9c0a7d51e2b846``.

    Identifiers never depend on collection contents, so two writers can
    not race on a counter.
    """
    prefix = prefix.strip()
    if not prefix:
        raise ValueError("id prefix must be non-empty")
    return f"{prefix}-{secrets.token_hex(_TOKEN_BYTES)}"
