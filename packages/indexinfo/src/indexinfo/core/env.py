"""Lookups for the ``INDEXINFO_*`` and ``RUN_ID`` environment settings.

A variable that is set but blank counts as unset, so an exported empty
value never overrides the config file.
"""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def getenv(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def getenv_flag(name: str) -> bool | None:
    raw = getenv(name)
    if raw is None:
        return None
    return raw.lower() in _TRUTHY
