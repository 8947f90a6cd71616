"""Parsing helpers for environment variables."""

from __future__ import annotations

import os

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def env_csv(name: str, default: str = "") -> list[str]:
    """``"a, b,,c"`` -> ``["a", "b", "c"]``."""
    items = (os.getenv(name) or default).split(",")
    return [item.strip() for item in items if item.strip()]


__all__ = ["env_flag", "env_csv"]
