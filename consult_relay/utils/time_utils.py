"""Timestamp formatting utilities."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format a timestamp the way JavaScript's ``toISOString`` does.

    Args:
        moment: Aware datetime to format. Defaults to now.

    Returns:
        ISO-8601 string with millisecond precision and a ``Z`` suffix.
    """
    moment = (moment or utc_now()).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


__all__ = ["utc_now", "iso_timestamp"]
