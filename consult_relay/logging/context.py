"""Per-task correlation fields stamped onto every LogRecord.

Each field lives in its own ContextVar so concurrent sessions and requests
never see each other's identifiers. Fields that are unset render as ``-``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_UNSET = "-"
CONTEXT_FIELDS = ("session_id", "request_id", "client_id")

_fields: dict[str, ContextVar[str]] = {
    name: ContextVar(f"consult_relay_{name}", default=_UNSET) for name in CONTEXT_FIELDS
}

ContextTokens = list[tuple[str, Token[str]]]


def set_log_context(**fields: str | None) -> ContextTokens:
    """Bind the given fields for the current task; ``None`` leaves a field alone."""
    bound: ContextTokens = []
    for name, value in fields.items():
        if name not in _fields:
            raise TypeError(f"unknown log context field: {name}")
        if value is not None:
            bound.append((name, _fields[name].set(value)))
    return bound


def reset_log_context(tokens: ContextTokens) -> None:
    while tokens:
        name, token = tokens.pop()
        _fields[name].reset(token)


@contextmanager
def log_context(**fields: str | None) -> Iterator[None]:
    tokens = set_log_context(**fields)
    try:
        yield
    finally:
        reset_log_context(tokens)


def current_log_context() -> dict[str, str]:
    return {name: var.get() for name, var in _fields.items()}


_factory_installed = False


def install_log_context() -> None:
    """Wrap the active LogRecord factory so records carry the context fields."""
    global _factory_installed
    if _factory_installed:
        return
    base_factory = logging.getLogRecordFactory()

    def _stamped(*args, **kwargs) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        for name, var in _fields.items():
            setattr(record, name, var.get())
        return record

    logging.setLogRecordFactory(_stamped)
    _factory_installed = True


__all__ = [
    "CONTEXT_FIELDS",
    "current_log_context",
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
