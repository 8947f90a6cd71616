"""Unit tests for log correlation fields."""

from __future__ import annotations

import asyncio
import logging

import pytest

from consult_relay.logging import (
    log_context,
    set_log_context,
    reset_log_context,
    current_log_context,
    install_log_context,
)


def test_fields_default_to_dash() -> None:
    assert current_log_context() == {"session_id": "-", "request_id": "-", "client_id": "-"}


def test_log_context_scopes_and_restores() -> None:
    with log_context(session_id="s1", client_id="10.0.0.1"):
        with log_context(request_id="r1", session_id="s2"):
            assert current_log_context() == {
                "session_id": "s2",
                "request_id": "r1",
                "client_id": "10.0.0.1",
            }
        assert current_log_context()["session_id"] == "s1"
        assert current_log_context()["request_id"] == "-"
    assert current_log_context()["session_id"] == "-"


def test_none_values_leave_field_untouched() -> None:
    tokens = set_log_context(session_id="keep")
    try:
        with log_context(session_id=None, request_id="r"):
            assert current_log_context()["session_id"] == "keep"
    finally:
        reset_log_context(tokens)
    assert current_log_context()["session_id"] == "-"


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(TypeError):
        set_log_context(user="bob")


def test_records_carry_fields() -> None:
    install_log_context()
    install_log_context()
    with log_context(session_id="abc", request_id="analysis-1"):
        record = logging.getLogger("consult_relay.test").makeRecord(
            "consult_relay.test", logging.INFO, __file__, 1, "hello", None, None
        )
    assert record.session_id == "abc"
    assert record.request_id == "analysis-1"
    assert record.client_id == "-"


def test_tasks_see_their_own_context() -> None:
    async def _worker(name: str) -> str:
        with log_context(session_id=name):
            await asyncio.sleep(0)
            return current_log_context()["session_id"]

    async def _run() -> list[str]:
        return await asyncio.gather(_worker("a"), _worker("b"))

    assert asyncio.run(_run()) == ["a", "b"]
