"""Unit tests for the session registry."""

from __future__ import annotations

import asyncio

import pytest

from consult_relay.errors import SessionCapacityError
from consult_relay.state.session import SessionStatus
from consult_relay.handlers.registry import SessionRegistry
from tests.helpers.fakes import FakeChannel


def test_create_registers_connected_session() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=2)
        channel = FakeChannel()
        session_id = await registry.create(channel, client_id="10.0.0.1")

        session = registry.resolve(session_id)
        assert session is not None
        assert session.channel is channel
        assert session.client_id == "10.0.0.1"
        assert session.status is SessionStatus.CONNECTED
        assert registry.count() == 1

    asyncio.run(_run())


def test_session_ids_are_unique() -> None:
    async def _run() -> None:
        ids = iter(["dup", "dup", "fresh"])
        registry = SessionRegistry(max_sessions=5, id_factory=lambda: next(ids))
        first = await registry.create(FakeChannel())
        second = await registry.create(FakeChannel())
        assert (first, second) == ("dup", "fresh")

    asyncio.run(_run())


def test_resolve_unknown_id_returns_none() -> None:
    registry = SessionRegistry(max_sessions=1)
    assert registry.resolve("never-issued") is None


def test_remove_is_idempotent_and_marks_disconnected() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        session_id = await registry.create(FakeChannel())
        session = registry.resolve(session_id)

        assert await registry.remove(session_id) is True
        assert await registry.remove(session_id) is False
        assert await registry.remove("unknown") is False
        assert session.status is SessionStatus.DISCONNECTED
        assert registry.resolve(session_id) is None
        assert registry.count() == 0

    asyncio.run(_run())


def test_create_at_capacity_raises_after_timeout() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1, acquire_timeout=0.01)
        await registry.create(FakeChannel())
        with pytest.raises(SessionCapacityError) as exc_info:
            await registry.create(FakeChannel())
        assert exc_info.value.limit == 1
        assert exc_info.value.active == 1

    asyncio.run(_run())


def test_remove_frees_a_slot() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1, acquire_timeout=0.01)
        first = await registry.create(FakeChannel())
        await registry.remove(first)
        await registry.remove(first)
        second = await registry.create(FakeChannel())
        assert registry.resolve(second) is not None
        # Double remove must not have released an extra slot
        with pytest.raises(SessionCapacityError):
            await registry.create(FakeChannel())

    asyncio.run(_run())


def test_capacity_info() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=2)
        await registry.create(FakeChannel())
        assert registry.capacity_info() == {
            "active": 1,
            "max": 2,
            "available": 1,
            "at_capacity": False,
        }

    asyncio.run(_run())
