"""Unit tests for best-effort push delivery."""

from __future__ import annotations

import asyncio

import pytest

from consult_relay.config.websocket import WS_MSG_ERROR, WS_MSG_INSIGHTS
from consult_relay.handlers.dispatcher import PushDispatcher
from consult_relay.handlers.registry import SessionRegistry
from consult_relay.state.limits import DeliveryOutcome
from tests.helpers.fakes import FakeChannel, FakeProducer, GatedProducer, FailingProducer


def test_analysis_is_delivered_with_request_id() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=4)
        dispatcher = PushDispatcher(registry, FakeProducer(analysis_value=1_234_567))
        channel = FakeChannel()
        session_id = await registry.create(channel)

        task = dispatcher.request_analysis(session_id, {"industry": "retail"}, "req-1")
        assert task is not None
        assert await task is DeliveryOutcome.DELIVERED

        [frame] = channel.frames()
        assert frame["type"] == WS_MSG_INSIGHTS
        assert frame["request_id"] == "req-1"
        assert frame["valueGenerated"] == "$1,234,567"
        assert frame["analysis"]["estimatedValue"] == 1_234_567
        assert frame["processingTime"].endswith(" seconds")

    asyncio.run(_run())


def test_request_id_is_generated_when_missing() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, FakeProducer())
        channel = FakeChannel()
        session_id = await registry.create(channel)
        await dispatcher.request_analysis(session_id, {"x": 1})
        assert channel.frames()[0]["request_id"].startswith("analysis-")

    asyncio.run(_run())


def test_request_for_unknown_session_is_not_scheduled() -> None:
    async def _run() -> None:
        producer = FakeProducer()
        dispatcher = PushDispatcher(SessionRegistry(max_sessions=1), producer)
        assert dispatcher.request_analysis("ghost", {"x": 1}) is None
        assert producer.analyze_calls == []

    asyncio.run(_run())


def test_result_for_disconnected_session_is_dropped_silently() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        producer = GatedProducer()
        dispatcher = PushDispatcher(registry, producer)
        channel = FakeChannel()
        session_id = await registry.create(channel)

        task = dispatcher.request_analysis(session_id, {"x": 1})
        await producer.started.wait()
        await registry.remove(session_id)
        producer.release.set()

        assert await task is DeliveryOutcome.DROPPED
        assert channel.sent == []
        assert dispatcher.pending_count == 0

    asyncio.run(_run())


def test_send_failure_on_closed_channel_is_dropped() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, FakeProducer())
        session_id = await registry.create(FakeChannel(disconnected=True))
        outcome = await dispatcher.request_analysis(session_id, {"x": 1})
        assert outcome is DeliveryOutcome.DROPPED

    asyncio.run(_run())


def test_unexpected_send_error_is_dropped_not_raised() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, FakeProducer())
        session_id = await registry.create(FakeChannel(error=ValueError("boom")))
        outcome = await dispatcher.deliver(session_id, {"type": "x"})
        assert outcome is DeliveryOutcome.DROPPED

    asyncio.run(_run())


def test_producer_failure_sends_asi_error() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, FailingProducer())
        channel = FakeChannel()
        session_id = await registry.create(channel)
        outcome = await dispatcher.request_analysis(session_id, {"x": 1}, "req-9")

        assert outcome is DeliveryOutcome.DELIVERED
        [frame] = channel.frames()
        assert frame["type"] == WS_MSG_ERROR
        assert frame["error_code"] == "analysis_failed"
        assert frame["request_id"] == "req-9"
        assert "backend" not in frame["error"]

    asyncio.run(_run())


def test_slow_production_times_out_with_asi_error() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, GatedProducer(), timeout_s=0.01)
        channel = FakeChannel()
        session_id = await registry.create(channel)
        await dispatcher.request_analysis(session_id, {"x": 1})
        assert channel.frames()[0]["error_code"] == "analysis_timeout"

    asyncio.run(_run())


def test_concurrent_requests_each_get_their_own_reply() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, FakeProducer())
        channel = FakeChannel()
        session_id = await registry.create(channel)
        tasks = [dispatcher.request_analysis(session_id, {"n": n}, f"r{n}") for n in range(5)]
        await asyncio.gather(*tasks)
        assert sorted(frame["request_id"] for frame in channel.frames()) == [f"r{n}" for n in range(5)]

    asyncio.run(_run())


def test_shutdown_cancels_pending_tasks() -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        producer = GatedProducer()
        dispatcher = PushDispatcher(registry, producer)
        channel = FakeChannel()
        session_id = await registry.create(channel)
        task = dispatcher.request_analysis(session_id, {"x": 1})
        await producer.started.wait()

        await dispatcher.shutdown()
        assert task.cancelled()
        assert dispatcher.pending_count == 0
        assert channel.sent == []

    asyncio.run(_run())


@pytest.mark.parametrize("bad_value", [float("nan"), None, "lots"])
def test_unrenderable_result_sends_asi_error(bad_value) -> None:
    async def _run() -> None:
        registry = SessionRegistry(max_sessions=1)
        dispatcher = PushDispatcher(registry, FakeProducer(analysis_value=bad_value))
        channel = FakeChannel()
        session_id = await registry.create(channel)
        task = dispatcher.request_analysis(session_id, {"x": 1}, "r1")

        assert await task is DeliveryOutcome.DELIVERED
        [frame] = channel.frames()
        assert frame["type"] == WS_MSG_ERROR
        assert frame["error_code"] == "analysis_failed"
        assert frame["request_id"] == "r1"

    asyncio.run(_run())
