"""Unit tests for platform metrics state."""

from __future__ import annotations

import random
import asyncio
import contextlib

from consult_relay.state.platform import PlatformMetrics
from consult_relay.handlers.platform import PlatformState
from consult_relay.config.platform import PLATFORM_PERCENT_CAP
from consult_relay.server import platform_drift_daemon
from consult_relay.handlers.services import build_services
from tests.helpers.fakes import FakeProducer


def test_snapshot_starts_at_defaults() -> None:
    metrics = PlatformState().snapshot()
    assert metrics == PlatformMetrics()
    assert metrics.superintelligence_level == 156
    assert metrics.quantum_processors == 10247


def test_advance_only_grows_metrics() -> None:
    state = PlatformState(rng=random.Random(7))
    before = state.snapshot()
    after = state.advance()
    assert state.snapshot() is after
    assert after.superintelligence_level >= before.superintelligence_level
    assert after.quantum_processors >= before.quantum_processors
    assert after.consciousness_depth >= before.consciousness_depth


def test_percentage_metrics_are_capped() -> None:
    state = PlatformState(
        initial=PlatformMetrics(
            consciousness_depth=99.89,
            omniscience_factor=99.89,
            reality_manipulation_power=99.89,
        ),
        rng=random.Random(1),
    )
    for _ in range(50):
        metrics = state.advance()
    assert metrics.consciousness_depth <= PLATFORM_PERCENT_CAP
    assert metrics.omniscience_factor <= PLATFORM_PERCENT_CAP
    assert metrics.reality_manipulation_power <= PLATFORM_PERCENT_CAP


def test_status_payload_uses_camel_case_keys() -> None:
    payload = PlatformMetrics().as_payload()
    assert set(payload) == {
        "superintelligenceLevel",
        "consciousnessDepth",
        "omniscienceFactor",
        "realityManipulationPower",
        "businessOptimizationMultiplier",
        "quantumProcessors",
    }
    assert payload["quantumProcessors"] == 10247


def test_drift_daemon_advances_until_cancelled() -> None:
    async def _run() -> None:
        services = build_services(producer=FakeProducer())
        before = services.platform.snapshot()
        task = asyncio.create_task(platform_drift_daemon(services, 0.005))
        await asyncio.sleep(0.05)
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        assert services.platform.snapshot() is not before

    asyncio.run(_run())


def test_drift_daemon_disabled_returns_immediately() -> None:
    services = build_services(producer=FakeProducer())
    asyncio.run(platform_drift_daemon(services, 0))
    assert services.platform.snapshot() == PlatformMetrics()
