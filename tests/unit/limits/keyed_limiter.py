"""Unit tests for the per-client HTTP admission limiter."""

from __future__ import annotations

import pytest

from consult_relay.errors import RateLimitError
from consult_relay.handlers.keyed_limits import KeyedRateLimiter
from tests.helpers.fakes import FakeClock


def test_hundred_and_first_request_in_window_is_rejected() -> None:
    clock = FakeClock()
    limiter = KeyedRateLimiter(limit=100, window_seconds=60.0, now_fn=clock)
    for _ in range(100):
        limiter.consume("10.0.0.1")
        clock.advance(0.1)
    with pytest.raises(RateLimitError) as exc_info:
        limiter.consume("10.0.0.1")
    err = exc_info.value
    assert err.key == "10.0.0.1"
    assert err.limit == 100
    assert err.window_seconds == 60.0
    assert err.retry_in == pytest.approx(50.0)


def test_keys_have_independent_budgets() -> None:
    limiter = KeyedRateLimiter(limit=1, window_seconds=60.0, now_fn=FakeClock())
    limiter.consume("a")
    limiter.consume("b")
    with pytest.raises(RateLimitError):
        limiter.consume("a")


def test_budget_returns_as_window_slides() -> None:
    clock = FakeClock()
    limiter = KeyedRateLimiter(limit=2, window_seconds=60.0, now_fn=clock)
    limiter.consume("a")
    clock.advance(30.0)
    limiter.consume("a")
    clock.advance(30.0)
    limiter.consume("a")
    with pytest.raises(RateLimitError):
        limiter.consume("a")


def test_no_interval_admits_more_than_capacity() -> None:
    clock = FakeClock()
    limiter = KeyedRateLimiter(limit=3, window_seconds=10.0, now_fn=clock)
    admitted: list[float] = []
    for _ in range(200):
        try:
            limiter.consume("k")
            admitted.append(clock.now)
        except RateLimitError:
            pass
        clock.advance(0.7)
    for i, start in enumerate(admitted):
        in_window = [t for t in admitted[i:] if t < start + 10.0]
        assert len(in_window) <= 3


def test_snapshot_reports_remaining_points() -> None:
    clock = FakeClock(100.0)
    limiter = KeyedRateLimiter(limit=5, window_seconds=60.0, now_fn=clock)
    assert limiter.snapshot("a").points == 5
    limiter.consume("a")
    clock.advance(2.0)
    limiter.consume("a")
    window = limiter.snapshot("a")
    assert window.key == "a"
    assert window.points == 3
    assert window.window_start == 100.0
    assert window.window_seconds == 60.0


def test_idle_keys_are_swept() -> None:
    clock = FakeClock()
    limiter = KeyedRateLimiter(limit=5, window_seconds=1.0, now_fn=clock, sweep_every=4)
    for key in ("a", "b", "c"):
        limiter.consume(key)
    assert limiter.tracked_keys() == 3
    clock.advance(5.0)
    limiter.consume("d")
    assert limiter.tracked_keys() == 1


def test_reset_forgets_keys() -> None:
    limiter = KeyedRateLimiter(limit=1, window_seconds=60.0, now_fn=FakeClock())
    limiter.consume("a")
    limiter.reset("a")
    limiter.consume("a")
    limiter.reset()
    assert limiter.tracked_keys() == 0


def test_disabled_limiter_admits_everything() -> None:
    limiter = KeyedRateLimiter(limit=0, window_seconds=60.0)
    for _ in range(500):
        limiter.consume("a")
