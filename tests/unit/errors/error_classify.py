"""Unit tests for exception classification."""

from __future__ import annotations

import pytest

from consult_relay.errors import (
    RateLimitError,
    ValidationError,
    SessionCapacityError,
    InternalProcessingError,
    classify_error,
)


@pytest.mark.parametrize(
    ("exc", "label"),
    [
        (ValidationError("missing_business_query", "required"), "validation"),
        (RateLimitError(retry_in=1.0, limit=1, window_seconds=60.0), "rate_limit"),
        (InternalProcessingError(), "internal"),
        (SessionCapacityError(active=1, limit=1), "capacity"),
        (TimeoutError(), "timeout"),
        (ConnectionResetError(), "connection"),
        (KeyError("x"), "unknown"),
    ],
)
def test_classify_error(exc: BaseException, label: str) -> None:
    assert classify_error(exc) == label


def test_rate_limit_error_clamps_metadata() -> None:
    err = RateLimitError(retry_in=-3, limit=-1, window_seconds=-2, key="k")
    assert (err.retry_in, err.limit, err.window_seconds, err.key) == (0.0, 0, 0.0, "k")


@pytest.mark.parametrize(("retry_in", "header"), [(0.0, 1), (0.2, 1), (4.0, 4), (4.01, 5)])
def test_retry_after_rounds_up_to_whole_seconds(retry_in: float, header: int) -> None:
    err = RateLimitError(retry_in=retry_in, limit=100, window_seconds=60.0)
    assert err.retry_after_seconds == header
