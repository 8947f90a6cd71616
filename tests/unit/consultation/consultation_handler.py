"""Unit tests for the consultation and algorithm handlers."""

from __future__ import annotations

import asyncio
import logging
import math

import pytest

from consult_relay.config.branding import (
    CONSULTATION_FALLBACK,
    ALGORITHM_ERROR_MESSAGE,
    CONSULTATION_ERROR_MESSAGE,
)
from consult_relay.errors import RateLimitError, ValidationError, InternalProcessingError
from consult_relay.handlers.algorithm import AlgorithmDesigner
from consult_relay.handlers.consultation import ConsultationHandler
from consult_relay.handlers.keyed_limits import KeyedRateLimiter
from consult_relay.state.consultation import CompanySize
from tests.helpers.fakes import FakeClock, FakeProducer, FailingProducer

VALID_BODY = {
    "businessQuery": "reduce churn",
    "clientContext": {"industry": "retail", "companySize": "mid"},
}


def _handler(producer: FakeProducer, limit: int = 100) -> ConsultationHandler:
    limiter = KeyedRateLimiter(limit=limit, window_seconds=60.0, now_fn=FakeClock())
    return ConsultationHandler(limiter, producer)


def test_valid_request_returns_bounded_result() -> None:
    producer = FakeProducer()
    result = asyncio.run(_handler(producer).handle(VALID_BODY, "1.2.3.4"))

    assert 0 <= result.certainty <= 100
    assert result.value >= 0
    request = producer.consult_calls[0]
    assert request.query == "reduce churn"
    assert request.context.industry == "retail"
    assert request.context.company_size is CompanySize.MID
    assert request.tier == "standard"


@pytest.mark.parametrize(
    ("certainty", "value", "expected_certainty", "expected_value"),
    [
        (140.0, -5, 100.0, 0),
        (-3.0, 10.6, 0.0, 11),
        (math.nan, 7, 0.0, 7),
    ],
)
def test_out_of_range_results_are_clamped(
    certainty: float,
    value: float,
    expected_certainty: float,
    expected_value: int,
) -> None:
    producer = FakeProducer(certainty=certainty, value=value)  # type: ignore[arg-type]
    result = asyncio.run(_handler(producer).handle(VALID_BODY, "k"))
    assert result.certainty == expected_certainty
    assert result.value == expected_value
    assert isinstance(result.value, int)


def test_missing_business_query_is_validation_error() -> None:
    producer = FakeProducer()
    body = {"clientContext": {"industry": "retail", "companySize": "mid"}}
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(_handler(producer).handle(body, "k"))
    assert exc_info.value.error_code == "missing_business_query"
    assert producer.consult_calls == []


def test_rate_limited_request_never_reaches_producer() -> None:
    producer = FakeProducer()
    handler = _handler(producer, limit=2)

    async def _run() -> None:
        await handler.handle(VALID_BODY, "k")
        await handler.handle(VALID_BODY, "k")
        with pytest.raises(RateLimitError):
            await handler.handle(VALID_BODY, "k")

    asyncio.run(_run())
    assert len(producer.consult_calls) == 2


def test_rate_limit_is_checked_before_validation() -> None:
    handler = _handler(FakeProducer(), limit=1)

    async def _run() -> None:
        with pytest.raises(ValidationError):
            await handler.handle({}, "k")
        with pytest.raises(RateLimitError):
            await handler.handle(VALID_BODY, "k")

    asyncio.run(_run())


def test_producer_failure_becomes_internal_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    with pytest.raises(InternalProcessingError) as exc_info:
        asyncio.run(_handler(FailingProducer()).handle(VALID_BODY, "k"))

    err = exc_info.value
    assert err.public_message == CONSULTATION_ERROR_MESSAGE
    assert err.fallback == CONSULTATION_FALLBACK
    assert "hunter2" not in str(err)
    assert isinstance(err.__cause__, RuntimeError)
    assert any(record.exc_info for record in caplog.records)


def test_algorithm_designer_happy_path() -> None:
    producer = FakeProducer()
    limiter = KeyedRateLimiter(limit=5, window_seconds=60.0, now_fn=FakeClock())
    body = {"problemDescription": "route trucks", "domainType": "logistics"}
    blueprint = asyncio.run(AlgorithmDesigner(limiter, producer).handle(body, "k"))
    assert blueprint.solution_architecture == {"domain": "logistics"}
    assert producer.design_calls[0].complexity_level is None


def test_algorithm_designer_failure_has_licensing_message() -> None:
    limiter = KeyedRateLimiter(limit=5, window_seconds=60.0, now_fn=FakeClock())
    designer = AlgorithmDesigner(limiter, FailingProducer())
    with pytest.raises(InternalProcessingError) as exc_info:
        asyncio.run(designer.handle({"problemDescription": "x"}, "k"))
    assert exc_info.value.public_message == ALGORITHM_ERROR_MESSAGE
    assert exc_info.value.fallback is None
