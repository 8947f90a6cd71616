"""Unit tests for request boundary validators."""

from __future__ import annotations

import pytest

from consult_relay.errors import ValidationError
from consult_relay.state.consultation import CompanySize
from consult_relay.messages.validators import (
    parse_analysis_message,
    parse_algorithm_request,
    parse_consultation_request,
)


def _body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "businessQuery": "  grow revenue  ",
        "clientContext": {"industry": "retail", "companySize": "Enterprise", "region": "EU"},
    }
    body.update(overrides)
    return body


def test_consultation_request_is_normalized() -> None:
    request = parse_consultation_request(_body(consultationTier="premium"))
    assert request.query == "grow revenue"
    assert request.context.company_size is CompanySize.ENTERPRISE
    assert request.context.extra == {"region": "EU"}
    assert request.tier == "premium"


@pytest.mark.parametrize(
    ("body", "error_code"),
    [
        (["not", "an", "object"], "invalid_body"),
        (None, "invalid_body"),
        (_body(businessQuery="   "), "missing_business_query"),
        (_body(businessQuery=42), "missing_business_query"),
        (_body(businessQuery="x" * 5000), "business_query_too_long"),
        (_body(clientContext=None), "missing_client_context"),
        (_body(clientContext="retail"), "invalid_client_context"),
        (_body(clientContext={"companySize": "mid"}), "missing_industry"),
        (_body(clientContext={"industry": "retail"}), "missing_company_size"),
        (_body(clientContext={"industry": "retail", "companySize": "huge"}), "invalid_company_size"),
        (_body(clientContext={"industry": "retail", "companySize": 3}), "invalid_company_size"),
        (_body(consultationTier=5), "invalid_consultation_tier"),
    ],
)
def test_consultation_request_rejections(body: object, error_code: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_consultation_request(body)
    assert exc_info.value.error_code == error_code


def test_algorithm_request_optional_fields() -> None:
    request = parse_algorithm_request(
        {"problemDescription": "schedule shifts", "domainType": " ", "complexityLevel": "high"}
    )
    assert request.problem_description == "schedule shifts"
    assert request.domain_type is None
    assert request.complexity_level == "high"


def test_algorithm_request_requires_description() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_algorithm_request({"domainType": "finance"})
    assert exc_info.value.error_code == "missing_problem_description"


def test_analysis_message_requires_business_data() -> None:
    assert parse_analysis_message({"businessData": {"industry": "retail"}}) == {"industry": "retail"}
    with pytest.raises(ValidationError) as exc_info:
        parse_analysis_message({"type": "requestSuperintelligentAnalysis"})
    assert exc_info.value.error_code == "missing_business_data"
