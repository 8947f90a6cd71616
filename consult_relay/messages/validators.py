"""Boundary validators that turn raw JSON bodies into request schemas.

Every failure raises ValidationError with a machine-readable error code;
nothing past these functions ever sees an unvalidated body.
"""

from __future__ import annotations

from typing import Any

from ..errors import ValidationError
from ..state.analysis import AlgorithmRequest
from ..state.consultation import ClientContext, CompanySize, ConsultationRequest
from ..config.limits import (
    CONTEXT_FIELD_MAX_CHARS,
    CONSULTATION_QUERY_MAX_CHARS,
    PROBLEM_DESCRIPTION_MAX_CHARS,
)

_COMPANY_SIZES = ", ".join(size.value for size in CompanySize)


def require_object(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError("invalid_body", "request body must be a JSON object")
    return body


def require_text(
    raw: Any,
    *,
    field_label: str,
    missing_error_code: str,
    too_long_error_code: str,
    max_chars: int,
) -> str:
    """Return ``raw`` stripped, rejecting non-strings, blanks and oversize text."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(missing_error_code, f"{field_label} is required and cannot be empty")
    text = raw.strip()
    if len(text) > max_chars:
        raise ValidationError(too_long_error_code, f"{field_label} exceeds {max_chars} characters")
    return text


def optional_text(
    raw: Any,
    *,
    field_label: str,
    invalid_error_code: str,
    max_chars: int = CONTEXT_FIELD_MAX_CHARS,
) -> str | None:
    """Validate an optional short string; blank values collapse to None."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValidationError(invalid_error_code, f"{field_label} must be a string")
    text = raw.strip()
    if not text:
        return None
    if len(text) > max_chars:
        raise ValidationError(invalid_error_code, f"{field_label} exceeds {max_chars} characters")
    return text


def parse_company_size(raw: Any) -> CompanySize:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("missing_company_size", "clientContext.companySize is required")
    if isinstance(raw, str):
        try:
            return CompanySize(raw.strip().lower())
        except ValueError:
            pass
    raise ValidationError(
        "invalid_company_size",
        f"clientContext.companySize must be one of: {_COMPANY_SIZES}",
    )


def parse_client_context(raw: Any) -> ClientContext:
    if raw is None:
        raise ValidationError("missing_client_context", "clientContext is required")
    if not isinstance(raw, dict):
        raise ValidationError("invalid_client_context", "clientContext must be a JSON object")
    industry = require_text(
        raw.get("industry"),
        field_label="clientContext.industry",
        missing_error_code="missing_industry",
        too_long_error_code="industry_too_long",
        max_chars=CONTEXT_FIELD_MAX_CHARS,
    )
    company_size = parse_company_size(raw.get("companySize"))
    extra = {key: value for key, value in raw.items() if key not in {"industry", "companySize"}}
    return ClientContext(industry=industry, company_size=company_size, extra=extra)


def parse_consultation_request(body: Any) -> ConsultationRequest:
    """Validate a ``POST /api/v1/consultation`` body.

    Expected shape::

        {"businessQuery": str,
         "clientContext": {"industry": str, "companySize": str, ...},
         "consultationTier": str (optional)}

    Raises:
        ValidationError: On any missing or malformed field.
    """
    data = require_object(body)
    query = require_text(
        data.get("businessQuery"),
        field_label="businessQuery",
        missing_error_code="missing_business_query",
        too_long_error_code="business_query_too_long",
        max_chars=CONSULTATION_QUERY_MAX_CHARS,
    )
    context = parse_client_context(data.get("clientContext"))
    tier = optional_text(
        data.get("consultationTier"),
        field_label="consultationTier",
        invalid_error_code="invalid_consultation_tier",
    )
    return ConsultationRequest(query=query, context=context, tier=tier or "standard")


def parse_algorithm_request(body: Any) -> AlgorithmRequest:
    """Validate a ``POST /api/v1/algorithm-generation`` body."""
    data = require_object(body)
    description = require_text(
        data.get("problemDescription"),
        field_label="problemDescription",
        missing_error_code="missing_problem_description",
        too_long_error_code="problem_description_too_long",
        max_chars=PROBLEM_DESCRIPTION_MAX_CHARS,
    )
    return AlgorithmRequest(
        problem_description=description,
        domain_type=optional_text(
            data.get("domainType"),
            field_label="domainType",
            invalid_error_code="invalid_domain_type",
        ),
        complexity_level=optional_text(
            data.get("complexityLevel"),
            field_label="complexityLevel",
            invalid_error_code="invalid_complexity_level",
        ),
    )


def parse_analysis_message(msg: dict[str, Any]) -> Any:
    """Return the opaque ``businessData`` of an analysis request frame."""
    business_data = msg.get("businessData")
    if business_data is None:
        raise ValidationError("missing_business_data", "businessData is required")
    return business_data


__all__ = [
    "require_object",
    "require_text",
    "optional_text",
    "parse_company_size",
    "parse_client_context",
    "parse_consultation_request",
    "parse_algorithm_request",
    "parse_analysis_message",
]
