"""Consultation request and result schemas.

ConsultationRequest is built per HTTP request by the boundary validators,
consumed by the handler and discarded. ConsultationResult is what a result
producer returns; ``bounded()`` enforces the reporting invariants.
"""

from __future__ import annotations

import enum
import math
from typing import Any
from dataclasses import field, replace, dataclass


class CompanySize(str, enum.Enum):
    """Accepted ``clientContext.companySize`` values."""

    STARTUP = "startup"
    MID = "mid"
    LARGE = "large"
    ENTERPRISE = "enterprise"


@dataclass(frozen=True)
class ClientContext:
    """Structured client context; unknown fields are kept in ``extra``."""

    industry: str
    company_size: CompanySize
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConsultationRequest:
    """Validated consultation request."""

    query: str
    context: ClientContext
    tier: str = "standard"


@dataclass(frozen=True)
class ConsultationResult:
    """Generated consultation.

    Attributes:
        value: Monetary magnitude in whole currency units.
        insights: Strategic recommendation section.
        roadmap: Implementation plan section.
        roi: Projected return section.
        certainty: Percentage reported to the client.
        signature: Provenance tag of the generating instance.
    """

    value: int
    insights: dict[str, Any]
    roadmap: list[dict[str, Any]]
    roi: dict[str, Any]
    certainty: float
    signature: str

    def bounded(self) -> ConsultationResult:
        """Return a copy with certainty in [0, 100] and a non-negative int value."""
        certainty = float(self.certainty)
        if math.isnan(certainty):
            certainty = 0.0
        certainty = min(100.0, max(0.0, certainty))
        value = max(0, int(round(self.value)))
        if certainty == self.certainty and value == self.value and isinstance(self.value, int):
            return self
        return replace(self, certainty=certainty, value=value)


__all__ = [
    "CompanySize",
    "ClientContext",
    "ConsultationRequest",
    "ConsultationResult",
]
