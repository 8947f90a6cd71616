"""Random-but-plausible producer used by the running server.

Consultation value scales a fixed base by the company-size multiplier and the
current superintelligence level. Analysis value is drawn uniformly from
[ANALYSIS_VALUE_MIN, ANALYSIS_VALUE_MIN + ANALYSIS_VALUE_SPAN).
"""

from __future__ import annotations

import uuid
import random
import logging
from typing import Any

from .base import ResultProducer
from ..handlers.platform import PlatformState
from ..state.analysis import AlgorithmRequest, AnalysisResult, AlgorithmBlueprint
from ..state.consultation import ConsultationRequest, ConsultationResult
from ..config.branding import CONSULTATION_SIGNATURE_PREFIX
from ..config.producer import (
    PRODUCER_SEED,
    ANALYSIS_VALUE_MIN,
    ANALYSIS_VALUE_SPAN,
    CONSULTATION_BASE_VALUE,
    CONSULTATION_CERTAINTY,
    COMPANY_SIZE_MULTIPLIERS,
)

logger = logging.getLogger(__name__)

_ROADMAP_PHASES = (
    ("Discovery", "Map revenue streams and competitive exposure", 30),
    ("Amplification", "Deploy revenue amplification protocols", 90),
    ("Domination", "Scale market domination strategy", 180),
)

_BASE_STEPS = [
    "Decompose the problem into tractable sub-problems",
    "Select candidate solution strategies",
    "Evaluate strategies against domain constraints",
    "Assemble the winning strategy into an execution plan",
]

_EXTRA_STEPS = {
    "high": ["Add adaptive feedback loops", "Stress-test against adversarial scenarios"],
    "medium": ["Add adaptive feedback loops"],
}


class SyntheticResultProducer(ResultProducer):
    """Fabricates payloads from a seeded RNG and the live platform metrics."""

    def __init__(self, platform: PlatformState, rng: random.Random | None = None):
        self._platform = platform
        if rng is None:
            rng = random.Random(PRODUCER_SEED) if PRODUCER_SEED else random.Random()
        self._rng = rng

    async def consult(self, request: ConsultationRequest) -> ConsultationResult:
        level = self._platform.snapshot().superintelligence_level
        multiplier = COMPANY_SIZE_MULTIPLIERS.get(request.context.company_size.value, 1.0)
        value = round(CONSULTATION_BASE_VALUE * multiplier * level / 100)
        industry = request.context.industry
        logger.debug("consultation value=%s industry=%s", value, industry)
        return ConsultationResult(
            value=value,
            insights={
                "revenueAmplification": f"Reposition {industry} offerings around premium outcomes",
                "competitiveElimination": "Outpace incumbents on decision latency",
                "operationalTranscendence": "Automate repeatable operational decisions",
                "marketDomination": "Concentrate spend on the highest-yield segments",
                "profitMaximization": "Reprice against delivered value",
            },
            roadmap=[
                {"phase": name, "objective": objective, "durationDays": days}
                for name, objective, days in _ROADMAP_PHASES
            ],
            roi={
                "twelveMonthMultiple": round(self._rng.uniform(10, 25), 1),
                "paybackMonths": self._rng.randint(2, 6),
                "confidence": CONSULTATION_CERTAINTY,
            },
            certainty=CONSULTATION_CERTAINTY,
            signature=self._signature(),
        )

    async def analyze(self, business_data: Any) -> AnalysisResult:
        value = ANALYSIS_VALUE_MIN + self._rng.randrange(max(1, ANALYSIS_VALUE_SPAN))
        focus = _describe(business_data)
        return AnalysisResult(
            market_opportunities={
                "focus": focus,
                "opportunityCount": self._rng.randint(3, 12),
                "priority": "BILLION_DOLLAR_EXPANSION",
            },
            competitive_landscape={
                "threatLevel": self._rng.choice(["LOW", "MODERATE", "ELEVATED"]),
                "advantage": "DECISIVE",
            },
            operational_optimization={
                "efficiencyGain": round(self._rng.uniform(15, 45), 1),
                "automationCoverage": round(self._rng.uniform(40, 90), 1),
            },
            financial_projections={
                "revenueGrowth": round(self._rng.uniform(20, 80), 1),
                "marginExpansion": round(self._rng.uniform(5, 20), 1),
            },
            estimated_value=value,
        )

    async def design_algorithm(self, request: AlgorithmRequest) -> AlgorithmBlueprint:
        complexity = (request.complexity_level or "medium").lower()
        return AlgorithmBlueprint(
            problem_analysis={
                "summary": request.problem_description[:200],
                "patternComplexity": "ASTRONOMICAL",
            },
            solution_architecture={
                "domain": request.domain_type or "general",
                "layers": ["perception", "reasoning", "optimization"],
            },
            implementation_steps=_BASE_STEPS + _EXTRA_STEPS.get(complexity, []),
            optimization_protocols=[
                "Continuous performance monitoring",
                "Periodic recalibration",
            ],
        )

    def _signature(self) -> str:
        return f"{CONSULTATION_SIGNATURE_PREFIX}-{uuid.UUID(int=self._rng.getrandbits(128)).hex[:12]}"


def _describe(business_data: Any) -> str:
    if isinstance(business_data, dict):
        for key in ("industry", "company", "focus"):
            value = business_data.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()[:80]
    if isinstance(business_data, str) and business_data.strip():
        return business_data.strip()[:80]
    return "general"


__all__ = ["SyntheticResultProducer"]
