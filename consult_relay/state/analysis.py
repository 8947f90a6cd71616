"""Channel analysis and algorithm blueprint schemas."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """Result of a ``requestSuperintelligentAnalysis`` channel message."""

    market_opportunities: dict[str, Any]
    competitive_landscape: dict[str, Any]
    operational_optimization: dict[str, Any]
    financial_projections: dict[str, Any]
    estimated_value: int

    def as_payload(self) -> dict[str, Any]:
        return {
            "marketOpportunities": self.market_opportunities,
            "competitiveLandscape": self.competitive_landscape,
            "operationalOptimization": self.operational_optimization,
            "financialProjections": self.financial_projections,
            "estimatedValue": max(0, int(self.estimated_value)),
        }


@dataclass(frozen=True)
class AlgorithmRequest:
    """Validated ``POST /api/v1/algorithm-generation`` body."""

    problem_description: str
    domain_type: str | None = None
    complexity_level: str | None = None


@dataclass(frozen=True)
class AlgorithmBlueprint:
    """Generated algorithm description."""

    problem_analysis: dict[str, Any]
    solution_architecture: dict[str, Any]
    implementation_steps: list[str]
    optimization_protocols: list[str]

    def as_payload(self) -> dict[str, Any]:
        return {
            "problemAnalysis": self.problem_analysis,
            "solutionArchitecture": self.solution_architecture,
            "implementationSteps": list(self.implementation_steps),
            "optimizationProtocols": list(self.optimization_protocols),
            "patentProtection": "This algorithm generated using patent-protected technology",
            "licenseRequired": True,
        }


__all__ = ["AnalysisResult", "AlgorithmRequest", "AlgorithmBlueprint"]
