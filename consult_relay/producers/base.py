"""Abstract base class for result producers.

A producer fabricates every payload the server returns: HTTP consultations,
channel analyses and algorithm blueprints. Handlers only call these three
coroutines, so tests can swap in deterministic fakes.
"""

from __future__ import annotations

from typing import Any
from abc import ABC, abstractmethod

from ..state.analysis import AlgorithmRequest, AnalysisResult, AlgorithmBlueprint
from ..state.consultation import ConsultationRequest, ConsultationResult


class ResultProducer(ABC):
    """Source of generated consultation, analysis and algorithm payloads."""

    @abstractmethod
    async def consult(self, request: ConsultationRequest) -> ConsultationResult:
        """Produce a consultation for a validated request.

        Args:
            request: The validated consultation request.

        Returns:
            A ConsultationResult; the handler enforces its bounds.
        """

    @abstractmethod
    async def analyze(self, business_data: Any) -> AnalysisResult:
        """Produce a channel analysis for opaque client business data."""

    @abstractmethod
    async def design_algorithm(self, request: AlgorithmRequest) -> AlgorithmBlueprint:
        """Produce an algorithm blueprint for a validated request."""


__all__ = ["ResultProducer"]
