"""
Diagnosis Service

Runs one submitted observation through the whole advisor:
classifier predictions, species consistency check, recommendations,
insights and chart data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from florasense.domain.observation import Observation, PestIndicators
from florasense.schemas import DiagnosisRequest
from florasense.services.ai.growth_insights import Insight, InsightGenerator
from florasense.services.ai.model_training import PredictionResult
from florasense.services.ai.plant_health_advisor import PlantHealthAdvisor
from florasense.services.ai.recommendation_provider import (
    Recommendation,
    RecommendationContext,
    RecommendationProvider,
    RuleBasedRecommendationProvider,
)
from florasense.services.ai.species_consistency import ConsistencyResult, SpeciesConsistencyChecker
from florasense.services.application.analytics_service import AnalyticsReport, AnalyticsService
from florasense.utils.time import iso_now

logger = logging.getLogger(__name__)


@dataclass
class DiagnosisReport:
    """Everything shown for one diagnosis."""

    observation: Observation
    pest_indicators: PestIndicators
    prediction: PredictionResult
    consistency: ConsistencyResult
    recommendations: list[Recommendation]
    insights: list[Insight]
    analytics: AnalyticsReport
    generated_at: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "observation": self.observation.to_dict(),
            "pest_indicators": self.pest_indicators.to_dict(),
            "prediction": self.prediction.to_dict(),
            "consistency": self.consistency.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "insights": [i.to_dict() for i in self.insights],
            "analytics": self.analytics.to_dict(),
            "generated_at": self.generated_at,
        }


class DiagnosisService:
    """Orchestrates a full diagnosis around the trained advisor."""

    def __init__(
        self,
        advisor: PlantHealthAdvisor,
        consistency_checker: SpeciesConsistencyChecker | None = None,
        recommendation_provider: RecommendationProvider | None = None,
        insight_generator: InsightGenerator | None = None,
        analytics_service: AnalyticsService | None = None,
    ):
        self.advisor = advisor
        self.consistency_checker = consistency_checker or SpeciesConsistencyChecker()
        self.recommendation_provider = recommendation_provider or RuleBasedRecommendationProvider()
        self.insight_generator = insight_generator or InsightGenerator()
        self.analytics_service = analytics_service or AnalyticsService()

    def predict(self, request: DiagnosisRequest) -> PredictionResult:
        """Classifier labels only."""
        return self.advisor.predict(request.to_observation())

    def diagnose(self, request: DiagnosisRequest) -> DiagnosisReport:
        """
        Produce the full report for a validated request.

        Raises:
            UntrainedModelError: if the advisor has not been trained
            NotFoundError: if the species has no ideal profile
        """
        observation = request.to_observation()
        indicators = request.to_pest_indicators()

        prediction = self.advisor.predict(observation)
        consistency = self.consistency_checker.check(observation)
        recommendations = self.recommendation_provider.get_recommendations(
            RecommendationContext(observation=observation, prediction=prediction, pest_indicators=indicators)
        )
        insights = self.insight_generator.generate(observation, prediction)
        analytics = self.analytics_service.build(observation, indicators, consistency)

        logger.info(
            "Diagnosed %s (%s): health=%s growth=%s risk=%s consistent=%s",
            observation.species,
            observation.stage,
            prediction.health_status,
            prediction.growth_type,
            prediction.risk_level,
            consistency.is_consistent,
        )
        return DiagnosisReport(
            observation=observation,
            pest_indicators=indicators,
            prediction=prediction,
            consistency=consistency,
            recommendations=recommendations,
            insights=insights,
            analytics=analytics,
            generated_at=iso_now(),
        )
