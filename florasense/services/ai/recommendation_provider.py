"""
Recommendation Provider Interface
=================================
Abstract interface for plant care recommendation providers.

The default backend is **RuleBasedRecommendationProvider**, a decision engine
that combines the classifier's predicted labels with the species ideal
profile and the reported pest indicators.

The provider interface allows for easy swapping of recommendation
engines without changing the consumer code.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from florasense.domain.observation import Observation, PestIndicators
from florasense.domain.species_ideals import get_species_profile
from florasense.enums import GrowthType, LeafColor, Priority, RiskLevel
from florasense.services.ai.model_training import PredictionResult

logger = logging.getLogger(__name__)

# Moisture outside [0.8, 1.2] x species ideal triggers a watering change.
MOISTURE_LOW_FACTOR = 0.80
MOISTURE_HIGH_FACTOR = 1.20
# pH further than this from the species ideal triggers a soil correction.
PH_TOLERANCE = 0.7


@dataclass
class RecommendationContext:
    """Context for generating recommendations."""

    observation: Observation
    prediction: PredictionResult
    pest_indicators: PestIndicators = field(default_factory=PestIndicators)


@dataclass
class Recommendation:
    """A single recommendation."""

    action: str  # What to do
    priority: Priority
    category: str  # "risk", "pest", "watering", "soil", "growth", "maintenance"
    rationale: str | None = None  # Why this is recommended
    source: str = "rule_based"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "action": self.action,
            "priority": self.priority.value,
            "category": self.category,
            "rationale": self.rationale,
            "source": self.source,
        }


class RecommendationProvider(ABC):
    """
    Abstract base class for recommendation providers.

    Implementations can use rules, ML models, or LLMs to generate
    plant care recommendations based on context.
    """

    @abstractmethod
    def get_recommendations(self, context: RecommendationContext) -> list[Recommendation]:
        """
        Generate recommendations based on context.

        Args:
            context: RecommendationContext with plant state and predictions

        Returns:
            List of Recommendation objects, never empty
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider identifier."""
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if provider is available/ready."""
        pass


class RuleBasedRecommendationProvider(RecommendationProvider):
    """
    Rule-based decision engine.

    Rules run in a fixed order (risk, pests, watering, soil pH, growth) and
    each contributes at most one recommendation. When nothing fires, a single
    "maintain current conditions" recommendation is returned.
    """

    @property
    def provider_name(self) -> str:
        return "rule_based"

    @property
    def is_available(self) -> bool:
        return True  # Always available

    def get_recommendations(self, context: RecommendationContext) -> list[Recommendation]:
        """Generate rule-based recommendations from predictions and readings."""
        recommendations: list[Recommendation] = []

        for rule in (
            self._check_risk,
            self._check_pests,
            self._check_moisture,
            self._check_ph,
            self._check_growth,
        ):
            recommendation = rule(context)
            if recommendation is not None:
                recommendations.append(recommendation)

        if not recommendations:
            recommendations.append(
                Recommendation(
                    action="Everything looks good! Maintain current conditions for optimal health.",
                    priority=Priority.LOW,
                    category="maintenance",
                    rationale="No issues detected",
                )
            )

        logger.debug("Generated %d recommendations: %s", len(recommendations), [r.category for r in recommendations])
        return recommendations

    def _check_risk(self, context: RecommendationContext) -> Recommendation | None:
        if context.prediction.risk_level != RiskLevel.HIGH:
            return None
        return Recommendation(
            action=(
                "IMMEDIATE ATTENTION REQUIRED: Start checking for environmental extremes "
                "and pest visibility immediately."
            ),
            priority=Priority.URGENT,
            category="risk",
            rationale="The model predicts a High Risk Level",
        )

    def _check_pests(self, context: RecommendationContext) -> Recommendation | None:
        if not context.pest_indicators.any_present:
            return None
        return Recommendation(
            action=(
                "Pest Control Recommended: Use a targeted organic or chemical pesticide "
                "suitable for the detected pest type."
            ),
            priority=Priority.HIGH,
            category="pest",
            rationale=f"{context.pest_indicators.score} of 4 pest indicators present",
        )

    def _check_moisture(self, context: RecommendationContext) -> Recommendation | None:
        ideal = get_species_profile(context.observation.species).moisture.ideal
        moisture = context.observation.moisture

        if moisture < ideal * MOISTURE_LOW_FACTOR:
            return Recommendation(
                action="Watering Adjustment: Increase watering frequency to prevent wilting.",
                priority=Priority.HIGH,
                category="watering",
                rationale=f"Soil moisture {moisture}% is significantly below the ideal {ideal}%",
            )
        if moisture > ideal * MOISTURE_HIGH_FACTOR:
            return Recommendation(
                action="Watering Adjustment: Ensure proper drainage to avoid root rot.",
                priority=Priority.HIGH,
                category="watering",
                rationale=f"Soil moisture {moisture}% is well above the ideal {ideal}%",
            )
        return None

    def _check_ph(self, context: RecommendationContext) -> Recommendation | None:
        ideal = get_species_profile(context.observation.species).ph.ideal
        ph = context.observation.ph

        if ph < ideal - PH_TOLERANCE:
            return Recommendation(
                action="Soil Correction (Low pH): Add lime or wood ash to raise the pH.",
                priority=Priority.MEDIUM,
                category="soil",
                rationale=f"Soil pH {ph} is too acidic for an ideal of {ideal}",
            )
        if ph > ideal + PH_TOLERANCE:
            return Recommendation(
                action="Soil Correction (High pH): Add sulfur or peat moss to lower the pH.",
                priority=Priority.MEDIUM,
                category="soil",
                rationale=f"Soil pH {ph} is too alkaline for an ideal of {ideal}",
            )
        return None

    def _check_growth(self, context: RecommendationContext) -> Recommendation | None:
        pale_or_yellow = context.observation.leaf_color in (LeafColor.YELLOW, LeafColor.PALE)
        if context.prediction.growth_type != GrowthType.SLOW or not pale_or_yellow:
            return None
        return Recommendation(
            action="Growth Improvement: Apply a balanced fertilizer.",
            priority=Priority.MEDIUM,
            category="growth",
            rationale="Model predicts Slow Growth and leaf colour suggests possible Nitrogen deficiency",
        )
