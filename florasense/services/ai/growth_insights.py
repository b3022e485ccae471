"""
Growth and Flowering Insights
=============================
Narrative insights on flowering potential and growth, derived from the
observation, the predicted health status and the species ideal height.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from florasense.domain.observation import Observation
from florasense.domain.species_ideals import get_species_profile
from florasense.enums import GrowthStage, HealthStatus, LeafColor
from florasense.services.ai.model_training import PredictionResult

# Heights below this fraction of the species ideal count as stunted.
STUNTED_HEIGHT_FACTOR = 0.75
HIGH_FLOWER_COUNT = 5


@dataclass
class Insight:
    """One titled insight in a section of the report."""

    section: str  # "flowering" or "growth"
    title: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"section": self.section, "title": self.title, "message": self.message}


class InsightGenerator:
    """Produces one flowering insight and one growth insight per observation."""

    def generate(self, observation: Observation, prediction: PredictionResult) -> list[Insight]:
        return [
            self.flowering_insight(observation, prediction),
            self.growth_insight(observation),
        ]

    def flowering_insight(self, observation: Observation, prediction: PredictionResult) -> Insight:
        reproductive = GrowthStage(observation.stage).is_reproductive
        flowers = observation.flower_count

        if prediction.health_status == HealthStatus.HEALTHY and reproductive and flowers > HIGH_FLOWER_COUNT:
            return Insight(
                section="flowering",
                title="Excellent Potential",
                message=(
                    "High flower/bud count indicates strong reproductive health. "
                    "Maintain soil Phosphorus (P) levels."
                ),
            )
        if flowers == 0 and reproductive:
            return Insight(
                section="flowering",
                title="Flowering Suppression",
                message=(
                    "Zero flowers reported during a reproductive stage suggests severe stress "
                    "or incorrect light exposure."
                ),
            )
        return Insight(
            section="flowering",
            title="Observation",
            message="The current flower count is acceptable for the plant's health status and stage of growth.",
        )

    def growth_insight(self, observation: Observation) -> Insight:
        ideal_height = get_species_profile(observation.species).height.ideal

        if observation.height < ideal_height * STUNTED_HEIGHT_FACTOR:
            return Insight(
                section="growth",
                title="Stunted Growth Warning",
                message=(
                    f"Plant height ({observation.height} cm) is significantly below the species ideal "
                    f"({ideal_height} cm). Check root development and nutrition."
                ),
            )
        if observation.leaf_color == LeafColor.YELLOW and not observation.fertilizer:
            return Insight(
                section="growth",
                title="Fertilizer Need",
                message=(
                    "Yellow leaves combined with no recent fertilizer application strongly suggest "
                    "a macronutrient deficiency."
                ),
            )
        return Insight(
            section="growth",
            title="Consistent Growth",
            message="Physical parameters appear balanced. Focus on providing stable conditions.",
        )
