"""
Diagnosis Analytics Service

Builds the chart-ready data behind a diagnosis report:
- Factor contribution scores (higher = worse)
- User readings against the species ideal
- Individual pest and disease indicators

Rendering is left to the client; every chart is returned as labels plus
datasets.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from florasense.domain.observation import Observation, PestIndicators
from florasense.domain.species_ideals import get_species_profile
from florasense.enums import LeafColor
from florasense.services.ai.observation_features import CATEGORICAL_MAPPING
from florasense.services.ai.species_consistency import ConsistencyResult

logger = logging.getLogger(__name__)

# Environmental stress is flagged when any reading falls below these.
STRESS_MOISTURE = 40
STRESS_PH = 5.5
STRESS_LIGHT = 5


@dataclass
class ChartData:
    """One chart: its type, title, category labels and data series."""

    chart_type: str  # "pie", "line", "bar"
    title: str
    labels: list[str]
    datasets: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.chart_type,
            "title": self.title,
            "labels": self.labels,
            "datasets": self.datasets,
        }


@dataclass
class AnalyticsReport:
    """All charts for one diagnosis."""

    factor_contribution: ChartData
    ideal_vs_user: ChartData
    pest_indicators: ChartData

    def to_dict(self) -> dict[str, Any]:
        return {
            "factor_contribution": self.factor_contribution.to_dict(),
            "ideal_vs_user": self.ideal_vs_user.to_dict(),
            "pest_indicators": self.pest_indicators.to_dict(),
        }


class AnalyticsService:
    """Chart data for a diagnosed observation."""

    def build(
        self,
        observation: Observation,
        pest_indicators: PestIndicators,
        consistency: ConsistencyResult,
    ) -> AnalyticsReport:
        return AnalyticsReport(
            factor_contribution=self.factor_contribution(observation, pest_indicators, consistency),
            ideal_vs_user=self.ideal_vs_user(observation),
            pest_indicators=self.pest_indicator_chart(pest_indicators),
        )

    def factor_contribution(
        self,
        observation: Observation,
        pest_indicators: PestIndicators,
        consistency: ConsistencyResult,
    ) -> ChartData:
        """Score each stress factor; pest score is already on a 0-4 scale."""
        leaf_key = LeafColor(observation.leaf_color).value
        leaf_color_score = 4 - CATEGORICAL_MAPPING["leaf_color"][leaf_key]
        wilting_score = 4 if observation.wilting else 1
        environment_stressed = (
            observation.moisture < STRESS_MOISTURE or observation.ph < STRESS_PH or observation.light < STRESS_LIGHT
        )
        environment_score = 3 if environment_stressed else 1
        consistency_score = 1 if consistency.is_consistent else 4

        return ChartData(
            chart_type="pie",
            title="Diagnosis Factor Contribution Score (Higher = Worse)",
            labels=[
                "Pest/Disease Indicator",
                "Plant Health Inputs (Color/Wilting)",
                "Environmental Stress (Env.)",
                "Species Consistency Mismatch",
            ],
            datasets=[
                {
                    "label": "Score",
                    "data": [
                        pest_indicators.score,
                        leaf_color_score + wilting_score,
                        environment_score,
                        consistency_score,
                    ],
                }
            ],
        )

    def ideal_vs_user(self, observation: Observation) -> ChartData:
        profile = get_species_profile(observation.species)
        return ChartData(
            chart_type="line",
            title="Ideal vs. User Environmental Inputs",
            labels=["Soil Moisture (%)", "Soil pH", "Light (Hours/Day)", "Plant Height (cm)"],
            datasets=[
                {
                    "label": "Your Input",
                    "data": [observation.moisture, observation.ph, observation.light, observation.height],
                },
                {
                    "label": f"{profile.species.value} Ideal",
                    "data": [profile.moisture.ideal, profile.ph.ideal, profile.light.ideal, profile.height.ideal],
                },
            ],
        )

    def pest_indicator_chart(self, pest_indicators: PestIndicators) -> ChartData:
        return ChartData(
            chart_type="bar",
            title="Individual Pest and Disease Indicators",
            labels=["White Powder", "Holes in Leaves", "Sticky Leaves", "Visible Insects"],
            datasets=[
                {
                    "label": "Presence (1 = Yes, 0 = No)",
                    "data": [1 if present else 0 for present in pest_indicators.flags],
                }
            ],
        )
