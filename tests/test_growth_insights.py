"""
Growth Insight Tests
====================
"""

import pytest

from florasense.enums import GrowthType, HealthStatus, RiskLevel
from florasense.services.ai.growth_insights import InsightGenerator
from florasense.services.ai.model_training import PredictionResult


@pytest.fixture
def generator():
    return InsightGenerator()


HEALTHY = PredictionResult(HealthStatus.HEALTHY, GrowthType.NORMAL, RiskLevel.LOW)
MODERATE = PredictionResult(HealthStatus.MODERATE, GrowthType.NORMAL, RiskLevel.LOW)


class TestFloweringInsight:
    def test_excellent_potential(self, generator, make_observation):
        insight = generator.flowering_insight(make_observation(flower_count=6), HEALTHY)

        assert insight.title == "Excellent Potential"

    def test_five_flowers_is_not_enough(self, generator, make_observation):
        insight = generator.flowering_insight(make_observation(flower_count=5), HEALTHY)

        assert insight.title == "Observation"

    def test_needs_healthy_prediction(self, generator, make_observation):
        insight = generator.flowering_insight(make_observation(flower_count=20), MODERATE)

        assert insight.title == "Observation"

    @pytest.mark.parametrize("stage", ["Budding", "Flowering"])
    def test_flowering_suppression(self, generator, make_observation, stage):
        insight = generator.flowering_insight(make_observation(stage=stage, flower_count=0), HEALTHY)

        assert insight.title == "Flowering Suppression"

    def test_zero_flowers_in_vegetative_stage(self, generator, make_observation):
        insight = generator.flowering_insight(make_observation(stage="Vegetative", flower_count=0), HEALTHY)

        assert insight.title == "Observation"


class TestGrowthInsight:
    def test_stunted(self, generator, make_observation):
        # Rose ideal height is 60 cm: below 45 cm is stunted
        insight = generator.growth_insight(make_observation(height=40))

        assert insight.title == "Stunted Growth Warning"
        assert "40 cm" in insight.message

    def test_fertilizer_need(self, generator, make_observation):
        insight = generator.growth_insight(make_observation(leaf_color="Yellow", fertilizer=False))

        assert insight.title == "Fertilizer Need"

    def test_yellow_but_fertilized(self, generator, make_observation):
        insight = generator.growth_insight(make_observation(leaf_color="Yellow", fertilizer=True))

        assert insight.title == "Consistent Growth"

    def test_generate_returns_both_sections(self, generator, make_observation):
        insights = generator.generate(make_observation(), HEALTHY)

        assert [i.section for i in insights] == ["flowering", "growth"]
        assert insights[0].to_dict()["title"] == "Excellent Potential"
