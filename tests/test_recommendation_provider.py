"""
Recommendation Provider Tests
=============================
Tests for the rule-based recommendation engine.
"""

import pytest

from florasense.domain.observation import PestIndicators
from florasense.enums import GrowthType, HealthStatus, InsectVisibility, Priority, RiskLevel
from florasense.services.ai.model_training import PredictionResult
from florasense.services.ai.recommendation_provider import (
    RecommendationContext,
    RuleBasedRecommendationProvider,
)


@pytest.fixture
def provider():
    return RuleBasedRecommendationProvider()


def _prediction(health=HealthStatus.HEALTHY, growth=GrowthType.NORMAL, risk=RiskLevel.LOW):
    return PredictionResult(health_status=health, growth_type=growth, risk_level=risk)


def _categories(recommendations):
    return [r.category for r in recommendations]


class TestRuleBasedRecommendationProvider:
    def test_provider_metadata(self, provider):
        assert provider.provider_name == "rule_based"
        assert provider.is_available

    def test_all_good(self, provider, make_observation):
        context = RecommendationContext(observation=make_observation(), prediction=_prediction())
        recommendations = provider.get_recommendations(context)

        assert len(recommendations) == 1
        assert recommendations[0].category == "maintenance"
        assert recommendations[0].priority == Priority.LOW
        assert recommendations[0].action.startswith("Everything looks good!")

    def test_high_risk_is_urgent(self, provider, make_observation):
        context = RecommendationContext(observation=make_observation(), prediction=_prediction(risk=RiskLevel.HIGH))
        recommendations = provider.get_recommendations(context)

        assert recommendations[0].category == "risk"
        assert recommendations[0].priority == Priority.URGENT
        assert "IMMEDIATE ATTENTION REQUIRED" in recommendations[0].action

    def test_any_pest_indicator(self, provider, make_observation):
        context = RecommendationContext(
            observation=make_observation(),
            prediction=_prediction(),
            pest_indicators=PestIndicators(insect_visibility=InsectVisibility.FEW),
        )

        assert _categories(provider.get_recommendations(context)) == ["pest"]

    @pytest.mark.parametrize(
        ("moisture", "keyword"),
        [(40, "Increase watering"), (80, "drainage")],
    )
    def test_moisture_far_from_ideal(self, provider, make_observation, moisture, keyword):
        # Rose ideal moisture is 60%: below 48 or above 72 triggers
        context = RecommendationContext(observation=make_observation(moisture=moisture), prediction=_prediction())
        recommendations = provider.get_recommendations(context)

        assert _categories(recommendations) == ["watering"]
        assert keyword in recommendations[0].action

    def test_moisture_near_ideal_is_ignored(self, provider, make_observation):
        context = RecommendationContext(observation=make_observation(moisture=70), prediction=_prediction())

        assert _categories(provider.get_recommendations(context)) == ["maintenance"]

    @pytest.mark.parametrize(("ph", "keyword"), [(5.5, "lime"), (7.5, "sulfur")])
    def test_ph_far_from_ideal(self, provider, make_observation, ph, keyword):
        context = RecommendationContext(observation=make_observation(ph=ph), prediction=_prediction())
        recommendations = provider.get_recommendations(context)

        assert _categories(recommendations) == ["soil"]
        assert keyword in recommendations[0].action

    def test_slow_growth_with_yellow_leaves(self, provider, make_observation):
        context = RecommendationContext(
            observation=make_observation(leaf_color="Yellow"),
            prediction=_prediction(growth=GrowthType.SLOW),
        )
        recommendations = provider.get_recommendations(context)

        assert _categories(recommendations) == ["growth"]
        assert "balanced fertilizer" in recommendations[0].action

    def test_slow_growth_with_normal_leaves_is_ignored(self, provider, make_observation):
        context = RecommendationContext(observation=make_observation(), prediction=_prediction(growth=GrowthType.SLOW))

        assert _categories(provider.get_recommendations(context)) == ["maintenance"]

    def test_rules_keep_their_order(self, provider, make_observation):
        context = RecommendationContext(
            observation=make_observation(moisture=30, ph=5.0, leaf_color="Pale"),
            prediction=_prediction(growth=GrowthType.SLOW, risk=RiskLevel.HIGH),
            pest_indicators=PestIndicators(white_powder=True),
        )

        assert _categories(provider.get_recommendations(context)) == ["risk", "pest", "watering", "soil", "growth"]

    def test_to_dict(self, provider, make_observation):
        context = RecommendationContext(observation=make_observation(), prediction=_prediction())
        payload = provider.get_recommendations(context)[0].to_dict()

        assert payload["priority"] == "low"
        assert payload["source"] == "rule_based"
