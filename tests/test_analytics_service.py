"""
Diagnosis Analytics Tests
=========================
Tests for the chart data built for a diagnosis.
"""

import pytest

from florasense.domain.observation import PestIndicators
from florasense.enums import InsectVisibility
from florasense.services.ai.species_consistency import SpeciesConsistencyChecker
from florasense.services.application.analytics_service import AnalyticsService


@pytest.fixture
def service():
    return AnalyticsService()


@pytest.fixture
def checker():
    return SpeciesConsistencyChecker()


class TestFactorContribution:
    def test_healthy_observation(self, service, checker, make_observation):
        observation = make_observation()
        chart = service.factor_contribution(observation, PestIndicators(), checker.check(observation))

        assert chart.chart_type == "pie"
        # pest 0, Normal leaves (4 - 2) + no wilting (1), no stress, consistent
        assert chart.datasets[0]["data"] == [0, 3, 1, 1]

    def test_stressed_observation(self, service, checker, make_observation):
        observation = make_observation(moisture=30, leaf_color="Pale", wilting=True)
        indicators = PestIndicators(white_powder=True, sticky_leaves=True)
        chart = service.factor_contribution(observation, indicators, checker.check(observation))

        assert chart.datasets[0]["data"] == [2, 8, 3, 4]

    @pytest.mark.parametrize("overrides", [{"ph": 5.4}, {"light": 4}])
    def test_environmental_stress_thresholds(self, service, checker, make_observation, overrides):
        observation = make_observation(**overrides)
        chart = service.factor_contribution(observation, PestIndicators(), checker.check(observation))

        assert chart.datasets[0]["data"][2] == 3


class TestOtherCharts:
    def test_ideal_vs_user(self, service, make_observation):
        chart = service.ideal_vs_user(make_observation(moisture=50))

        assert chart.chart_type == "line"
        assert chart.datasets[0]["data"] == [50, 6.5, 8.0, 65.0]
        assert chart.datasets[1]["label"] == "Rose Ideal"
        assert chart.datasets[1]["data"] == [60, 6.5, 8, 60]

    def test_pest_indicator_chart(self, service):
        indicators = PestIndicators(holes_in_leaves=True, insect_visibility=InsectVisibility.SEVERE)
        chart = service.pest_indicator_chart(indicators)

        assert chart.chart_type == "bar"
        assert chart.datasets[0]["data"] == [0, 1, 0, 1]

    def test_build_report(self, service, checker, make_observation):
        observation = make_observation()
        report = service.build(observation, PestIndicators(), checker.check(observation)).to_dict()

        assert set(report) == {"factor_contribution", "ideal_vs_user", "pest_indicators"}
        assert report["pest_indicators"]["type"] == "bar"
