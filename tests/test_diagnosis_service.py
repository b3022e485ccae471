"""
Diagnosis Service Tests
=======================
"""

from unittest.mock import MagicMock

import pytest

from florasense.domain.exceptions import UntrainedModelError
from florasense.enums import GrowthType, HealthStatus, RiskLevel
from florasense.schemas import DiagnosisRequest
from florasense.services.ai.model_training import PredictionResult
from florasense.services.ai.plant_health_advisor import PlantHealthAdvisor
from florasense.services.application.diagnosis_service import DiagnosisService


class TestDiagnosisService:
    def test_full_report(self, diagnosis_service, diagnosis_payload):
        report = diagnosis_service.diagnose(DiagnosisRequest.model_validate(diagnosis_payload()))
        payload = report.to_dict()

        assert set(payload) == {
            "observation",
            "pest_indicators",
            "prediction",
            "consistency",
            "recommendations",
            "insights",
            "analytics",
            "generated_at",
        }
        assert payload["consistency"]["is_consistent"] is True
        assert len(payload["recommendations"]) >= 1
        assert [i["section"] for i in payload["insights"]] == ["flowering", "growth"]

    def test_predict_only(self, diagnosis_service, diagnosis_payload):
        result = diagnosis_service.predict(DiagnosisRequest.model_validate(diagnosis_payload()))

        assert result.risk_level in RiskLevel

    def test_untrained_advisor(self, diagnosis_payload):
        service = DiagnosisService(PlantHealthAdvisor())

        with pytest.raises(UntrainedModelError):
            service.diagnose(DiagnosisRequest.model_validate(diagnosis_payload()))

    def test_uses_prediction_for_rules(self, diagnosis_payload):
        advisor = MagicMock()
        advisor.predict.return_value = PredictionResult(HealthStatus.UNHEALTHY, GrowthType.SLOW, RiskLevel.HIGH)
        service = DiagnosisService(advisor)

        report = service.diagnose(DiagnosisRequest.model_validate(diagnosis_payload(leafColor="Yellow")))

        categories = [r.category for r in report.recommendations]
        assert categories[0] == "risk"
        assert "growth" in categories
        assert report.insights[0].title == "Observation"
