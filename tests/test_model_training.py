"""
Classifier Training Tests
=========================
Tests for train_all() / predict_all() over the flower dataset.
"""

import numpy as np
import pytest

from florasense.domain.exceptions import ConfigurationError, EncodingError, UntrainedModelError
from florasense.enums import GrowthType, HealthStatus, RiskLevel
from florasense.services.ai.margin_classifier import MarginHyperparameters
from florasense.services.ai.model_training import (
    TARGETS,
    PredictionResult,
    TrainedModels,
    predict_all,
    train_all,
)
from florasense.services.ai.observation_features import encode, encode_many


class TestTrainAll:
    def test_three_targets(self, trained_models):
        assert trained_models.targets == ["HealthStatus", "GrowthType", "RiskLevel"]
        assert trained_models.n_samples == 17

    def test_every_class_has_a_classifier(self, trained_models):
        for target in TARGETS:
            classifier = trained_models.get(target.name)
            assert list(classifier.classifiers) == list(target.classes)

    def test_class_order(self):
        classes = {target.name: target.classes for target in TARGETS}

        assert classes["HealthStatus"] == (HealthStatus.HEALTHY, HealthStatus.MODERATE, HealthStatus.UNHEALTHY)
        assert classes["GrowthType"] == (GrowthType.SLOW, GrowthType.NORMAL, GrowthType.FAST)
        assert classes["RiskLevel"] == (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)

    def test_same_seed_same_models(self, labeled_records):
        first = train_all(labeled_records, seed=123)
        second = train_all(labeled_records, seed=123)

        for target in first.targets:
            for cls, classifier in first.get(target).classifiers.items():
                other = second.get(target).classifiers[cls]
                np.testing.assert_array_equal(classifier.weights, other.weights)
                assert classifier.bias == other.bias

    def test_injected_generator(self, labeled_records):
        first = train_all(labeled_records, rng=np.random.default_rng(5))
        second = train_all(labeled_records, rng=np.random.default_rng(5))
        x = encode(labeled_records[0].observation)

        assert first.get("RiskLevel").scores(x) == second.get("RiskLevel").scores(x)

    def test_hyperparameters_are_used(self, labeled_records):
        models = train_all(labeled_records, hyperparameters=MarginHyperparameters(n_iterations=1), seed=0)
        classifier = models.get("HealthStatus").classifiers[HealthStatus.HEALTHY]

        # A single update from zero leaves weights at lr * y * x for the drawn row
        X = encode_many(record.observation for record in labeled_records)
        assert any(np.allclose(np.abs(classifier.weights), 0.01 * np.abs(row)) for row in X)
        assert abs(classifier.bias) == pytest.approx(0.01)

    def test_empty_dataset(self):
        with pytest.raises(ConfigurationError):
            train_all([])

    def test_models_are_read_only(self, trained_models):
        with pytest.raises(TypeError):
            trained_models.classifiers["HealthStatus"] = None


class TestPredictAll:
    def test_labels_come_from_class_sets(self, trained_models, labeled_records):
        for record in labeled_records:
            result = predict_all(trained_models, record.observation)

            assert isinstance(result, PredictionResult)
            assert result.health_status in HealthStatus
            assert result.growth_type in GrowthType
            assert result.risk_level in RiskLevel

    def test_repeatable(self, trained_models, make_observation):
        observation = make_observation()

        assert predict_all(trained_models, observation) == predict_all(trained_models, observation)

    def test_seeded_predictions_are_stable(self, labeled_records, make_observation):
        observation = make_observation(moisture=30, wilting=True, pest_score=3)
        first = predict_all(train_all(labeled_records, seed=9), observation)
        second = predict_all(train_all(labeled_records, seed=9), observation)

        assert first == second

    def test_recovers_reference_healthy_record(self, labeled_records):
        # Fertilized, no wilting, no pests: well inside the Healthy region
        reference = labeled_records[0]
        assert reference.health_status == HealthStatus.HEALTHY

        recovered = sum(
            predict_all(train_all(labeled_records, seed=seed), reference.observation).health_status
            == HealthStatus.HEALTHY
            for seed in range(10)
        )

        assert recovered >= 6

    def test_without_models(self, make_observation):
        with pytest.raises(UntrainedModelError):
            predict_all(None, make_observation())

    def test_missing_target(self, trained_models, make_observation):
        partial = TrainedModels(
            classifiers={"HealthStatus": trained_models.get("HealthStatus")},
            n_samples=trained_models.n_samples,
        )

        with pytest.raises(UntrainedModelError):
            predict_all(partial, make_observation())

    def test_unencodable_observation(self, trained_models, make_observation):
        with pytest.raises(EncodingError):
            predict_all(trained_models, make_observation(leaf_color="Purple"))

    def test_to_dict(self):
        result = PredictionResult(HealthStatus.HEALTHY, GrowthType.NORMAL, RiskLevel.LOW)

        assert result.to_dict() == {"health_status": "Healthy", "growth_type": "Normal", "risk_level": "Low"}
