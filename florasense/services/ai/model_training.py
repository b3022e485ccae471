"""
Classifier Training & Prediction
================================
Trains one one-vs-rest margin classifier per target label (health status,
growth type, risk level) on the labelled dataset and queries all three for a
live observation.

Trained models are returned as an explicit :class:`TrainedModels` value that
the caller owns and passes back into :func:`predict_all`; nothing is kept in
module state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import numpy as np

from florasense.domain.exceptions import ConfigurationError, UntrainedModelError
from florasense.domain.observation import LabeledObservation, Observation
from florasense.enums import GrowthType, HealthStatus, RiskLevel
from florasense.services.ai.margin_classifier import LinearMarginClassifier, MarginHyperparameters
from florasense.services.ai.observation_features import encode, encode_many
from florasense.services.ai.one_vs_rest import OneVsRestClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetSpec:
    """A label the advisor predicts and its class set, in tie-break order."""

    name: str
    classes: tuple[Any, ...]


TARGETS: tuple[TargetSpec, ...] = (
    TargetSpec("HealthStatus", (HealthStatus.HEALTHY, HealthStatus.MODERATE, HealthStatus.UNHEALTHY)),
    TargetSpec("GrowthType", (GrowthType.SLOW, GrowthType.NORMAL, GrowthType.FAST)),
    TargetSpec("RiskLevel", (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)),
)


@dataclass(frozen=True)
class TrainedModels:
    """Trained one-vs-rest classifier per target name. Read-only after training."""

    classifiers: Mapping[str, OneVsRestClassifier]
    n_samples: int
    seed: int | None = None

    def get(self, target: str) -> OneVsRestClassifier:
        classifier = self.classifiers.get(target)
        if classifier is None or not classifier.is_trained:
            raise UntrainedModelError(f"No trained model for {target}", detail={"target": target})
        return classifier

    @property
    def targets(self) -> list[str]:
        return list(self.classifiers)


@dataclass(frozen=True)
class PredictionResult:
    """Predicted labels for one observation."""

    health_status: HealthStatus
    growth_type: GrowthType
    risk_level: RiskLevel

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {
            "health_status": self.health_status.value,
            "growth_type": self.growth_type.value,
            "risk_level": self.risk_level.value,
        }


def train_all(
    dataset: Sequence[LabeledObservation],
    *,
    hyperparameters: MarginHyperparameters | None = None,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> TrainedModels:
    """
    Train the health status, growth type and risk level classifiers.

    The feature matrix is encoded once and shared by all three targets. All
    binary classifiers draw from the same generator, in target then class
    order, so a seed fixes every trained weight.

    Args:
        dataset: Labelled observations
        hyperparameters: Sub-gradient descent settings (defaults if None)
        seed: Seed for a fresh generator; ignored when ``rng`` is given
        rng: Random source to draw training rows from

    Returns:
        TrainedModels keyed by target name

    Raises:
        ConfigurationError: if the dataset is empty
        EncodingError: if a record cannot be encoded
    """
    if not dataset:
        raise ConfigurationError("Cannot train on an empty dataset")

    hyperparameters = hyperparameters or MarginHyperparameters()
    if rng is None:
        rng = np.random.default_rng(seed)

    logger.info(
        "Starting margin classifier training: %d samples, %d iterations, seed=%s",
        len(dataset),
        hyperparameters.n_iterations,
        seed,
    )

    X = encode_many(sample.observation for sample in dataset)

    def factory() -> LinearMarginClassifier:
        return LinearMarginClassifier(hyperparameters, rng=rng)

    classifiers: dict[str, OneVsRestClassifier] = {}
    for target in TARGETS:
        labels = [sample.label(target.name) for sample in dataset]
        classifier = OneVsRestClassifier(target.classes, classifier_factory=factory)
        classifier.train(X, labels)
        classifiers[target.name] = classifier

    logger.info("Margin classifiers trained successfully for %s", ", ".join(classifiers))
    return TrainedModels(classifiers=MappingProxyType(classifiers), n_samples=len(dataset), seed=seed)


def predict_all(models: TrainedModels | None, observation: Observation) -> PredictionResult:
    """
    Predict all three labels for one observation.

    Raises:
        UntrainedModelError: if ``models`` is None or lacks a target
        EncodingError: if the observation cannot be encoded
    """
    if models is None:
        raise UntrainedModelError("Models have not been trained; call train_all first")

    health = models.get("HealthStatus")
    growth = models.get("GrowthType")
    risk = models.get("RiskLevel")

    x = encode(observation)
    return PredictionResult(
        health_status=health.predict(x),
        growth_type=growth.predict(x),
        risk_level=risk.predict(x),
    )
