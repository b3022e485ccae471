"""
Plant Health Advisor Service
============================
Holds the trained classifiers for the lifetime of the process and answers
label predictions for live observations.

Training is a blocking step run once at start-up (see
:meth:`ServiceContainer.build`); :meth:`PlantHealthAdvisor.predict` refuses
to answer until it has completed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from florasense.domain.exceptions import UntrainedModelError
from florasense.domain.observation import LabeledObservation, Observation
from florasense.services.ai.margin_classifier import MarginHyperparameters
from florasense.services.ai.model_training import PredictionResult, TrainedModels, predict_all, train_all
from florasense.services.ai.observation_features import encode

logger = logging.getLogger(__name__)


class PlantHealthAdvisor:
    """
    Margin-classifier advisor for health status, growth type and risk level.

    Args:
        hyperparameters: Sub-gradient descent settings
        seed: Optional seed; None trains differently on every start
    """

    def __init__(self, hyperparameters: MarginHyperparameters | None = None, seed: int | None = None):
        self.hyperparameters = hyperparameters or MarginHyperparameters()
        self.seed = seed
        self._models: TrainedModels | None = None

    @property
    def is_trained(self) -> bool:
        return self._models is not None

    @property
    def models(self) -> TrainedModels:
        if self._models is None:
            raise UntrainedModelError("Plant health models have not been trained")
        return self._models

    def train(self, dataset: Sequence[LabeledObservation]) -> TrainedModels:
        """
        Train all target classifiers from scratch and keep them.

        Returns:
            The trained model context
        """
        self._models = train_all(dataset, hyperparameters=self.hyperparameters, seed=self.seed)
        return self._models

    def predict(self, observation: Observation) -> PredictionResult:
        """
        Predict the three labels for one observation.

        Raises:
            UntrainedModelError: if called before :meth:`train`
            EncodingError: if the observation cannot be encoded
        """
        result = predict_all(self._models, observation)
        logger.debug("Predicted %s for %s", result.to_dict(), observation.species)
        return result

    def explain(self, observation: Observation) -> dict[str, dict[str, float]]:
        """Raw one-vs-rest scores per target and class for one observation."""
        x = encode(observation)
        return {
            target: {str(cls): round(score, 4) for cls, score in classifier.scores(x).items()}
            for target, classifier in self.models.classifiers.items()
        }

    def status(self) -> dict[str, object]:
        """Training status summary for health endpoints."""
        if self._models is None:
            return {"models_trained": False, "targets": [], "n_samples": 0, "seed": self.seed}
        return {
            "models_trained": True,
            "targets": self._models.targets,
            "n_samples": self._models.n_samples,
            "seed": self.seed,
        }
