from __future__ import annotations

import logging
from dataclasses import dataclass

from florasense.config import AppConfig
from florasense.services.ai.margin_classifier import MarginHyperparameters
from florasense.services.ai.plant_health_advisor import PlantHealthAdvisor
from florasense.services.application.diagnosis_service import DiagnosisService
from florasense.utils.flower_dataset_handler import FlowerDatasetHandler

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Holds the services shared by every request for the process lifetime."""

    config: AppConfig
    dataset: FlowerDatasetHandler
    advisor: PlantHealthAdvisor
    diagnosis_service: DiagnosisService

    @classmethod
    def build(cls, config: AppConfig) -> "ServiceContainer":
        """Construct the service container and train the classifiers.

        Training blocks until complete, so no request can reach the advisor
        before its models exist.

        Raises:
            ConfigurationError: if the dataset or hyperparameters are invalid
        """
        logger.info("Building ServiceContainer...")
        dataset = FlowerDatasetHandler(config.dataset_path or None)

        hyperparameters = MarginHyperparameters(
            learning_rate=config.learning_rate,
            lambda_param=config.lambda_param,
            n_iterations=config.n_iterations,
        )
        advisor = PlantHealthAdvisor(hyperparameters, seed=config.training_seed)
        advisor.train(dataset.records)

        container = cls(
            config=config,
            dataset=dataset,
            advisor=advisor,
            diagnosis_service=DiagnosisService(advisor),
        )
        logger.info("ServiceContainer ready")
        return container
