"""
Shared test fixtures for the FloraSense test suite.

Provides:
- The packaged flower dataset and its labelled records
- Classifiers trained with a fixed seed
- A trained PlantHealthAdvisor and DiagnosisService
- A Flask app and test client wired to a seeded container
- Helpers for building observations and diagnosis payloads

Usage:
    def test_example(trained_models, make_observation):
        result = predict_all(trained_models, make_observation())
        assert result.health_status in HealthStatus
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from florasense.domain.observation import Observation
from florasense.enums import GrowthStage, LeafColor, Species

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("florasense").setLevel(logging.WARNING)

TEST_SEED = 42


# ========================== Dataset Fixtures ===============================


@pytest.fixture(scope="session")
def dataset_handler():
    """FlowerDatasetHandler over the packaged dataset."""
    from florasense.utils.flower_dataset_handler import FlowerDatasetHandler

    return FlowerDatasetHandler()


@pytest.fixture(scope="session")
def labeled_records(dataset_handler):
    """The 17 labelled training records."""
    return dataset_handler.records


# ========================== Model Fixtures =================================


@pytest.fixture(scope="session")
def trained_models(labeled_records):
    """TrainedModels produced with a fixed seed."""
    from florasense.services.ai.model_training import train_all

    return train_all(labeled_records, seed=TEST_SEED)


@pytest.fixture()
def advisor(labeled_records):
    """PlantHealthAdvisor trained with a fixed seed."""
    from florasense.services.ai.plant_health_advisor import PlantHealthAdvisor

    advisor = PlantHealthAdvisor(seed=TEST_SEED)
    advisor.train(labeled_records)
    return advisor


@pytest.fixture()
def diagnosis_service(advisor):
    """DiagnosisService with default collaborators."""
    from florasense.services.application.diagnosis_service import DiagnosisService

    return DiagnosisService(advisor)


# ========================== Flask Fixtures =================================


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("FLORASENSE_SECRET_KEY", "test-secret")
    from florasense import create_app

    app = create_app({"training_seed": TEST_SEED, "log_to_file": False})
    app.config["TESTING"] = True
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


# ========================== Builders =======================================


@pytest.fixture()
def make_observation():
    """Factory for an Observation; keyword arguments override the healthy Rose defaults."""

    def _make(**overrides: Any) -> Observation:
        values: dict[str, Any] = {
            "species": Species.ROSE,
            "stage": GrowthStage.FLOWERING,
            "moisture": 60.0,
            "ph": 6.5,
            "light": 8.0,
            "fertilizer": True,
            "leaf_color": LeafColor.NORMAL,
            "wilting": False,
            "flower_count": 15,
            "height": 65.0,
            "pest_score": 0,
        }
        values.update(overrides)
        return Observation(**values)

    return _make


@pytest.fixture()
def diagnosis_payload():
    """Factory for a diagnosis form payload using the form's field names."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "species": "Rose",
            "stage": "Flowering",
            "moisture": 60,
            "ph": 6.5,
            "light": 8,
            "fertilizerUsed": "Yes",
            "leafColor": "Normal",
            "wiltingSigns": "No",
            "flowerCount": 15,
            "plantHeight": 65,
            "whitePowder": "No",
            "holesInLeaves": "No",
            "stickyLeaves": "No",
            "insectVisibility": "None",
        }
        payload.update(overrides)
        return payload

    return _make
