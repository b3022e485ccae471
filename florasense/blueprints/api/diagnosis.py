"""
Plant Diagnosis API
===================

Endpoints for diagnosing a plant from a submitted observation:
- Service and model status
- Species ideal profiles
- Label predictions only
- Full diagnosis report (predictions, consistency, recommendations,
  insights, chart data)
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response

from florasense.domain.species_ideals import SPECIES_IDEALS, get_species_profile
from florasense.schemas import DiagnosisRequest
from florasense.utils.http import error_response, safe_route

from ._common import fail as _fail, get_container, get_json, success as _success

logger = logging.getLogger("diagnosis_api")

diagnosis_api = Blueprint("diagnosis_api", __name__, url_prefix="/api")


@diagnosis_api.errorhandler(404)
def not_found(error):
    """Handle 404 errors"""
    return error_response("Resource not found", 404)


@diagnosis_api.errorhandler(405)
def method_not_allowed(error):
    """Handle 405 errors"""
    return error_response("Method not allowed", 405)


@diagnosis_api.get("/health")
@safe_route("Failed to get service health")
def get_health() -> Response:
    """Service status and whether the classifiers are trained."""
    advisor = get_container().advisor
    status = advisor.status()
    return _success({"status": "ok" if status["models_trained"] else "training", **status})


@diagnosis_api.get("/species")
@safe_route("Failed to list species")
def list_species() -> Response:
    """Ideal growing ranges for every supported species."""
    return _success([profile.to_dict() for profile in SPECIES_IDEALS.values()])


@diagnosis_api.get("/species/<string:name>")
@safe_route("Failed to get species")
def get_species(name: str) -> Response:
    return _success(get_species_profile(name).to_dict())


@diagnosis_api.post("/predictions")
@safe_route("Failed to predict plant labels")
def predict() -> Response:
    """
    Predict health status, growth type and risk level.

    JSON body: same fields as ``POST /api/diagnosis``.
    """
    payload = get_json()
    if not payload:
        return _fail("Request body is required", 400)

    request_data = DiagnosisRequest.model_validate(payload)
    prediction = get_container().diagnosis_service.predict(request_data)
    return _success(prediction.to_dict())


@diagnosis_api.post("/diagnosis")
@safe_route("Failed to run diagnosis")
def diagnose() -> Response:
    """
    Run a full diagnosis.

    Accepts: application/json or form data

    {
        "species": "Rose",            // Rose, Marigold, Jasmine, Sunflower, Hibiscus, Tulip
        "stage": "Flowering",         // Seedling, Vegetative, Budding, Flowering
        "moisture": 60,               // 5-100 %
        "ph": 6.5,                    // 4.0-9.0
        "light": 8,                   // 1-24 hours/day
        "fertilizerUsed": "Yes",
        "leafColor": "Normal",        // Pale, Yellow, Normal, Dark Green
        "wiltingSigns": "No",
        "flowerCount": 15,            // 0-1000
        "plantHeight": 65,            // 1-500 cm
        "whitePowder": "No",          // Optional, default No
        "holesInLeaves": "No",        // Optional, default No
        "stickyLeaves": "No",         // Optional, default No
        "insectVisibility": "None"    // Optional: None, Few, Moderate, Severe
    }
    """
    payload = get_json()
    if not payload:
        return _fail("Request body is required", 400)

    request_data = DiagnosisRequest.model_validate(payload)
    logger.info("Running diagnosis for %s", request_data.species)
    report = get_container().diagnosis_service.diagnose(request_data)
    return _success(report.to_dict())
