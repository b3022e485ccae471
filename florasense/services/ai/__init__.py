"""
AI Services
===========
Margin classifiers and rule-based advisors for plant diagnosis.

Services:
- LinearMarginClassifier: Binary soft-margin linear classifier trained by SGD
- OneVsRestClassifier: Multi-class wrapper over binary classifiers
- PlantHealthAdvisor: Trains and queries the three label classifiers
- SpeciesConsistencyChecker: Compares an observation to species ideals
- RuleBasedRecommendationProvider: Care actions from predictions and readings
- InsightGenerator: Flowering and growth insights

All public symbols are importable via ``from florasense.services.ai import X``.
Imports are **lazy**: each submodule is loaded only when one of its
symbols is first accessed.
"""

from __future__ import annotations

import importlib
from typing import Any

# ── Symbol → submodule mapping ──────────────────────────────────────
# Keys are public symbol names; values are the dotted submodule path.
_LAZY_IMPORTS: dict[str, str] = {
    # growth_insights
    "Insight": "florasense.services.ai.growth_insights",
    "InsightGenerator": "florasense.services.ai.growth_insights",
    # margin_classifier
    "BinaryClassifier": "florasense.services.ai.margin_classifier",
    "LinearMarginClassifier": "florasense.services.ai.margin_classifier",
    "MarginHyperparameters": "florasense.services.ai.margin_classifier",
    # model_training
    "PredictionResult": "florasense.services.ai.model_training",
    "TARGETS": "florasense.services.ai.model_training",
    "TrainedModels": "florasense.services.ai.model_training",
    "predict_all": "florasense.services.ai.model_training",
    "train_all": "florasense.services.ai.model_training",
    # observation_features
    "OBSERVATION_FEATURES_V1": "florasense.services.ai.observation_features",
    "encode": "florasense.services.ai.observation_features",
    "encode_many": "florasense.services.ai.observation_features",
    # one_vs_rest
    "OneVsRestClassifier": "florasense.services.ai.one_vs_rest",
    # plant_health_advisor
    "PlantHealthAdvisor": "florasense.services.ai.plant_health_advisor",
    # recommendation_provider
    "Recommendation": "florasense.services.ai.recommendation_provider",
    "RecommendationContext": "florasense.services.ai.recommendation_provider",
    "RecommendationProvider": "florasense.services.ai.recommendation_provider",
    "RuleBasedRecommendationProvider": "florasense.services.ai.recommendation_provider",
    # species_consistency
    "ConsistencyDetail": "florasense.services.ai.species_consistency",
    "ConsistencyResult": "florasense.services.ai.species_consistency",
    "SpeciesConsistencyChecker": "florasense.services.ai.species_consistency",
}

__all__ = list(_LAZY_IMPORTS.keys())


def __getattr__(name: str) -> Any:
    """Lazy-load symbols on first access."""
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = importlib.import_module(module_path)
    value = getattr(module, name)
    # Cache on the module so subsequent accesses skip __getattr__
    globals()[name] = value
    return value
