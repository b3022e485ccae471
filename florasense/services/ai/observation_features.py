"""
Observation Feature Encoding
============================
Turns a plant observation into the fixed-length numeric vector the margin
classifiers are trained on and queried with.

Training and prediction both go through :func:`encode`, so the feature order
and scaling below are the single source of truth for the feature space.

Feature definitions (OBSERVATION_FEATURES_V1, in vector order):
- stage:        ordinal 0-3 (Seedling, Vegetative, Budding, Flowering)
- moisture:     min-max over [5, 100] %
- ph:           min-max over [4.0, 9.0]
- light:        min-max over [1, 12] hours/day
- fertilizer:   0/1
- leaf_color:   ordinal 0-3 (Pale, Yellow, Normal, Dark Green)
- wilting:      0/1
- flower_count: min-max over [0, 100]
- height:       min-max over [1, 300] cm
- pest_score:   raw 0-4, not normalized

Key Principles:
- Bounds are domain priors, not dataset statistics, and never change between
  training and inference
- Out-of-range readings scale outside [0, 1]; nothing is clamped
- Same input -> same output
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any

import numpy as np

from florasense.domain.exceptions import EncodingError
from florasense.domain.observation import MAX_PEST_SCORE, Observation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeatureSet:
    """
    Definition of a feature set with metadata.

    Attributes:
        name: Feature set name
        version: Feature set version
        features: Feature names in vector order
        description: What these features represent
    """

    name: str
    version: str
    features: tuple[str, ...]
    description: str

    @property
    def size(self) -> int:
        return len(self.features)


OBSERVATION_FEATURES_V1 = FeatureSet(
    name="observation",
    version="v1",
    features=(
        "stage",
        "moisture",
        "ph",
        "light",
        "fertilizer",
        "leaf_color",
        "wilting",
        "flower_count",
        "height",
        "pest_score",
    ),
    description="Growth stage, soil/light readings and visible symptoms of one plant",
)

N_FEATURES = OBSERVATION_FEATURES_V1.size

CATEGORICAL_MAPPING: dict[str, dict[str, int]] = {
    "stage": {"Seedling": 0, "Vegetative": 1, "Budding": 2, "Flowering": 3},
    "fertilizer_used": {"No": 0, "Yes": 1},
    "leaf_color": {"Pale": 0, "Yellow": 1, "Normal": 2, "Dark Green": 3},
    "wilting_signs": {"No": 0, "Yes": 1},
}

# (min, max) per numeric field
NORMALIZATION_BOUNDS: dict[str, tuple[float, float]] = {
    "moisture": (5.0, 100.0),
    "ph": (4.0, 9.0),
    "light": (1.0, 12.0),
    "flower_count": (0.0, 100.0),
    "height": (1.0, 300.0),
}


def normalize(value: float, lower: float, upper: float) -> float:
    """Min-max scale ``value`` against fixed bounds (no clamping)."""
    return (value - lower) / (upper - lower)


def _lookup(mapping_name: str, value: Any) -> int:
    if isinstance(value, Enum):
        value = value.value
    mapping = CATEGORICAL_MAPPING[mapping_name]
    try:
        return mapping[value]
    except (KeyError, TypeError):
        raise EncodingError(
            f"Unknown {mapping_name} value: {value!r}. Expected one of: {', '.join(mapping)}",
            detail={"field": mapping_name, "value": repr(value)},
        ) from None


def _flag(mapping_name: str, value: Any) -> int:
    """Accept bool, 0/1 or ``"Yes"``/``"No"`` for a yes/no field."""
    if isinstance(value, bool):
        return _lookup(mapping_name, "Yes" if value else "No")
    if isinstance(value, int) and value in (0, 1):
        return _lookup(mapping_name, "Yes" if value == 1 else "No")
    return _lookup(mapping_name, value)


def _numeric(field_name: str, value: Any) -> float:
    if value is None:
        raise EncodingError(f"Missing numeric field: {field_name}", detail={"field": field_name})
    if isinstance(value, bool) or not isinstance(value, Real):
        raise EncodingError(
            f"Field {field_name} must be numeric, got {type(value).__name__}",
            detail={"field": field_name, "value": repr(value)},
        )
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise EncodingError(f"Field {field_name} must be finite", detail={"field": field_name})
    return number


def _scaled(field_name: str, value: Any) -> float:
    lower, upper = NORMALIZATION_BOUNDS[field_name]
    return normalize(_numeric(field_name, value), lower, upper)


def _pest_score(value: Any) -> float:
    score = _numeric("pest_score", value)
    if not score.is_integer() or not 0 <= score <= MAX_PEST_SCORE:
        raise EncodingError(
            f"pest_score must be an integer in [0, {MAX_PEST_SCORE}], got {value!r}",
            detail={"field": "pest_score", "value": repr(value)},
        )
    # Deliberately left on its raw 0-4 scale, unlike the other numeric features.
    return score


def encode(observation: Observation) -> np.ndarray:
    """
    Encode one observation into a float64 vector of length ``N_FEATURES``.

    Args:
        observation: Observation to encode

    Returns:
        Feature vector in OBSERVATION_FEATURES_V1 order

    Raises:
        EncodingError: unknown category, missing/non-numeric value, or a
            pest score outside [0, 4]
    """
    return np.array(
        [
            _lookup("stage", observation.stage),
            _scaled("moisture", observation.moisture),
            _scaled("ph", observation.ph),
            _scaled("light", observation.light),
            _flag("fertilizer_used", observation.fertilizer),
            _lookup("leaf_color", observation.leaf_color),
            _flag("wilting_signs", observation.wilting),
            _scaled("flower_count", observation.flower_count),
            _scaled("height", observation.height),
            _pest_score(observation.pest_score),
        ],
        dtype=np.float64,
    )


def encode_many(observations: Iterable[Observation]) -> np.ndarray:
    """Encode observations into an ``(n_samples, N_FEATURES)`` matrix."""
    rows = [encode(observation) for observation in observations]
    if not rows:
        return np.empty((0, N_FEATURES), dtype=np.float64)
    return np.vstack(rows)


def describe(vector: np.ndarray) -> Mapping[str, float]:
    """Pair a feature vector with its feature names, for logging and API output."""
    return {name: float(value) for name, value in zip(OBSERVATION_FEATURES_V1.features, vector)}
