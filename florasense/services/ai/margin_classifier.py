"""
Linear Margin Classifier
========================
Binary linear separator trained by stochastic sub-gradient descent on the
soft-margin objective::

    lambda * ||w||^2 + max(0, 1 - y * (w.x + b))

Each iteration draws one training row uniformly at random (with
replacement) from an injected ``numpy.random.Generator``. Seeding that
generator makes training bit-for-bit reproducible; leaving it unseeded gives
a different boundary on every run.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from florasense.domain.exceptions import ConfigurationError, UntrainedModelError

logger = logging.getLogger(__name__)

POSITIVE = 1
NEGATIVE = -1


@dataclass(frozen=True)
class MarginHyperparameters:
    """Sub-gradient descent settings."""

    learning_rate: float = 0.01
    lambda_param: float = 0.01
    n_iterations: int = 1000

    def __post_init__(self):
        if self.learning_rate <= 0:
            raise ConfigurationError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.lambda_param < 0:
            raise ConfigurationError(f"lambda_param must be non-negative, got {self.lambda_param}")
        if self.n_iterations < 1:
            raise ConfigurationError(f"n_iterations must be at least 1, got {self.n_iterations}")


class BinaryClassifier(ABC):
    """
    Two-class classifier over labels +1 / -1.

    Any implementation can be plugged into :class:`OneVsRestClassifier`.
    """

    @abstractmethod
    def train(self, X: np.ndarray, y: Sequence[int]) -> None:
        """Fit on feature rows ``X`` and labels ``y`` in {+1, -1}."""

    @abstractmethod
    def score(self, x: np.ndarray) -> float:
        """Raw signed score; larger means more confidently +1."""

    def predict(self, x: np.ndarray) -> int:
        """Sign of the score; a score of exactly 0 resolves to +1."""
        return POSITIVE if self.score(x) >= 0 else NEGATIVE

    @property
    @abstractmethod
    def is_trained(self) -> bool:
        """True once ``train`` has completed."""


class LinearMarginClassifier(BinaryClassifier):
    """
    Soft-margin linear classifier (weights + bias).

    Args:
        hyperparameters: Learning rate, regularization strength, iterations
        rng: Random source for the per-iteration row draw
    """

    def __init__(
        self,
        hyperparameters: MarginHyperparameters | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.hyperparameters = hyperparameters or MarginHyperparameters()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.weights: np.ndarray | None = None
        self.bias: float | None = None

    @property
    def is_trained(self) -> bool:
        return self.weights is not None

    def train(self, X: np.ndarray, y: Sequence[int]) -> None:
        X = np.asarray(X, dtype=np.float64)
        y = np.asarray(y)
        if X.ndim != 2 or X.shape[0] == 0:
            raise ConfigurationError("Training matrix has zero rows", detail={"shape": list(X.shape)})
        n_samples, n_features = X.shape
        if y.shape != (n_samples,):
            raise ConfigurationError(
                f"Got {n_samples} feature rows but {y.shape[0] if y.ndim else 0} labels",
                detail={"rows": n_samples},
            )
        if not np.isin(y, (POSITIVE, NEGATIVE)).all():
            raise ConfigurationError("Binary labels must be +1 or -1")

        lr = self.hyperparameters.learning_rate
        lam = self.hyperparameters.lambda_param

        weights = np.zeros(n_features, dtype=np.float64)
        bias = 0.0

        for _ in range(self.hyperparameters.n_iterations):
            idx = int(self.rng.integers(n_samples))
            x_i = X[idx]
            y_i = float(y[idx])

            if y_i * (float(np.dot(x_i, weights)) + bias) >= 1:
                weights = weights - lr * (2 * lam * weights)
            else:
                weights = weights - lr * (2 * lam * weights - y_i * x_i)
                bias = bias + lr * y_i

        self.weights = weights
        self.weights.flags.writeable = False
        self.bias = bias
        logger.debug("Trained margin classifier: |w|=%.4f b=%.4f", float(np.linalg.norm(weights)), bias)

    def score(self, x: np.ndarray) -> float:
        if not self.is_trained:
            raise UntrainedModelError("Margin classifier has not been trained")
        return float(np.dot(np.asarray(x, dtype=np.float64), self.weights)) + self.bias
