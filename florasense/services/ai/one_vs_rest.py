"""
One-vs-Rest Multi-class Wrapper
===============================
Decomposes a k-class problem into k binary problems, one per class, and
predicts the class whose classifier gives the highest raw score.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Sequence
from typing import Generic, TypeVar

import numpy as np

from florasense.domain.exceptions import ConfigurationError, UntrainedModelError
from florasense.services.ai.margin_classifier import (
    NEGATIVE,
    POSITIVE,
    BinaryClassifier,
    LinearMarginClassifier,
)

logger = logging.getLogger(__name__)

Label = TypeVar("Label", bound=Hashable)


class OneVsRestClassifier(Generic[Label]):
    """
    Multi-class classifier built from one binary classifier per class.

    Args:
        classes: Class labels in declaration order; this order breaks ties
        classifier_factory: Builds a fresh, untrained binary classifier
    """

    def __init__(
        self,
        classes: Sequence[Label],
        classifier_factory: Callable[[], BinaryClassifier] = LinearMarginClassifier,
    ):
        if not classes:
            raise ConfigurationError("One-vs-rest classifier needs at least one class")
        if len(set(classes)) != len(classes):
            raise ConfigurationError("Duplicate class labels", detail={"classes": [str(c) for c in classes]})
        self.classes: tuple[Label, ...] = tuple(classes)
        self.classifier_factory = classifier_factory
        self.classifiers: dict[Label, BinaryClassifier] = {}

    @property
    def is_trained(self) -> bool:
        return len(self.classifiers) == len(self.classes)

    def train(self, X: np.ndarray, y: Sequence[Label]) -> None:
        """Train one binary classifier per class (that class +1, the rest -1)."""
        if len(X) == 0:
            raise ConfigurationError("Training matrix has zero rows")

        classifiers: dict[Label, BinaryClassifier] = {}
        for cls in self.classes:
            y_binary = [POSITIVE if label == cls else NEGATIVE for label in y]
            classifier = self.classifier_factory()
            classifier.train(X, y_binary)
            classifiers[cls] = classifier
            logger.debug("Trained %s-vs-rest on %d rows (%d positive)", cls, len(y_binary), y_binary.count(POSITIVE))
        self.classifiers = classifiers

    def scores(self, x: np.ndarray) -> dict[Label, float]:
        """Raw score of every class's classifier, in declaration order."""
        if not self.is_trained:
            raise UntrainedModelError("One-vs-rest classifier has not been trained")
        return {cls: self.classifiers[cls].score(x) for cls in self.classes}

    def predict(self, x: np.ndarray) -> Label:
        """Class with the strictly greatest score; the earliest class wins ties."""
        max_score = -np.inf
        predicted = None
        for cls, score in self.scores(x).items():
            if predicted is None or score > max_score:
                max_score = score
                predicted = cls
        return predicted
