"""High-level classifier pairing a learner with the model it produces."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
from scipy.special import logsumexp

from .learners.base import BatchLearner, IncrementalLearner
from .learners.gaussian import GaussianBatchLearner
from .model import NaiveBayesModel
from .types import Example, Prediction, VectorLike

LOGGER = logging.getLogger(__name__)


class NaiveBayesClassifier:
    """Vector naive Bayes with batch fitting and optional incremental training."""

    def __init__(
        self,
        name: str = "naive_bayes",
        *,
        learner: BatchLearner | None = None,
    ) -> None:
        self.name = name
        self._learner = learner or GaussianBatchLearner()
        self._model = NaiveBayesModel()

    @property
    def model(self) -> NaiveBayesModel:
        return self._model

    @property
    def learner(self) -> BatchLearner:
        return self._learner

    def fit(self, examples: Iterable[tuple[VectorLike, Any]]) -> NaiveBayesClassifier:
        self._model = self._learner.learn(examples)
        LOGGER.info(
            "%s trained on %s categories (%s dimension(s))",
            self.name,
            len(self._model.categories),
            self._model.input_dimensionality,
        )
        return self

    def train(self, vector: VectorLike, label: Any) -> None:
        """Incrementally train the classifier with a single sample."""

        if not isinstance(self._learner, IncrementalLearner):
            raise TypeError(
                f"{type(self._learner).__name__} does not support incremental training"
            )
        self._learner.update(self._model, Example(vector, label))

    def predict(self, vector: VectorLike) -> Prediction:
        """Return the predicted category and normalized score distribution."""

        discriminant = self._model.classify_with_discriminant(vector)
        if discriminant is None:
            return Prediction(category=None, confidence=0.0, scores={})

        scores = _normalize(self._model.compute_log_posteriors(vector))
        return Prediction(
            category=discriminant.category,
            confidence=discriminant.probability,
            scores=scores,
        )

    def predict_many(self, vectors: Iterable[VectorLike]) -> list[Prediction]:
        return [self.predict(vector) for vector in vectors]

    def is_trained(self) -> bool:
        return bool(self._model.categories)


def _normalize(log_posteriors: dict[Any, float]) -> dict[Any, float]:
    values = np.fromiter(log_posteriors.values(), dtype=np.float64, count=len(log_posteriors))
    log_total = logsumexp(values)
    if not np.isfinite(log_total):
        return {category: 0.0 for category in log_posteriors}
    probabilities = np.exp(values - log_total)
    return {category: float(p) for category, p in zip(log_posteriors, probabilities)}


__all__ = ["NaiveBayesClassifier"]
