"""Batch learner that fits every conditional with a pluggable estimator."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..dataset import infer_dimensionality, split_by_label
from ..distributions.base import BatchDistributionEstimator, Density
from ..model import NaiveBayesModel
from ..types import VectorLike

LOGGER = logging.getLogger(__name__)


class DistributionBatchLearner:
    """Fits one density per (category, dimension) in a single pass per category."""

    def __init__(self, estimator: BatchDistributionEstimator[Density]) -> None:
        self.estimator = estimator

    def learn(self, examples: Iterable[tuple[VectorLike, Any]]) -> NaiveBayesModel:
        data = list(examples)
        dimensionality = infer_dimensionality(data)
        examples_per_category = split_by_label(data)

        result = NaiveBayesModel()
        values: list[float] = []
        for category, vectors in examples_per_category.items():
            conditionals: list[Density] = []
            for index in range(dimensionality):
                values.extend(float(vector[index]) for vector in vectors)
                conditionals.append(self.estimator.fit(values))
                values.clear()

            result.priors.increment(category, len(vectors))
            result.conditionals[category] = conditionals

        LOGGER.debug(
            "Fitted %s categories over %s dimension(s) from %s example(s) with %s",
            len(result.conditionals),
            dimensionality,
            len(data),
            type(self.estimator).__name__,
        )
        return result


__all__ = ["DistributionBatchLearner"]
