"""Closed-form Gaussian learner using per-category sufficient statistics."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from ..dataset import infer_dimensionality, split_by_label
from ..distributions.base import Density
from ..distributions.gaussian import GaussianDensity, sample_variance_denominator
from ..model import NaiveBayesModel
from ..types import VectorLike

LOGGER = logging.getLogger(__name__)


class GaussianBatchLearner:
    """Learns Gaussian conditionals from sums and sums of squares.

    Each category is visited once: the elementwise sum ``S`` and sum of squares
    ``Q`` are accumulated, then ``mean = S / n`` and
    ``variance = (Q - S * mean) / max(n - 1, 1)``. The formula loses precision
    when the mean is large compared to the spread. Negative results from
    cancellation are clamped to zero and ``min_variance`` sets a floor.
    """

    def __init__(self, min_variance: float = 0.0) -> None:
        if min_variance < 0.0:
            raise ValueError("min_variance must be non-negative")
        self.min_variance = min_variance

    def learn(self, examples: Iterable[tuple[VectorLike, Any]]) -> NaiveBayesModel:
        data = list(examples)
        dimensionality = infer_dimensionality(data)
        examples_per_category = split_by_label(data)

        result = NaiveBayesModel()
        for category, vectors in examples_per_category.items():
            conditionals = self._fit_category(vectors, dimensionality)
            result.priors.increment(category, len(vectors))
            result.conditionals[category] = conditionals

        LOGGER.debug(
            "Fitted Gaussian conditionals for %s categories over %s dimension(s)",
            len(result.conditionals),
            dimensionality,
        )
        return result

    def _fit_category(self, vectors: list[np.ndarray], dimensionality: int) -> list[Density]:
        sums = np.zeros(dimensionality, dtype=np.float64)
        sums_of_squares = np.zeros(dimensionality, dtype=np.float64)
        for vector in vectors:
            sums += vector
            sums_of_squares += vector * vector

        count = len(vectors)
        means = sums / count
        variances = (sums_of_squares - sums * means) / sample_variance_denominator(count)
        variances = np.maximum(variances, self.min_variance)

        return [
            GaussianDensity(mean=float(mean), variance=float(variance), count=count)
            for mean, variance in zip(means, variances)
        ]


__all__ = ["GaussianBatchLearner"]
