"""Incremental learner that grows a model one example at a time."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import Any

from ..dataset import DimensionMismatchError, as_vector
from ..distributions.base import Density, IncrementalDistributionEstimator
from ..model import NaiveBayesModel
from ..types import VectorLike

LOGGER = logging.getLogger(__name__)


class OnlineLearner:
    """Updates priors and per-dimension densities for each example.

    The model is mutated in place and updates must be applied sequentially;
    an update that fails part way leaves the model as it was. Callers
    sharing a model between threads need their own lock.
    """

    def __init__(self, estimator: IncrementalDistributionEstimator[Density]) -> None:
        self.estimator = estimator

    def create_initial_learned_object(self) -> NaiveBayesModel:
        return NaiveBayesModel()

    def learn(self, examples: Iterable[tuple[VectorLike, Any]]) -> NaiveBayesModel:
        """Build a model by replaying ``examples`` through :meth:`update`."""

        target = self.create_initial_learned_object()
        self.update_all(target, examples)
        return target

    def update_all(
        self,
        target: NaiveBayesModel,
        examples: Iterable[tuple[VectorLike, Any]],
    ) -> None:
        seen = 0
        for example in examples:
            self.update(target, example)
            seen += 1
        LOGGER.debug("Applied %s incremental update(s)", seen)

    def update(self, target: NaiveBayesModel, example: tuple[VectorLike, Any]) -> None:
        raw_vector, category = example
        vector = as_vector(raw_vector)
        dimensionality = vector.shape[0]

        conditionals = target.conditionals.get(category)
        if conditionals is not None:
            if len(conditionals) != dimensionality:
                raise DimensionMismatchError(len(conditionals), dimensionality)
        elif target.conditionals and target.input_dimensionality != dimensionality:
            raise DimensionMismatchError(target.input_dimensionality, dimensionality)

        if conditionals is None:
            LOGGER.debug("Initialising conditionals for new category %r", category)
            densities = [self.estimator.create_initial() for _ in range(dimensionality)]
        else:
            densities = [copy.deepcopy(density) for density in conditionals]

        # Nothing is committed until every dimension has been updated.
        for density, value in zip(densities, vector):
            self.estimator.update(density, float(value))

        target.conditionals[category] = densities
        target.priors.increment(category)


__all__ = ["OnlineLearner"]
