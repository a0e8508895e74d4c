"""Naive Bayes categorizer over fixed-length numeric vectors."""

from __future__ import annotations

import copy
import math
from collections.abc import KeysView, Mapping, Sequence
from typing import Any

import numpy as np

from .dataset import DimensionMismatchError, as_vector
from .distributions.base import Density
from .priors import PriorTable
from .types import Discriminant, VectorLike


class UnknownCategoryError(KeyError):
    """Raised when a posterior is requested for a category the model lacks."""


class NaiveBayesModel:
    """Prior table plus one density per (category, dimension).

    Dimensions are assumed conditionally independent given the category, so
    the log posterior of a category is the log prior fraction plus the sum of
    the per-dimension log densities. All scoring happens in log space.
    """

    def __init__(
        self,
        priors: PriorTable | None = None,
        conditionals: Mapping[Any, Sequence[Density]] | None = None,
    ) -> None:
        self.priors = priors if priors is not None else PriorTable()
        self.conditionals: dict[Any, list[Density]] = {
            category: list(densities) for category, densities in (conditionals or {}).items()
        }

    @property
    def categories(self) -> KeysView[Any]:
        return self.conditionals.keys()

    @property
    def input_dimensionality(self) -> int:
        for densities in self.conditionals.values():
            return len(densities)
        return 0

    def compute_log_posterior(self, vector: VectorLike, category: Any) -> float:
        """Return ``log P(category) + sum_i log p(x_i | category)``.

        This is the unnormalized log posterior; the shared ``log P(x)`` term is
        omitted.
        """

        try:
            densities = self.conditionals[category]
        except KeyError as exc:
            raise UnknownCategoryError(category) from exc
        values = as_vector(vector)
        if values.shape[0] != len(densities):
            raise DimensionMismatchError(len(densities), values.shape[0])

        log_posterior = _log(self.priors.get_fraction(category))
        for density, value in zip(densities, values):
            log_posterior += density.log_density_at(float(value))
        return log_posterior

    def compute_posterior(self, vector: VectorLike, category: Any) -> float:
        """Return prior times likelihood (not normalized across categories)."""

        return math.exp(self.compute_log_posterior(vector, category))

    def compute_log_posteriors(self, vector: VectorLike) -> dict[Any, float]:
        values = as_vector(vector)
        return {
            category: self.compute_log_posterior(values, category) for category in self.categories
        }

    def classify(self, vector: VectorLike) -> Any | None:
        """Return the most probable category, or ``None`` with no categories.

        Ties keep the category seen first.
        """

        values = as_vector(vector)
        best_category: Any | None = None
        best_log_posterior = -math.inf
        found = False
        for category in self.categories:
            log_posterior = self.compute_log_posterior(values, category)
            if not found or log_posterior > best_log_posterior:
                best_category = category
                best_log_posterior = log_posterior
                found = True
        return best_category

    def classify_with_discriminant(self, vector: VectorLike) -> Discriminant | None:
        """Classify and report the log probability that the winner is correct.

        The score is ``log P(best | x)``: the winning log posterior minus the
        log-sum-exp of every category's log posterior. When no category gives
        the input any support the score is ``-inf``, unless the model has a
        single category, whose score is always 0.0.
        """

        values = as_vector(vector)
        best_category: Any | None = None
        best_log_posterior = -math.inf
        log_denominator = -math.inf
        found = False
        for category in self.categories:
            log_posterior = self.compute_log_posterior(values, category)
            if not found or log_posterior > best_log_posterior:
                best_category = category
                best_log_posterior = log_posterior
                found = True
            log_denominator = float(np.logaddexp(log_denominator, log_posterior))

        if not found:
            return None
        if log_denominator == -math.inf:
            # A lone category is certain even where it gives the input no support.
            log_score = 0.0 if len(self.conditionals) == 1 else -math.inf
            return Discriminant(category=best_category, log_score=log_score)
        return Discriminant(category=best_category, log_score=best_log_posterior - log_denominator)

    def copy(self) -> NaiveBayesModel:
        """Return a deep copy whose densities can be updated independently."""

        return NaiveBayesModel(
            priors=self.priors.copy(),
            conditionals={
                category: [copy.deepcopy(density) for density in densities]
                for category, densities in self.conditionals.items()
            },
        )

    def __repr__(self) -> str:
        return (
            f"NaiveBayesModel(categories={list(self.categories)!r}, "
            f"dimensionality={self.input_dimensionality})"
        )


def _log(value: float) -> float:
    return math.log(value) if value > 0.0 else -math.inf


__all__ = ["NaiveBayesModel", "UnknownCategoryError"]
