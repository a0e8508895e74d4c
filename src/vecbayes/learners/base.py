"""Learner protocol definitions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from ..model import NaiveBayesModel
from ..types import VectorLike


@runtime_checkable
class BatchLearner(Protocol):
    """Builds a complete model from a collection of labeled examples."""

    def learn(self, examples: Iterable[tuple[VectorLike, Any]]) -> NaiveBayesModel:
        """Return a freshly trained model."""


@runtime_checkable
class IncrementalLearner(BatchLearner, Protocol):
    """Updates a model one labeled example at a time."""

    def create_initial_learned_object(self) -> NaiveBayesModel:
        """Return the model that updates start from."""

    def update(self, target: NaiveBayesModel, example: tuple[VectorLike, Any]) -> None:
        """Fold a single example into ``target``."""

    def update_all(
        self,
        target: NaiveBayesModel,
        examples: Iterable[tuple[VectorLike, Any]],
    ) -> None:
        """Apply :meth:`update` to each example in order."""


__all__ = ["BatchLearner", "IncrementalLearner"]
