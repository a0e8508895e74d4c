"""Core data structures shared by the model, learners and CLI."""

from __future__ import annotations

import math
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import NamedTuple, Union

import numpy as np

Category = Hashable
VectorLike = Union[Sequence[float], np.ndarray]


class Example(NamedTuple):
    """A labeled training example."""

    vector: VectorLike
    category: Category


@dataclass(frozen=True)
class Discriminant:
    """Winning category together with its normalized log-probability."""

    category: Category
    log_score: float

    @property
    def probability(self) -> float:
        return math.exp(self.log_score)


@dataclass(frozen=True)
class Prediction:
    """Classification result."""

    category: Category | None
    confidence: float
    scores: Mapping[Category, float]


__all__ = [
    "Category",
    "VectorLike",
    "Example",
    "Discriminant",
    "Prediction",
]
