"""Learners that build :class:`~vecbayes.model.NaiveBayesModel` instances."""

from .base import BatchLearner, IncrementalLearner
from .batch import DistributionBatchLearner
from .gaussian import GaussianBatchLearner
from .online import OnlineLearner
from .registry import LearnerRegistry, build_estimator, default_registry

__all__ = [
    "BatchLearner",
    "DistributionBatchLearner",
    "GaussianBatchLearner",
    "IncrementalLearner",
    "LearnerRegistry",
    "OnlineLearner",
    "build_estimator",
    "default_registry",
]
