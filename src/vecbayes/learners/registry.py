"""Named learner factories driven by :class:`~vecbayes.config.LearnerConfig`."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable

from ..config import ConfigError, LearnerConfig
from ..distributions import (
    BatchDistributionEstimator,
    Density,
    GaussianEstimator,
    IncrementalGaussianEstimator,
    KernelDensityEstimator,
)
from .base import BatchLearner
from .batch import DistributionBatchLearner
from .gaussian import GaussianBatchLearner
from .online import OnlineLearner

LearnerFactory = Callable[[LearnerConfig], BatchLearner]


class LearnerRegistry:
    """Registry that maps learner names to factories."""

    def __init__(self) -> None:
        self._factories: OrderedDict[str, LearnerFactory] = OrderedDict()

    def register(self, name: str, factory: LearnerFactory) -> None:
        if name in self._factories:
            raise ValueError(f"Learner '{name}' is already registered.")
        self._factories[name] = factory

    def get(self, name: str) -> LearnerFactory:
        try:
            return self._factories[name]
        except KeyError as exc:
            raise KeyError(f"Learner '{name}' is not registered.") from exc

    def create(self, config: LearnerConfig) -> BatchLearner:
        try:
            factory = self.get(config.name)
        except KeyError as exc:
            raise ConfigError(
                f"Unknown learner '{config.name}' (choose from {', '.join(self.names())})."
            ) from exc
        return factory(config)

    def names(self) -> list[str]:
        return list(self._factories)


def build_estimator(config: LearnerConfig) -> BatchDistributionEstimator[Density]:
    if config.estimator == "gaussian":
        return GaussianEstimator()
    if config.estimator == "kde":
        return KernelDensityEstimator(bandwidth=config.bandwidth)
    raise ConfigError(f"Unknown estimator '{config.estimator}' (choose from gaussian, kde).")


def default_registry() -> LearnerRegistry:
    registry = LearnerRegistry()
    registry.register("gaussian", lambda config: GaussianBatchLearner(config.min_variance))
    registry.register("batch", lambda config: DistributionBatchLearner(build_estimator(config)))
    registry.register("online", lambda _config: OnlineLearner(IncrementalGaussianEstimator()))
    return registry


__all__ = ["LearnerRegistry", "build_estimator", "default_registry"]
