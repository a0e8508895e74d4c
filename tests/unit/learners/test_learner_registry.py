from __future__ import annotations

import pytest

from vecbayes.config import ConfigError, LearnerConfig
from vecbayes.distributions import GaussianEstimator, KernelDensityEstimator
from vecbayes.learners import (
    DistributionBatchLearner,
    GaussianBatchLearner,
    LearnerRegistry,
    OnlineLearner,
    build_estimator,
    default_registry,
)


def test_default_registry_builds_each_learner() -> None:
    registry = default_registry()
    assert registry.names() == ["gaussian", "batch", "online"]

    gaussian = registry.create(LearnerConfig(name="gaussian", min_variance=0.25))
    assert isinstance(gaussian, GaussianBatchLearner)
    assert gaussian.min_variance == 0.25

    batch = registry.create(LearnerConfig(name="batch", estimator="kde", bandwidth="silverman"))
    assert isinstance(batch, DistributionBatchLearner)
    assert isinstance(batch.estimator, KernelDensityEstimator)
    assert batch.estimator.bandwidth == "silverman"

    assert isinstance(registry.create(LearnerConfig(name="online")), OnlineLearner)


def test_unknown_learner_is_a_config_error() -> None:
    with pytest.raises(ConfigError, match="Unknown learner 'perceptron'"):
        default_registry().create(LearnerConfig(name="perceptron"))


def test_unknown_estimator_is_a_config_error() -> None:
    assert isinstance(build_estimator(LearnerConfig()), GaussianEstimator)
    with pytest.raises(ConfigError, match="Unknown estimator"):
        build_estimator(LearnerConfig(estimator="histogram"))


def test_duplicate_registration_rejected() -> None:
    registry = LearnerRegistry()
    registry.register("gaussian", lambda config: GaussianBatchLearner())
    with pytest.raises(ValueError, match="already registered"):
        registry.register("gaussian", lambda config: GaussianBatchLearner())
    with pytest.raises(KeyError):
        registry.get("missing")
