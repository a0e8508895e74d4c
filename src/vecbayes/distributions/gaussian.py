"""Univariate Gaussian density and its batch and incremental estimators."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..dataset import DatasetError

_LOG_TWO_PI = math.log(2.0 * math.pi)


@dataclass
class GaussianDensity:
    """Normal distribution parameterised by mean and variance.

    ``count`` records how many samples produced the parameters so that an
    incremental estimator can keep extending a batch-fitted density. A
    non-positive variance is treated as a point mass at the mean: the log
    density is 0.0 at exactly the mean and ``-inf`` everywhere else.
    """

    mean: float = 0.0
    variance: float = 0.0
    count: int = 0

    @property
    def standard_deviation(self) -> float:
        return math.sqrt(self.variance) if self.variance > 0.0 else 0.0

    @property
    def is_degenerate(self) -> bool:
        return self.variance <= 0.0

    def log_density_at(self, value: float) -> float:
        if self.variance <= 0.0:
            return 0.0 if value == self.mean else -math.inf
        delta = value - self.mean
        return -0.5 * (_LOG_TWO_PI + math.log(self.variance) + delta * delta / self.variance)

    def density_at(self, value: float) -> float:
        return math.exp(self.log_density_at(value))


def sample_variance_denominator(count: int) -> int:
    """Return ``count - 1`` guarded so single samples never divide by zero."""

    return count - 1 if count > 1 else 1


class GaussianEstimator:
    """Maximum-likelihood mean with the unbiased sample variance."""

    def fit(self, values: Sequence[float]) -> GaussianDensity:
        samples = np.asarray(values, dtype=np.float64)
        count = int(samples.shape[0]) if samples.ndim == 1 else 0
        if count == 0:
            raise DatasetError("Cannot fit a Gaussian to zero samples")
        mean = float(samples.mean())
        deviations = samples - mean
        variance = float(np.dot(deviations, deviations)) / sample_variance_denominator(count)
        return GaussianDensity(mean=mean, variance=variance, count=count)


class IncrementalGaussianEstimator:
    """Welford running mean/variance over a :class:`GaussianDensity`.

    The sum of squared deviations is rebuilt from the stored sample variance,
    so a ``min_variance`` floor applied by a batch learner is carried into
    every later update as if the data had that spread.
    """

    def create_initial(self) -> GaussianDensity:
        return GaussianDensity()

    def update(self, density: GaussianDensity, value: float) -> None:
        previous = density.count
        # Sum of squared deviations recovered from the stored sample variance.
        m2 = density.variance * (previous - 1) if previous > 1 else 0.0
        count = previous + 1
        delta = value - density.mean
        density.mean += delta / count
        m2 += delta * (value - density.mean)
        density.variance = max(m2, 0.0) / sample_variance_denominator(count)
        density.count = count


__all__ = [
    "GaussianDensity",
    "GaussianEstimator",
    "IncrementalGaussianEstimator",
    "sample_variance_denominator",
]
