"""Kernel density estimates backed by :func:`scipy.stats.gaussian_kde`."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import stats

from ..dataset import DatasetError


class KernelDensity:
    """Univariate Gaussian-kernel density over the fitted samples."""

    def __init__(self, kde: stats.gaussian_kde) -> None:
        if kde.d != 1:
            raise ValueError("KernelDensity only supports univariate estimates")
        self._kde = kde

    @property
    def bandwidth(self) -> float:
        return float(np.sqrt(self._kde.covariance[0, 0]))

    @property
    def sample_count(self) -> int:
        return int(self._kde.n)

    def log_density_at(self, value: float) -> float:
        return float(self._kde.logpdf(value)[0])


class KernelDensityEstimator:
    """Fits a :class:`KernelDensity` using scipy's bandwidth selection.

    ``bandwidth`` accepts whatever ``gaussian_kde`` takes for ``bw_method``:
    ``"scott"``, ``"silverman"``, a scalar factor, or ``None`` for the default.
    Degenerate inputs (a single sample, zero spread) make scipy raise; those
    errors reach the caller unchanged.
    """

    def __init__(self, bandwidth: str | float | None = None) -> None:
        self.bandwidth = bandwidth

    def fit(self, values: Sequence[float]) -> KernelDensity:
        samples = np.asarray(values, dtype=np.float64)
        if samples.ndim != 1 or samples.shape[0] == 0:
            raise DatasetError("Cannot fit a kernel density to zero samples")
        return KernelDensity(stats.gaussian_kde(samples, bw_method=self.bandwidth))


__all__ = ["KernelDensity", "KernelDensityEstimator"]
