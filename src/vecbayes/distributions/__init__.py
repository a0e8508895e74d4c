"""Per-dimension densities and the estimators that build them."""

from .base import BatchDistributionEstimator, Density, IncrementalDistributionEstimator
from .gaussian import GaussianDensity, GaussianEstimator, IncrementalGaussianEstimator
from .kernel import KernelDensity, KernelDensityEstimator

__all__ = [
    "BatchDistributionEstimator",
    "Density",
    "GaussianDensity",
    "GaussianEstimator",
    "IncrementalDistributionEstimator",
    "IncrementalGaussianEstimator",
    "KernelDensity",
    "KernelDensityEstimator",
]
