"""Protocols for the per-dimension densities plugged into the model."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar("D", bound="Density")
D_co = TypeVar("D_co", bound="Density", covariant=True)


@runtime_checkable
class Density(Protocol):
    """A univariate probability density."""

    def log_density_at(self, value: float) -> float:
        """Return the natural log of the density at ``value``."""


@runtime_checkable
class BatchDistributionEstimator(Protocol[D_co]):
    """Fits a density from a complete collection of samples."""

    def fit(self, values: Sequence[float]) -> D_co:
        """Return a new density estimated from ``values``."""


@runtime_checkable
class IncrementalDistributionEstimator(Protocol[D]):
    """Builds a density one sample at a time."""

    def create_initial(self) -> D:
        """Return a density that has not seen any samples yet."""

    def update(self, density: D, value: float) -> None:
        """Fold ``value`` into ``density`` in place."""


__all__ = ["Density", "BatchDistributionEstimator", "IncrementalDistributionEstimator"]
