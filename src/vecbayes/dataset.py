"""Helpers for turning labeled examples into per-category vectors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from .types import Example, VectorLike

LOGGER = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when example data is malformed."""


class DimensionMismatchError(DatasetError):
    """Raised when a vector does not match the established dimensionality."""

    def __init__(self, expected: int, actual: int, context: str = "vector") -> None:
        super().__init__(f"{context} has dimensionality {actual}, expected {expected}")
        self.expected = expected
        self.actual = actual


def as_vector(value: VectorLike) -> np.ndarray:
    """Return ``value`` as a 1-D float64 array."""

    try:
        vector = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"Cannot interpret {value!r} as a numeric vector") from exc
    if vector.ndim != 1:
        raise DatasetError(f"Expected a 1-D vector, got shape {vector.shape}")
    return vector


def infer_dimensionality(examples: Iterable[tuple[VectorLike, Any]]) -> int:
    """Return the shared dimensionality of ``examples`` (0 when empty)."""

    dimensionality: int | None = None
    for index, (vector, _category) in enumerate(examples):
        size = as_vector(vector).shape[0]
        if dimensionality is None:
            dimensionality = size
        elif size != dimensionality:
            raise DimensionMismatchError(dimensionality, size, context=f"example {index}")
    return dimensionality or 0


def split_by_label(examples: Iterable[tuple[VectorLike, Any]]) -> dict[Any, list[np.ndarray]]:
    """Group example vectors by category, keeping first-seen category order."""

    groups: dict[Any, list[np.ndarray]] = {}
    for vector, category in examples:
        if category not in groups:
            groups[category] = []
        groups[category].append(as_vector(vector))
    return groups


def load_csv(path: Path, *, label_column: int = -1, header: bool = False) -> list[Example]:
    """Read labeled examples from a CSV file.

    Every column except ``label_column`` must be numeric. Blank lines are
    skipped; the label is kept as the stripped string value.
    """

    frame = _read_frame(path, header=header)
    if frame.empty:
        return []
    try:
        labels = frame.iloc[:, label_column]
    except IndexError as exc:
        raise DatasetError(f"{path}: label column {label_column} out of range") from exc
    position = label_column % frame.shape[1]
    features = _numeric_features(frame.drop(columns=frame.columns[position]), path)

    examples = [Example(as_vector(row), str(label).strip()) for row, label in zip(features, labels)]
    LOGGER.debug("Loaded %s example(s) from %s", len(examples), path)
    return examples


def load_vectors(path: Path, *, header: bool = False) -> list[np.ndarray]:
    """Read unlabeled feature rows from a CSV file."""

    features = _numeric_features(_read_frame(path, header=header), path)
    return [as_vector(row) for row in features]


def _read_frame(path: Path, *, header: bool) -> pd.DataFrame:
    try:
        return pd.read_csv(
            path,
            header=0 if header else None,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except pd.errors.ParserError as exc:
        raise DatasetError(f"{path}: {exc}") from exc


def _numeric_features(frame: pd.DataFrame, path: Path) -> np.ndarray:
    if frame.empty:
        return np.empty((0, frame.shape[1]), dtype=np.float64)
    numeric = frame.apply(pd.to_numeric, errors="coerce")
    invalid = numeric.isna()
    if invalid.to_numpy().any():
        row = int(np.flatnonzero(invalid.to_numpy().any(axis=1))[0]) + 1
        raise DatasetError(f"{path}: row {row}: non-numeric or missing feature value")
    return numeric.to_numpy(dtype=np.float64)


__all__ = [
    "DatasetError",
    "DimensionMismatchError",
    "as_vector",
    "infer_dimensionality",
    "split_by_label",
    "load_csv",
    "load_vectors",
]
