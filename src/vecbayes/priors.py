"""Frequency table over categories used as the naive Bayes prior."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class PriorTable:
    """Insertion-ordered category counts.

    Counts are floats so that weighted increments are allowed; the fraction of a
    category is its count divided by the total over all categories.
    """

    def __init__(self, counts: Mapping[Any, float] | None = None) -> None:
        self._counts: dict[Any, float] = {}
        self._total = 0.0
        if counts:
            for category, count in counts.items():
                self.increment(category, count)

    def increment(self, category: Any, weight: float = 1.0) -> float:
        """Add ``weight`` to ``category`` and return the new count."""

        updated = self._counts.get(category, 0.0) + float(weight)
        if updated < 0.0:
            raise ValueError(f"Count for category {category!r} cannot become negative.")
        self._counts[category] = updated
        self._total += float(weight)
        return updated

    def get_count(self, category: Any) -> float:
        return self._counts.get(category, 0.0)

    def get_fraction(self, category: Any) -> float:
        if self._total <= 0.0:
            return 0.0
        return self._counts.get(category, 0.0) / self._total

    @property
    def total(self) -> float:
        return self._total

    def categories(self) -> list[Any]:
        return list(self._counts)

    def fractions(self) -> dict[Any, float]:
        return {category: self.get_fraction(category) for category in self._counts}

    def copy(self) -> PriorTable:
        return PriorTable(self._counts)

    def __contains__(self, category: object) -> bool:
        return category in self._counts

    def __iter__(self) -> Iterator[Any]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriorTable):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"PriorTable({self._counts!r})"

    @classmethod
    def from_categories(cls, categories: Iterable[Any]) -> PriorTable:
        """Build a table counting each occurrence in ``categories`` once."""

        table = cls()
        for category in categories:
            table.increment(category)
        return table


__all__ = ["PriorTable"]
