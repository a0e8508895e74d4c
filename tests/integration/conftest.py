from __future__ import annotations

import numpy as np
import pytest

from vecbayes.types import Example

CENTERS: dict[str, tuple[float, ...]] = {
    "alpha": (0.0, 0.0, 0.0, 0.0),
    "beta": (4.0, -1.0, 2.0, 0.5),
    "gamma": (-3.0, 5.0, -2.0, 1.0),
}


def make_examples(seed: int, per_class: int, scale: float = 1.0) -> list[Example]:
    """Return shuffled Gaussian clusters around :data:`CENTERS`."""

    rng = np.random.default_rng(seed)
    examples = [
        Example(rng.normal(loc=center, scale=scale), label)
        for label, center in CENTERS.items()
        for _ in range(per_class)
    ]
    order = rng.permutation(len(examples))
    return [examples[index] for index in order]


@pytest.fixture
def training_examples() -> list[Example]:
    return make_examples(seed=17, per_class=60)


@pytest.fixture
def held_out_examples() -> list[Example]:
    return make_examples(seed=99, per_class=40)
