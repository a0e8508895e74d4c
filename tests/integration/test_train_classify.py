from __future__ import annotations

import math

import pytest

from vecbayes.distributions import GaussianEstimator, IncrementalGaussianEstimator
from vecbayes.learners import DistributionBatchLearner, GaussianBatchLearner, OnlineLearner
from vecbayes.types import Example


def _accuracy(model, examples: list[Example]) -> float:
    hits = sum(1 for example in examples if model.classify(example.vector) == example.category)
    return hits / len(examples)


def test_all_learners_agree_on_held_out_data(
    training_examples: list[Example],
    held_out_examples: list[Example],
) -> None:
    gaussian = GaussianBatchLearner().learn(training_examples)
    generic = DistributionBatchLearner(GaussianEstimator()).learn(training_examples)
    online = OnlineLearner(IncrementalGaussianEstimator()).learn(training_examples)

    assert _accuracy(gaussian, held_out_examples) > 0.9
    for example in held_out_examples:
        expected = gaussian.classify_with_discriminant(example.vector)
        for model in (generic, online):
            actual = model.classify_with_discriminant(example.vector)
            assert actual is not None and expected is not None
            assert actual.category == expected.category
            assert actual.log_score == pytest.approx(expected.log_score, abs=1e-6)


def test_discriminant_matches_normalized_posterior(
    training_examples: list[Example],
    held_out_examples: list[Example],
) -> None:
    model = GaussianBatchLearner().learn(training_examples)
    for example in held_out_examples[:20]:
        posteriors = model.compute_log_posteriors(example.vector)
        peak = max(posteriors.values())
        expected = 1.0 / sum(math.exp(value - peak) for value in posteriors.values())

        discriminant = model.classify_with_discriminant(example.vector)
        assert discriminant is not None
        assert 0.0 < discriminant.probability <= 1.0
        assert discriminant.probability == pytest.approx(expected)


def test_online_model_keeps_learning_after_replay(training_examples: list[Example]) -> None:
    learner = OnlineLearner(IncrementalGaussianEstimator())
    model = learner.learn(training_examples[:30])
    learner.update_all(model, training_examples[30:])

    reference = GaussianBatchLearner().learn(training_examples)
    for category in reference.categories:
        assert model.priors.get_count(category) == reference.priors.get_count(category)
        for ours, theirs in zip(model.conditionals[category], reference.conditionals[category]):
            assert ours.mean == pytest.approx(theirs.mean)
