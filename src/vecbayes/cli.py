"""vecbayes command-line interface."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Annotated, NoReturn

import numpy as np
import typer
from sklearn.metrics import accuracy_score
from sklearn.model_selection import train_test_split

from . import __version__
from .classifier import NaiveBayesClassifier
from .config import Config, ConfigError, load_config, resolved_config_path
from .dataset import DatasetError, load_csv, load_vectors
from .learners import default_registry
from .logging import configure_logging
from .types import Example

app = typer.Typer(help="Naive Bayes classification over numeric feature vectors.")
LOGGER = logging.getLogger(__name__)


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None


@app.callback()
def _vecbayes(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help="Path to config (env VECBAYES_CONFIG or ~/.config/vecbayes/config.yaml).",
        ),
    ] = None,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved)


@app.command()
def info(ctx: typer.Context) -> None:
    """Show the version and effective configuration."""

    state = _state(ctx)
    config = _load_environment(state)

    typer.echo(f"vecbayes {__version__}")
    source = config.source or f"{resolved_config_path(state.config_path)} (not found, defaults)"
    typer.echo(f"Config: {source}")
    typer.echo(f"Learner: {config.learner.name}")
    typer.echo(f"  estimator: {config.learner.estimator}")
    typer.echo(f"  min_variance: {config.learner.min_variance}")
    bandwidth = config.learner.bandwidth if config.learner.bandwidth is not None else "default"
    typer.echo(f"  bandwidth: {bandwidth}")
    typer.echo(f"Available learners: {', '.join(default_registry().names())}")


@app.command()
def evaluate(
    ctx: typer.Context,
    data: Annotated[Path, typer.Argument(..., help="Labeled CSV file.")],
    learner: Annotated[
        str | None,
        typer.Option("-l", "--learner", help="Learner name (overrides config)."),
    ] = None,
    test_size: Annotated[
        float,
        typer.Option("--test-size", min=0.05, max=0.95, help="Held-out fraction."),
    ] = 0.25,
    seed: Annotated[int, typer.Option("--seed", help="Random seed for the split.")] = 0,
) -> None:
    """Train on part of a labeled CSV and report held-out accuracy."""

    state = _state(ctx)
    config = _load_environment(state)
    examples = _read_examples(data, config)
    if len(examples) < 2:
        _fail(f"Need at least two examples to evaluate, found {len(examples)}.")

    labels = [example.category for example in examples]
    counts = Counter(labels)
    stratify = labels if min(counts.values()) >= 2 else None
    try:
        train_set, test_set = train_test_split(
            examples,
            test_size=test_size,
            random_state=seed,
            stratify=stratify,
        )
    except ValueError as exc:
        _fail(f"Cannot split {len(examples)} example(s) for evaluation: {exc}", exc)

    classifier = _fit_classifier(config, learner, train_set)
    predictions = classifier.predict_many(example.vector for example in test_set)
    truth = [example.category for example in test_set]
    predicted = [prediction.category for prediction in predictions]
    accuracy = accuracy_score(truth, predicted)
    mean_confidence = float(np.mean([prediction.confidence for prediction in predictions]))

    typer.echo(f"Learner: {classifier.name}")
    typer.echo(f"Categories: {', '.join(str(c) for c in classifier.model.categories)}")
    typer.echo(f"Train/test: {len(train_set)}/{len(test_set)}")
    typer.echo(f"Accuracy: {accuracy:.3f}")
    typer.echo(f"Mean confidence: {mean_confidence:.3f}")


@app.command()
def classify(
    ctx: typer.Context,
    train: Annotated[Path, typer.Argument(..., help="Labeled CSV used for training.")],
    queries: Annotated[Path, typer.Argument(..., help="Unlabeled CSV rows to classify.")],
    learner: Annotated[
        str | None,
        typer.Option("-l", "--learner", help="Learner name (overrides config)."),
    ] = None,
) -> None:
    """Train on a labeled CSV and classify each row of another CSV."""

    state = _state(ctx)
    config = _load_environment(state)
    examples = _read_examples(train, config)
    if not examples:
        _fail(f"No training examples found in {train}.")
    classifier = _fit_classifier(config, learner, examples)

    if not queries.expanduser().is_file():
        _fail(f"Query file not found: {queries}")
    try:
        vectors = load_vectors(queries.expanduser(), header=config.data.header)
    except DatasetError as exc:
        _fail(str(exc), exc)

    for index, vector in enumerate(vectors, start=1):
        try:
            prediction = classifier.predict(vector)
        except DatasetError as exc:
            _fail(f"Row {index}: {exc}", exc)
        typer.echo(f"{index}: {prediction.category} (p={prediction.confidence:.3f})")


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state missing from context.")
    return state


def _load_environment(state: CLIState) -> Config:
    try:
        config = load_config(state.config_path)
        configure_logging(config.logging)
    except ConfigError as exc:
        _config_failure(exc)
    return config


def _read_examples(path: Path, config: Config) -> list[Example]:
    csv_path = path.expanduser()
    if not csv_path.is_file():
        _fail(f"Data file not found: {csv_path}")
    try:
        return load_csv(
            csv_path,
            label_column=config.data.label_column,
            header=config.data.header,
        )
    except DatasetError as exc:
        _fail(str(exc), exc)


def _fit_classifier(
    config: Config,
    learner_name: str | None,
    examples: list[Example],
) -> NaiveBayesClassifier:
    learner_config = replace(config.learner, name=learner_name) if learner_name else config.learner
    try:
        learner = default_registry().create(learner_config)
    except ConfigError as exc:
        _config_failure(exc)
    LOGGER.debug("Fitting %s learner on %s example(s)", learner_config.name, len(examples))
    classifier = NaiveBayesClassifier(name=learner_config.name, learner=learner)
    try:
        classifier.fit(examples)
    except (ValueError, np.linalg.LinAlgError) as exc:
        _fail(f"Training failed: {exc}", exc)
    return classifier


def _fail(message: str, exc: BaseException | None = None) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(1) from exc


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


def main() -> None:  # pragma: no cover - delegated to Typer
    app()


__all__ = ["app", "main"]
