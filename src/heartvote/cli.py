"""heartvote command-line interface."""

from __future__ import annotations

import dataclasses
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__
from .config import Config, ConfigError, load_config
from .loader import DatasetError, load_records
from .logging import configure_logging
from .pipeline import run_experiment
from .report import format_comparison_table, format_confusion_matrix, format_metrics_chart

app = typer.Typer(help="Train and compare heart-disease classifiers.")
LOGGER = logging.getLogger(__name__)


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None


@app.callback()
def _heartvote(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help="Path to YAML config (env HEARTVOTE_CONFIG, otherwise built-in defaults).",
        ),
    ] = None,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved)


@app.command()
def run(
    ctx: typer.Context,
    data: Annotated[
        Path | None,
        typer.Argument(help="Cleveland-format data file (overrides data.path)."),
    ] = None,
    test_size: Annotated[
        float | None,
        typer.Option("--test-size", help="Fraction of records held out for testing."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Shuffle seed for a reproducible split."),
    ] = None,
    standardize: Annotated[
        bool,
        typer.Option("--standardize", help="Scale features with training-set statistics."),
    ] = False,
) -> None:
    """Train every model, evaluate on the held-out split and print the comparison."""

    config = _load_environment(_state(ctx))
    config = _apply_overrides(config, data, test_size, seed, standardize)
    if config.data.path is None:
        typer.secho(
            "No data file given and data.path is not configured.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(2)

    LOGGER.info("Running experiment on %s", config.data.path)
    try:
        result = run_experiment(config)
    except DatasetError as exc:
        typer.secho(f"Dataset error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
    except ValueError as exc:
        typer.secho(f"Cannot run experiment: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    typer.echo(f"→ heartvote {__version__}")
    typer.echo(f"Train records: {result.train_size}  Test records: {result.test_size}")
    typer.echo("")
    typer.echo(format_comparison_table(result.evaluations))
    typer.echo("")
    typer.echo(format_metrics_chart(result.evaluations))
    for name, evaluation in result.evaluations:
        typer.echo("")
        typer.echo(format_confusion_matrix(name, evaluation.confusion))


@app.command()
def describe(
    ctx: typer.Context,
    data: Annotated[Path, typer.Argument(..., help="Cleveland-format data file.")],
) -> None:
    """Summarise a data file after cleaning."""

    _load_environment(_state(ctx))
    try:
        records = load_records(data)
    except DatasetError as exc:
        typer.secho(f"Dataset error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    counts = Counter(record.label for record in records)
    feature_count = len(records[0].features) if records else 0
    typer.echo(f"Data file: {data.expanduser()}")
    typer.echo(f"Records: {len(records)}")
    typer.echo(f"Features: {feature_count}")
    typer.echo("Labels:")
    for label in (0, 1):
        typer.echo(f"  {label}: {counts.get(label, 0)}")


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


def _apply_overrides(
    config: Config,
    data: Path | None,
    test_size: float | None,
    seed: int | None,
    standardize: bool,
) -> Config:
    data_config = config.data
    if data is not None:
        data_config = dataclasses.replace(data_config, path=data.expanduser())
    if test_size is not None:
        if not 0.0 < test_size < 1.0:
            _config_failure(ConfigError("--test-size must be between 0 and 1 (exclusive)."))
        data_config = dataclasses.replace(data_config, test_size=test_size)
    if seed is not None:
        data_config = dataclasses.replace(data_config, seed=seed)
    if standardize:
        data_config = dataclasses.replace(data_config, standardize=True)
    return dataclasses.replace(config, data=data_config)


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


__all__ = ["app"]
