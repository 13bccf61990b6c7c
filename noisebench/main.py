"""noisebench CLI entry point and wiring."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from noisebench.accumulator import Accumulator
from noisebench.config import BenchSettings, load_config
from noisebench.core.logging import setup_logging
from noisebench.engine import BenchmarkRunner
from noisebench.noise import create_noise_suite
from noisebench.registry import ScenarioRegistry, build_coordinate_batch, build_default_registry
from noisebench.report import render_header, render_report

logger = logging.getLogger(__name__)


def _resolve_settings(config_path: Path | None, overrides: dict[str, Any]) -> BenchSettings:
    try:
        settings = load_config(config_path) if config_path is not None else BenchSettings()
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return settings
        return BenchSettings.model_validate({**settings.model_dump(), **updates})
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc


def build_registry(settings: BenchSettings, accumulator: Accumulator) -> ScenarioRegistry:
    """Construct the noise suite, the coordinate batch and the default scenarios."""
    suite = create_noise_suite(settings.seed)
    batch = build_coordinate_batch(settings.grid_size)
    return build_default_registry(suite, batch, accumulator)


@click.group()
def cli() -> None:
    """Throughput benchmarks for seeded simplex noise."""


_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="YAML settings file; defaults plus NOISEBENCH_* env vars when omitted.",
)


@cli.command("run")
@_config_option
@click.option("--duration", "duration_s", type=float, default=None, help="Seconds per scenario.")
@click.option("--warmup", "warmup_iterations", type=int, default=None)
@click.option("--grid-size", type=int, default=None, help="Samples per axis of the batch cube.")
@click.option("--seed", type=int, default=None)
@click.option("--max-iterations", type=int, default=None, help="Cap on timed iterations.")
@click.option(
    "--continue-on-error",
    is_flag=True,
    default=False,
    help="Report failing scenarios as N/A instead of aborting the run.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Root log level (logs go to stderr).",
)
@click.option("--json-logs", is_flag=True, default=False, help="Emit JSON log lines.")
def run_command(
    config_path: Path | None,
    duration_s: float | None,
    warmup_iterations: int | None,
    grid_size: int | None,
    seed: int | None,
    max_iterations: int | None,
    continue_on_error: bool,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """Measure every registered scenario and print the report."""
    settings = _resolve_settings(
        config_path,
        {
            "duration_s": duration_s,
            "warmup_iterations": warmup_iterations,
            "grid_size": grid_size,
            "seed": seed,
            "max_iterations": max_iterations,
            "continue_on_error": continue_on_error or None,
        },
    )
    setup_logging(
        level=log_level or settings.logging.level,
        json_output=json_logs or settings.logging.json_output,
    )

    accumulator = Accumulator()
    registry = build_registry(settings, accumulator)
    logger.info(
        "running %d scenarios (warmup=%d, duration=%ss, batch=%d)",
        len(registry),
        settings.warmup_iterations,
        settings.duration_s,
        settings.batch_size,
    )

    click.echo(render_header(settings))
    outcomes = BenchmarkRunner(registry, settings).run_all()
    click.echo(render_report(outcomes, settings.batch_size))

    if accumulator.is_sentinel():
        click.echo(accumulator.value)

    failed = [outcome.label for outcome in outcomes if not outcome.ok]
    if failed:
        logger.error("%d scenario(s) failed: %s", len(failed), ", ".join(failed))
        raise click.exceptions.Exit(1)


@cli.command("list")
@_config_option
@click.option("--grid-size", type=int, default=None, help="Samples per axis of the batch cube.")
def list_command(config_path: Path | None, grid_size: int | None) -> None:
    """Print the registered scenario labels without running them."""
    settings = _resolve_settings(config_path, {"grid_size": grid_size})
    registry = build_registry(settings, Accumulator())
    for label in registry.labels():
        click.echo(label)


__all__ = ["build_registry", "cli"]


if __name__ == "__main__":
    cli()
