from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from metricgate._meta import logger
from metricgate.cli._shared import is_tty_stdout, resolve_use_color
from metricgate.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_GENERIC,
    EXIT_INVALID,
    EXIT_NOINPUT,
    EXIT_OK,
)
from metricgate.core.config import Settings, load_settings
from metricgate.core.pipeline import check_metrics
from metricgate.core.types import OutputFormat
from metricgate.errors import ConfigError, InvalidMetricFileError, MetricFileNotFoundError
from metricgate.inputs.metric_file import load_metric_definitions
from metricgate.io import write_output
from metricgate.render.human import render_human
from metricgate.render.json import format_json

if TYPE_CHECKING:
    from metricgate.core.pipeline import MetricDefinition

_BOOL_FALSE = False


def _load_settings_or_exit(config: Path | None) -> Settings:
    pyproject = config if config is not None else Path.cwd() / "pyproject.toml"
    try:
        return load_settings(pyproject)
    except ConfigError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc


def _load_definitions_or_exit(paths: list[Path]) -> list[MetricDefinition]:
    definitions: list[MetricDefinition] = []
    for path in paths:
        try:
            definitions.extend(load_metric_definitions(path))
        except MetricFileNotFoundError as exc:
            typer.echo(f"ERROR: {exc}", err=True)
            raise typer.Exit(code=EXIT_NOINPUT) from exc
        except InvalidMetricFileError as exc:
            typer.echo(f"ERROR: {exc}", err=True)
            raise typer.Exit(code=EXIT_DATAERR) from exc
        except OSError as exc:
            logger.exception("failed to read %s", path)
            typer.echo(f"ERROR: {exc}", err=True)
            raise typer.Exit(code=EXIT_GENERIC) from exc
    return definitions


def check_cmd(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Metric definition file(s), JSON or TOML."),
    ],
    format_: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = OutputFormat.HUMAN,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    optional_formula: Annotated[
        bool,
        typer.Option("--optional-formula", help="Accept metrics without a formula."),
    ] = _BOOL_FALSE,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="pyproject.toml holding [tool.metricgate] (default: ./pyproject.toml)."),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
) -> None:
    """Validate metric definitions: formula, thresholds and declared variables."""
    settings = _load_settings_or_exit(config)
    if optional_formula:
        settings = replace(settings, formula_required=False)

    definitions = _load_definitions_or_exit(paths)
    reports = check_metrics(definitions, settings)

    if format_ is OutputFormat.JSON:
        text = format_json(reports)
    else:
        is_tty_like = is_tty_stdout() and (output is None or output == Path("-"))
        use_color = resolve_use_color(color=color, no_color=no_color, is_tty_like=is_tty_like)
        text = render_human(reports, color=use_color)

    write_output(text, output)
    failed = [r.definition.name for r in reports if not r.valid]
    if failed:
        logger.debug("invalid metrics: %s", ", ".join(failed))
        raise typer.Exit(code=EXIT_INVALID)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("check")(check_cmd)


__all__ = ["register"]
