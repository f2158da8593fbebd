from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from metricgate._meta import __version__
from metricgate.cli import check, completion, inspect, man
from metricgate.cli._shared import configure_logging


def _print_version(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"metricgate {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(help="Validate metric formulas, thresholds and declared variables.")

    @app.callback()
    def _root(
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit", callback=_print_version, is_eager=True),
        ] = False,
        quiet: Annotated[
            bool,
            typer.Option("-q", "--quiet", help="Emit only error logs"),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
        ] = False,
    ) -> None:
        configure_logging(quiet=quiet, verbose=verbose)

    check.register(app)
    inspect.register(app)
    completion.register(app)
    man.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
