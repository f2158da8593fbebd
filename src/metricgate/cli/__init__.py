from metricgate.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_GENERIC,
    EXIT_INVALID,
    EXIT_NOINPUT,
    EXIT_OK,
)
from metricgate.cli.root import cli, create_app, main

__all__ = [
    "EXIT_CONFIG",
    "EXIT_DATAERR",
    "EXIT_GENERIC",
    "EXIT_INVALID",
    "EXIT_NOINPUT",
    "EXIT_OK",
    "cli",
    "create_app",
    "main",
]
