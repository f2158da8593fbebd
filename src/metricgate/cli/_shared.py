from __future__ import annotations

import logging
import sys

import click.utils as click_utils

from metricgate._meta import logger
from metricgate.core.config import LOG_FORMAT


def configure_logging(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    logger.debug("verbose logging active")


def resolve_use_color(*, color: bool, no_color: bool, is_tty_like: bool) -> bool:
    # CLI flags take precedence over terminal detection.
    if no_color:
        return False
    if color:
        return True
    return is_tty_like and not click_utils.should_strip_ansi(sys.stdout)


def is_tty_stdout() -> bool:
    try:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    except OSError:
        return False


__all__ = ["configure_logging", "is_tty_stdout", "resolve_use_color"]
