"""Centralised exception hierarchy for metricgate.

Validation of user input never raises; these errors only cover the
file and configuration edges of the package.
"""

from __future__ import annotations


class MetricgateError(Exception):
    """Base class for all custom metricgate exceptions."""


class MetricFileError(MetricgateError):
    """Base class for errors related to metric definition files."""


class MetricFileNotFoundError(MetricFileError):
    """Metric definition file could not be located on disk."""


class InvalidMetricFileError(MetricFileError):
    """Metric definition file was found but does not hold valid definitions."""


class ConfigError(MetricgateError):
    """The ``[tool.metricgate]`` configuration table holds an invalid value."""


__all__ = [
    "ConfigError",
    "InvalidMetricFileError",
    "MetricFileError",
    "MetricFileNotFoundError",
    "MetricgateError",
]
