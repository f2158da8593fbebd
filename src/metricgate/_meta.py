from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("metricgate")

logger = logging.getLogger("metricgate")

__all__ = ["__version__", "logger"]
