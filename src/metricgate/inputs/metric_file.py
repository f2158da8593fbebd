"""Loading of metric definitions from JSON or TOML files."""

from __future__ import annotations

import json
import tomllib
from typing import TYPE_CHECKING, Any, cast

from jsonschema import ValidationError, validate

from metricgate._meta import logger
from metricgate.core.config import get_schema
from metricgate.core.model.validation import DeclaredVariable
from metricgate.core.pipeline import MetricDefinition
from metricgate.errors import InvalidMetricFileError, MetricFileNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def _read_document(path: Path) -> object:
    try:
        if path.suffix.lower() == ".toml":
            with path.open("rb") as f:
                return tomllib.load(f)
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        msg = f"metric definition file not found: {path}"
        raise MetricFileNotFoundError(msg) from exc
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        msg = f"failed to parse {path}: {exc}"
        raise InvalidMetricFileError(msg) from exc


def _definition_from_mapping(data: dict[str, Any]) -> MetricDefinition:
    variables = tuple(
        DeclaredVariable(symbol=v["symbol"], description=v.get("description", ""))
        for v in data.get("variables", [])
    )
    return MetricDefinition(
        name=data["name"],
        formula=data.get("formula") or "",
        desired_threshold=data.get("desired_threshold"),
        worst_case=data.get("worst_case"),
        variables=variables,
        code=data.get("code") or "",
        description=data.get("description") or "",
    )


def parse_metric_document(document: object, *, source: str = "<memory>") -> list[MetricDefinition]:
    """Validate *document* against the metric schema and build definitions."""
    try:
        validate(document, get_schema("metric"))
    except ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        msg = f"invalid metric definitions in {source} at {location}: {exc.message}"
        raise InvalidMetricFileError(msg) from exc

    mapping = cast("dict[str, Any]", document)
    items = mapping["metrics"] if "metrics" in mapping else [mapping]
    return [_definition_from_mapping(item) for item in items]


def load_metric_definitions(path: Path) -> list[MetricDefinition]:
    """Read one metric or a ``metrics`` list from *path* (``.json`` or ``.toml``)."""
    if not path.exists():
        msg = f"metric definition file not found: {path}"
        raise MetricFileNotFoundError(msg)
    definitions = parse_metric_document(_read_document(path), source=str(path))
    logger.info("loaded %d metric definition(s) from %s", len(definitions), path)
    return definitions


__all__ = ["load_metric_definitions", "parse_metric_document"]
