from __future__ import annotations

import json
from typing import TYPE_CHECKING

from jsonschema import validate

from metricgate._meta import __version__
from metricgate.core.config import get_schema

if TYPE_CHECKING:
    from collections.abc import Sequence

    from metricgate.core.model.validation import ValidationResult
    from metricgate.core.pipeline import MetricReport


def _result_payload(result: ValidationResult) -> dict[str, object]:
    out: dict[str, object] = {"valid": result.valid}
    for key in ("error", "warning", "success"):
        value = getattr(result, key)
        if value is not None:
            out[key] = value
    return out


def _metric_payload(report: MetricReport) -> dict[str, object]:
    out: dict[str, object] = {
        "name": report.definition.name,
        "valid": report.valid,
        "results": {name: _result_payload(r) for name, r in report.results.items()},
        "variables": list(report.variables),
        "denominators": list(report.denominators),
        "fixed_variables": [
            {"symbol": a.symbol, "fixed_value": a.fixed_value, "reason": a.reason} for a in report.fixed_variables
        ],
    }
    if report.case is not None:
        out["case"] = report.case.case_type.value
    return out


def format_json(reports: Sequence[MetricReport]) -> str:
    """Render check reports as JSON validated against the packaged report schema."""
    schema = get_schema("report")
    payload: dict[str, object] = {
        "schema": str(schema["$id"]),
        "tool": {"name": "metricgate", "version": __version__},
        "valid": all(r.valid for r in reports),
        "metrics": [_metric_payload(r) for r in reports],
    }
    validate(payload, schema)
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)


__all__ = ["format_json"]
