from metricgate.inputs.metric_file import load_metric_definitions, parse_metric_document

__all__ = ["load_metric_definitions", "parse_metric_document"]
