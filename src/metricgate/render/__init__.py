from metricgate.render.human import render_human
from metricgate.render.json import format_json

__all__ = ["format_json", "render_human"]
