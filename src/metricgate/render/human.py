from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from metricgate.core.model.threshold import format_number

if TYPE_CHECKING:
    from collections.abc import Sequence

    from metricgate.core.model.validation import ValidationResult
    from metricgate.core.pipeline import MetricReport

_STYLES = {
    "error": ("red", "✗"),
    "warning": ("yellow", "!"),
    "success": ("green", "✓"),
}


def _status_cell(result: ValidationResult) -> str:
    kind = result.kind
    if kind is None:
        return "[green]ok[/green]"
    style, mark = _STYLES[kind]
    return f"[{style}]{mark} {kind}[/{style}]"


def _message_cell(result: ValidationResult) -> str:
    message = result.message or ""
    return escape(message.removeprefix("✓ "))


def _metric_table(report: MetricReport) -> Table:
    title = report.definition.name or "<unnamed metric>"
    verdict = "[green]valid[/green]" if report.valid else "[red]invalid[/red]"
    table = Table(
        title=f"{escape(title)} ({verdict})",
        box=box.SIMPLE_HEAVY,
        header_style="bold",
        expand=True,
    )
    table.add_column("Field", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Message", overflow="fold")
    for name, result in report.results.items():
        table.add_row(name, _status_cell(result), _message_cell(result))
    return table


def _details(report: MetricReport) -> list[str]:
    lines: list[str] = []
    if report.variables:
        lines.append(f"Variables: {', '.join(report.variables)}")
    if report.denominators:
        lines.append(f"Denominators: {', '.join(report.denominators)}")
    lines.extend(
        f"Fixed: {a.symbol} = {format_number(a.fixed_value)} ({escape(a.reason)})" for a in report.fixed_variables
    )
    if report.case is not None:
        lines.append(f"Threshold case: {report.case.case_type.value}")
    return lines


def render_human(reports: Sequence[MetricReport], *, color: bool = False, width: int = 120) -> str:
    """Render check reports as Rich tables, one per metric."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=width)
    for report in reports:
        console.print(_metric_table(report))
        for line in _details(report):
            console.print(f"  {line}")
        console.print()

    failed = sum(1 for r in reports if not r.valid)
    summary = f"{len(reports)} metric(s) checked, {failed} invalid"
    console.print(f"[red]{summary}[/red]" if failed else f"[green]{summary}[/green]")
    return buf.getvalue().rstrip()


__all__ = ["render_human"]
