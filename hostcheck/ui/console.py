"""Terminal summary of a report."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hostcheck.metrics.severity import Severity
from hostcheck.report.models import Report, Section, SectionKind, display_value

SEVERITY_STYLES = {
    Severity.ERROR: ("bold white on red", "CRITICAL"),
    Severity.WARN: ("bold black on yellow", "WARNING"),
    Severity.INFO: ("bold white on blue", "NORMAL"),
}

BORDER_STYLES = {
    Severity.ERROR: "red",
    Severity.WARN: "yellow",
    Severity.INFO: "blue",
}


def _body(section: Section) -> Table:
    data = section.data
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="bold cyan")
    table.add_column()

    if not isinstance(data, dict):
        table.add_row("", display_value(data))
        return table

    entity_map = (section.kind in (SectionKind.VOLUMES, SectionKind.PHYSICAL_DISKS)
                  and not section.failed
                  and all(isinstance(v, dict) for v in data.values()))
    for key, value in data.items():
        if entity_map:
            value = "  ".join(f"{k}={display_value(v)}" for k, v in value.items())
        else:
            value = display_value(value)
        table.add_row(str(key), value)
    return table


def render_section_panel(section: Section) -> Panel:
    style, label = SEVERITY_STYLES[section.severity]

    title = Text()
    title.append(f" {label} ", style=style)
    title.append(f" {section.title} ", style="bold")

    return Panel(
        _body(section),
        title=title,
        title_align="left",
        border_style=BORDER_STYLES[section.severity],
        padding=(0, 1),
    )


def render_console(console: Console, report: Report) -> None:
    console.print(Text(
        f"Host health report — {report.generated_at:%Y-%m-%d %H:%M:%S}",
        style="bold",
    ))
    for section in report.sections:
        console.print(render_section_panel(section))

    worst = report.worst_severity
    style, label = SEVERITY_STYLES[worst]
    summary = Text()
    summary.append("Overall: ", style="bold")
    summary.append(f" {label} ", style=style)
    console.print(Panel(summary, border_style="dim"))
