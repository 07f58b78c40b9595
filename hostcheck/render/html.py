"""Standalone HTML report document."""

from __future__ import annotations

import html
from typing import Any

from hostcheck.metrics.severity import Severity
from hostcheck.report.models import Report, Section, SectionKind, display_value

_SEVERITY_CLASSES = {
    Severity.INFO: "sev-info",
    Severity.WARN: "sev-warn",
    Severity.ERROR: "sev-error",
}

_ENTITY_KINDS = {SectionKind.VOLUMES, SectionKind.PHYSICAL_DISKS}

_STYLE = """
body { font-family: Segoe UI, Arial, sans-serif; margin: 24px; color: #222; background: #fafafa; }
h1 { font-size: 22px; margin-bottom: 4px; }
.generated { color: #666; margin-bottom: 18px; }
.section { border: 1px solid #ccc; border-radius: 6px; padding: 10px 14px; margin-bottom: 14px; }
.section h2 { font-size: 16px; margin: 0 0 8px 0; }
.sev-info { background: #f4f4f4; }
.sev-warn { background: #fff3cd; border-color: #e0a800; }
.sev-error { background: #f8d7da; border-color: #c82333; }
table { border-collapse: collapse; width: 100%; }
th, td { text-align: left; padding: 4px 8px; border-bottom: 1px solid #ddd; font-size: 13px; }
th { background: rgba(0, 0, 0, 0.04); }
"""


def escape(value: Any) -> str:
    return html.escape(display_value(value))


def _kv_table(data: dict[str, Any]) -> str:
    rows = [
        f"<tr><th>{html.escape(str(key))}</th><td>{escape(value)}</td></tr>"
        for key, value in data.items()
    ]
    return f"<table>{''.join(rows)}</table>"


def _entity_table(data: dict[str, Any], id_header: str) -> str:
    columns: list[str] = []
    for record in data.values():
        for key in record:
            if key not in columns:
                columns.append(key)

    head = "".join(f"<th>{html.escape(c)}</th>" for c in [id_header, *columns])
    rows = []
    for entity, record in data.items():
        cells = "".join(f"<td>{escape(record.get(c))}</td>" for c in columns)
        rows.append(f"<tr><td>{html.escape(str(entity))}</td>{cells}</tr>")
    return f"<table><thead><tr>{head}</tr></thead><tbody>{''.join(rows)}</tbody></table>"


def _is_entity_map(data: Any) -> bool:
    return (isinstance(data, dict) and bool(data)
            and all(isinstance(v, dict) for v in data.values()))


def render_section(section: Section) -> str:
    data = section.data
    if section.kind in _ENTITY_KINDS and not section.failed and _is_entity_map(data):
        header = "Volume" if section.kind == SectionKind.VOLUMES else "Disk"
        body = _entity_table(data, header)
    elif isinstance(data, dict):
        body = _kv_table(data)
    else:
        body = f"<p>{escape(data)}</p>"

    css = _SEVERITY_CLASSES[section.severity]
    return (
        f'<div class="section {css}">'
        f"<h2>{html.escape(section.title)}</h2>{body}</div>"
    )


def render_html(report: Report) -> str:
    generated = html.escape(report.generated_at.strftime("%Y-%m-%d %H:%M:%S"))
    blocks = "\n".join(render_section(s) for s in report.sections)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Host Health Report</title>
<style>{_STYLE}</style>
</head>
<body>
<h1>Host Health Report</h1>
<div class="generated">Generated {generated}</div>
{blocks}
</body>
</html>
"""
