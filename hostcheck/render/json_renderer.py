"""JSON serialization of a report."""

from __future__ import annotations

import json

from hostcheck.report.models import Report


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False, default=str)
