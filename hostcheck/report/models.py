"""Report data model — sections, probe error payloads, the report itself."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from hostcheck.metrics.severity import Severity, worst_severity


class SectionKind(str, Enum):
    SYSTEM = "system"
    CPU = "cpu"
    MEMORY = "memory"
    VOLUMES = "volumes"
    PHYSICAL_DISKS = "physical_disks"


def error_payload(exc: BaseException, probe: str) -> dict[str, Any]:
    """Structured marker for a probe that raised instead of returning data."""
    category = type(exc).__name__
    return {
        "Error": True,
        "Message": str(exc) or category,
        "Category": category,
        "FullyQualifiedId": f"{category},{probe}",
    }


def is_error_payload(data: Any) -> bool:
    return isinstance(data, dict) and data.get("Error") is True


def display_value(value: Any) -> str:
    """Flatten a payload value for display."""
    if value is None:
        return "n/a"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (list, tuple)):
        return ", ".join(display_value(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


@dataclass(frozen=True)
class Section:
    title: str
    data: Any
    severity: Severity
    kind: SectionKind

    @property
    def failed(self) -> bool:
        return is_error_payload(self.data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Title": self.title,
            "Data": self.data,
            "Severity": self.severity.value,
        }


@dataclass(frozen=True)
class Report:
    generated_at: datetime
    sections: tuple[Section, ...]

    def section(self, title_prefix: str) -> Section | None:
        """First section whose title starts with *title_prefix*."""
        for section in self.sections:
            if section.title.startswith(title_prefix):
                return section
        return None

    @property
    def worst_severity(self) -> Severity:
        return worst_severity(s.severity for s in self.sections)

    def to_dict(self) -> dict[str, Any]:
        return {
            "GeneratedAt": self.generated_at.isoformat(timespec="seconds"),
            "Sections": [s.to_dict() for s in self.sections],
        }


EXIT_CODES = {
    Severity.INFO: 0,
    Severity.WARN: 2,
    Severity.ERROR: 3,
}


def exit_code(report: Report) -> int:
    """Process exit code for a report: 0 normal, 2 warning, 3 critical."""
    return EXIT_CODES[report.worst_severity]
