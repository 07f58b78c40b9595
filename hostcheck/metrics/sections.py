"""Section builders — probe payload plus severity, derived fields and title."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hostcheck.metrics.severity import (
    MEMORY_THRESHOLDS,
    VOLUME_THRESHOLDS,
    Severity,
    classify,
    worst_severity,
)
from hostcheck.report.models import Section, SectionKind, is_error_payload


def _fmt_pct(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.1f}%"


def _thresholds_text(thresholds: tuple[float, float]) -> str:
    warn, error = thresholds
    return f"warn {warn:g}% / error {error:g}%"


def _used_pct(record: Any) -> float | None:
    if not isinstance(record, dict):
        return None
    value = record.get("UsedPct")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def free_pct(used_pct: float) -> float:
    return round(100 - used_pct, 2)


def _informational(title: str, data: Any, kind: SectionKind) -> Section:
    severity = Severity.WARN if is_error_payload(data) else Severity.INFO
    return Section(title=title, data=data, severity=severity, kind=kind)


def system_section(data: Any) -> Section:
    return _informational("System", data, SectionKind.SYSTEM)


def cpu_section(data: Any) -> Section:
    return _informational("CPU", data, SectionKind.CPU)


def physical_disks_section(data: Any) -> Section:
    # "unavailable" / "no devices" markers are not errors
    return _informational("Physical Disks", data, SectionKind.PHYSICAL_DISKS)


def memory_section(data: Any) -> Section:
    used = None if is_error_payload(data) else _used_pct(data)
    severity = classify(used, *MEMORY_THRESHOLDS)

    if used is not None:
        data = {**data, "FreePct": free_pct(used), "Status": severity.label}

    title = (
        f"Memory - {severity.label} ({_thresholds_text(MEMORY_THRESHOLDS)})"
        f" - used {_fmt_pct(used)}"
    )
    return Section(title=title, data=data, severity=severity,
                   kind=SectionKind.MEMORY)


@dataclass(frozen=True)
class VolumeSummary:
    worst: Severity
    max_used: float | None
    min_free: float | None


def classify_volumes(
    volumes: dict[str, Any],
) -> tuple[dict[str, Any], VolumeSummary]:
    """Classify every volume and compute the cross-volume aggregates.

    Returns the enriched per-volume records and the summary. A record
    without a usable ``UsedPct`` is marked as a warning and keeps the
    overall severity at warning or above; an error on any other volume
    still dominates.
    """
    enriched: dict[str, Any] = {}
    severities: list[Severity] = []
    used_values: list[float] = []
    free_values: list[float] = []

    for volume, record in volumes.items():
        used = _used_pct(record)
        if used is None:
            base = record if isinstance(record, dict) else {"Value": record}
            enriched[volume] = {
                **base,
                "Severity": Severity.WARN.value,
                "Status": Severity.WARN.label,
            }
            severities.append(Severity.WARN)
            continue

        severity = classify(used, *VOLUME_THRESHOLDS)
        free = free_pct(used)
        enriched[volume] = {
            **record,
            "FreePct": free,
            "Severity": severity.value,
            "Status": severity.label,
        }
        severities.append(severity)
        used_values.append(used)
        free_values.append(free)

    summary = VolumeSummary(
        worst=worst_severity(severities),
        max_used=max(used_values) if used_values else None,
        min_free=min(free_values) if free_values else None,
    )
    return enriched, summary


def volumes_section(data: Any) -> Section:
    if is_error_payload(data) or not isinstance(data, dict):
        summary = VolumeSummary(worst=Severity.WARN, max_used=None, min_free=None)
    else:
        data, summary = classify_volumes(data)

    title = (
        f"Volumes - {summary.worst.label} ({_thresholds_text(VOLUME_THRESHOLDS)})"
        f" - max used {_fmt_pct(summary.max_used)}"
        f" / min free {_fmt_pct(summary.min_free)}"
    )
    return Section(title=title, data=data, severity=summary.worst,
                   kind=SectionKind.VOLUMES)
