"""Severity levels and threshold classification."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Severity(str, Enum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_RANKS = {Severity.INFO: 0, Severity.WARN: 1, Severity.ERROR: 2}

_LABELS = {
    Severity.INFO: "Normal",
    Severity.WARN: "Warning",
    Severity.ERROR: "Critical",
}

# (warn, error) percent thresholds
MEMORY_THRESHOLDS = (80.0, 90.0)
VOLUME_THRESHOLDS = (85.0, 90.0)


def classify(percent: float | None, warn: float, error: float) -> Severity:
    """Map a percentage onto a severity.

    A threshold value itself falls into the higher tier. A missing
    percentage is a warning: no data is neither good nor critical.
    """
    if percent is None:
        return Severity.WARN
    if percent >= error:
        return Severity.ERROR
    if percent >= warn:
        return Severity.WARN
    return Severity.INFO


def worst_severity(severities: Iterable[Severity]) -> Severity:
    """Highest severity in *severities* (INFO when empty)."""
    worst = Severity.INFO
    for sev in severities:
        if sev.rank > worst.rank:
            worst = sev
    return worst
