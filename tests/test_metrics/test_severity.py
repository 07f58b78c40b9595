"""Tests for severity classification."""

import pytest

from hostcheck.metrics.severity import (
    MEMORY_THRESHOLDS,
    VOLUME_THRESHOLDS,
    Severity,
    classify,
    worst_severity,
)


@pytest.mark.parametrize("percent, expected", [
    (0.0, Severity.INFO),
    (79.99, Severity.INFO),
    (80.0, Severity.WARN),
    (85.3, Severity.WARN),
    (89.99, Severity.WARN),
    (90.0, Severity.ERROR),
    (100.0, Severity.ERROR),
])
def test_classify_memory_thresholds(percent, expected):
    assert classify(percent, *MEMORY_THRESHOLDS) == expected


def test_classify_volume_thresholds():
    assert classify(84.9, *VOLUME_THRESHOLDS) == Severity.INFO
    assert classify(85.0, *VOLUME_THRESHOLDS) == Severity.WARN
    assert classify(90.0, *VOLUME_THRESHOLDS) == Severity.ERROR


def test_classify_missing_percent_is_warning():
    assert classify(None, 80, 90) == Severity.WARN


def test_status_labels():
    assert Severity.INFO.label == "Normal"
    assert Severity.WARN.label == "Warning"
    assert Severity.ERROR.label == "Critical"


def test_severity_values_are_wire_strings():
    assert [s.value for s in Severity] == ["info", "warn", "error"]


def test_worst_severity():
    assert worst_severity([]) == Severity.INFO
    assert worst_severity([Severity.INFO, Severity.WARN]) == Severity.WARN
    assert worst_severity([Severity.WARN, Severity.ERROR, Severity.INFO]) == Severity.ERROR
