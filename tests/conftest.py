"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from unittest.mock import MagicMock

import pytest

from hostcheck.host.powershell import PowerShell
from hostcheck.probes.registry import ProbeRegistry
from hostcheck.report.assembly import build_report
from hostcheck.report.models import Report

GENERATED_AT = datetime(2024, 5, 1, 9, 30, 0)


def make_registry(payloads: dict[str, Any]) -> ProbeRegistry:
    """Registry whose probes return canned payloads (or raise exceptions)."""
    registry = ProbeRegistry()
    for name, payload in payloads.items():
        def probe(payload=payload):
            if isinstance(payload, Exception):
                raise payload
            return payload
        registry.register(name, probe)
    return registry


@pytest.fixture
def fake_shell() -> MagicMock:
    shell = MagicMock(spec=PowerShell)
    shell.available = True
    return shell


@pytest.fixture
def sample_payloads() -> dict[str, Any]:
    return {
        "system": {
            "ComputerName": "WS-042",
            "UserName": "jdoe",
            "OSVersion": "Windows-10-10.0.19045-SP0",
            "IsAdmin": False,
            "Uptime": "3d 4h 12m",
            "Timestamp": "2024-05-01T09:30:00",
        },
        "cpu": {
            "Name": "Intel(R) Core(TM) i7-10700 CPU @ 2.90GHz",
            "Cores": 8,
            "LoadPercent": 12,
            "PerCoreLoad": [10.0, 14.0, 9.0, 15.0],
        },
        "memory": {"TotalGB": 32.0, "UsedGB": 12.0, "FreeGB": 20.0, "UsedPct": 37.5},
        "volumes": {
            "C:": {"TotalGB": 475.0, "UsedGB": 200.0, "FreeGB": 275.0, "UsedPct": 42.11},
        },
        "physical_disks": {
            "Samsung SSD 970 EVO": {
                "HealthStatus": "Healthy",
                "OperationalStatus": "OK",
                "MediaType": "SSD",
                "SizeGB": 465.76,
            },
        },
    }


@pytest.fixture
def sample_report(sample_payloads) -> Report:
    return build_report(make_registry(sample_payloads), clock=lambda: GENERATED_AT)


@pytest.fixture
def registry_factory():
    return make_registry
