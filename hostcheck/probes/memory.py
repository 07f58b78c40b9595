"""Physical memory probe."""

from __future__ import annotations

from typing import Any

import psutil

GIB = 1024 ** 3


def to_gib(n: float | None) -> float:
    return round((n or 0) / GIB, 2)


def percent(part: float, whole: float) -> float:
    """``part`` as a percentage of ``whole``, 0 when ``whole`` is 0."""
    if not whole:
        return 0.0
    return round(part / whole * 100, 2)


def probe_memory() -> dict[str, Any]:
    vm = psutil.virtual_memory()
    total = vm.total or 0
    free = vm.available or 0
    used = max(total - free, 0)
    return {
        "TotalGB": to_gib(total),
        "UsedGB": to_gib(used),
        "FreeGB": to_gib(free),
        "UsedPct": percent(used, total),
    }
