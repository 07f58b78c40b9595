"""CPU probe — processor identity plus load from an ordered fallback chain.

Load acquisition tries each strategy in ``DEFAULT_STRATEGIES`` until one
yields data:

1. ``perf_counters`` — pre-aggregated ``Win32_PerfFormattedData`` counters
2. ``live_sample``  — a one-second ``Get-Counter`` sample
3. ``legacy_load``  — the single ``Win32_Processor.LoadPercentage`` value

A strategy that raises or returns nothing is skipped without surfacing
an error; if none succeeds the load is reported as unknown.
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, field
from statistics import mean
from typing import Any, Callable, Iterable

from hostcheck.host.powershell import PowerShell

logger = logging.getLogger(__name__)

_PROCESSOR_COMMAND = (
    "Get-CimInstance Win32_Processor | Select-Object Name, NumberOfCores"
)
_PERF_COUNTER_COMMAND = (
    "Get-CimInstance Win32_PerfFormattedData_PerfOS_Processor"
    " | Select-Object Name, PercentProcessorTime"
)
_LIVE_SAMPLE_COMMAND = (
    "(Get-Counter '\\Processor(*)\\% Processor Time'"
    " -SampleInterval 1 -MaxSamples 1).CounterSamples"
    " | Select-Object InstanceName, CookedValue"
)
_LEGACY_LOAD_COMMAND = (
    "(Get-CimInstance Win32_Processor"
    " | Measure-Object -Property LoadPercentage -Average).Average"
)


@dataclass
class LoadSample:
    per_core: list[float] = field(default_factory=list)
    load: int | None = None

    @classmethod
    def from_per_core(cls, per_core: list[float]) -> LoadSample | None:
        if not per_core:
            return None
        return cls(per_core=per_core, load=int(round(mean(per_core))))

    @property
    def usable(self) -> bool:
        return bool(self.per_core) or self.load is not None


@dataclass(frozen=True)
class CpuLoadStrategy:
    name: str
    sample: Callable[[PowerShell], LoadSample | None]


def core_index(instance: str) -> tuple[int, ...]:
    """Sort key from a counter instance name ("3" -> (3,), "0,5" -> (0, 5))."""
    digits = re.findall(r"\d+", instance)
    if not digits:
        return (sys.maxsize,)
    return tuple(int(d) for d in digits)


def per_core_values(rows: Iterable[dict[str, Any]], name_key: str,
                    value_key: str) -> list[float]:
    """Per-core values ordered by core index, without the ``_Total`` instance."""
    cores: list[tuple[tuple[int, ...], float]] = []
    for row in rows:
        instance = str(row.get(name_key) or "")
        value = row.get(value_key)
        if not instance or "_total" in instance.lower() or value is None:
            continue
        cores.append((core_index(instance), round(float(value), 1)))
    cores.sort(key=lambda item: item[0])
    return [value for _, value in cores]


def sample_perf_counters(shell: PowerShell) -> LoadSample | None:
    rows = shell.records(_PERF_COUNTER_COMMAND)
    return LoadSample.from_per_core(
        per_core_values(rows, "Name", "PercentProcessorTime")
    )


def sample_live_counters(shell: PowerShell) -> LoadSample | None:
    rows = shell.records(_LIVE_SAMPLE_COMMAND)
    return LoadSample.from_per_core(
        per_core_values(rows, "InstanceName", "CookedValue")
    )


def sample_legacy_load(shell: PowerShell) -> LoadSample | None:
    value = shell.query(_LEGACY_LOAD_COMMAND)
    if value is None:
        return None
    return LoadSample(load=int(round(float(value))))


DEFAULT_STRATEGIES: tuple[CpuLoadStrategy, ...] = (
    CpuLoadStrategy("perf_counters", sample_perf_counters),
    CpuLoadStrategy("live_sample", sample_live_counters),
    CpuLoadStrategy("legacy_load", sample_legacy_load),
)


def sample_cpu_load(
    shell: PowerShell,
    strategies: Iterable[CpuLoadStrategy] = DEFAULT_STRATEGIES,
) -> LoadSample:
    """Return the first usable sample from *strategies*, in order."""
    for strategy in strategies:
        try:
            sample = strategy.sample(shell)
        except Exception as exc:
            logger.debug("CPU load strategy %s failed: %s", strategy.name, exc)
            continue
        if sample is not None and sample.usable:
            logger.debug("CPU load from %s", strategy.name)
            return sample
        logger.debug("CPU load strategy %s returned no data", strategy.name)
    return LoadSample()


def processor_info(shell: PowerShell) -> tuple[str | None, int]:
    """Processor name and total core count across all packages."""
    rows = shell.records(_PROCESSOR_COMMAND)
    name = None
    if rows:
        name = str(rows[0].get("Name") or "").strip() or None
    cores = sum(int(row.get("NumberOfCores") or 0) for row in rows)
    return name, cores


def probe_cpu(
    shell: PowerShell,
    strategies: Iterable[CpuLoadStrategy] = DEFAULT_STRATEGIES,
) -> dict[str, Any]:
    name, cores = processor_info(shell)
    sample = sample_cpu_load(shell, strategies)
    return {
        "Name": name,
        "Cores": cores,
        "LoadPercent": sample.load,
        "PerCoreLoad": sample.per_core,
    }
