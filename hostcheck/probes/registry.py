"""Probe registry — named probes run in isolation from one another."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable

from hostcheck.host.powershell import PowerShell
from hostcheck.report.models import error_payload

logger = logging.getLogger(__name__)

# A probe takes no arguments (dependencies are bound at registration)
ProbeFunc = Callable[[], dict[str, Any]]


class ProbeRegistry:
    """Registry of probe functions keyed by metric domain."""

    def __init__(self) -> None:
        self._probes: dict[str, ProbeFunc] = {}

    def register(self, name: str, func: ProbeFunc) -> None:
        self._probes[name] = func

    def get(self, name: str) -> ProbeFunc:
        return self._probes[name]

    def names(self) -> list[str]:
        return list(self._probes.keys())

    def run(self, name: str) -> dict[str, Any]:
        """Run one probe; any fault comes back as an error payload."""
        func = self._probes[name]
        try:
            return func()
        except Exception as exc:
            logger.error("Probe %s failed: %s", name, exc)
            return error_payload(exc, name)


def build_default_registry(shell: PowerShell | None = None) -> ProbeRegistry:
    """Build a registry with the standard host probes."""
    from hostcheck.probes.cpu import probe_cpu
    from hostcheck.probes.disks import probe_physical_disks
    from hostcheck.probes.memory import probe_memory
    from hostcheck.probes.system import probe_system
    from hostcheck.probes.volumes import probe_volumes

    shell = shell or PowerShell()
    registry = ProbeRegistry()

    registry.register("system", partial(probe_system, shell))
    registry.register("cpu", partial(probe_cpu, shell))
    registry.register("memory", probe_memory)
    registry.register("volumes", probe_volumes)
    registry.register("physical_disks", partial(probe_physical_disks, shell))

    return registry
