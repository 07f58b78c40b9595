"""Physical disk health probe (Windows Storage module)."""

from __future__ import annotations

from typing import Any

from hostcheck.host.powershell import PowerShell
from hostcheck.probes.memory import to_gib

UNAVAILABLE = {"Info": "Get-PhysicalDisk not available"}
NO_DEVICES = {"Info": "No physical disks found"}

# Enum members are stringified in PowerShell; ConvertTo-Json would emit integers
_PHYSICAL_DISK_COMMAND = (
    "Get-PhysicalDisk | Select-Object FriendlyName,"
    " @{n='HealthStatus';e={\"$($_.HealthStatus)\"}},"
    " @{n='OperationalStatus';e={$_.OperationalStatus -join ', '}},"
    " @{n='MediaType';e={\"$($_.MediaType)\"}},"
    " Size"
)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def _unique_name(name: str, taken: dict[str, Any]) -> str:
    if name not in taken:
        return name
    n = 2
    while f"{name} #{n}" in taken:
        n += 1
    return f"{name} #{n}"


def probe_physical_disks(shell: PowerShell) -> dict[str, Any]:
    if not shell.has_command("Get-PhysicalDisk"):
        return dict(UNAVAILABLE)

    rows = shell.records(_PHYSICAL_DISK_COMMAND)
    if not rows:
        return dict(NO_DEVICES)

    disks: dict[str, Any] = {}
    for row in rows:
        name = _unique_name(_text(row.get("FriendlyName")) or "Unknown", disks)
        disks[name] = {
            "HealthStatus": _text(row.get("HealthStatus")),
            "OperationalStatus": _text(row.get("OperationalStatus")),
            "MediaType": _text(row.get("MediaType")),
            "SizeGB": to_gib(row.get("Size")),
        }
    return disks
