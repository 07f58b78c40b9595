"""Fixed local volume probe."""

from __future__ import annotations

import logging
from typing import Any

import psutil

from hostcheck.probes.memory import percent, to_gib

logger = logging.getLogger(__name__)


def is_fixed(partition: Any) -> bool:
    """Fixed local disk (removable, network and optical media excluded)."""
    opts = [opt.strip().lower() for opt in (partition.opts or "").split(",")]
    return "fixed" in opts


def volume_id(partition: Any) -> str:
    """Drive letter for a partition, e.g. ``C:\\`` -> ``C:``."""
    return (partition.device or partition.mountpoint).rstrip("\\/") or partition.mountpoint


def probe_volumes() -> dict[str, Any]:
    volumes: dict[str, Any] = {}
    for part in psutil.disk_partitions(all=False):
        if not is_fixed(part):
            continue
        try:
            usage = psutil.disk_usage(part.mountpoint)
            total, free = usage.total, usage.free
        except OSError as exc:
            logger.warning("Cannot read size of %s: %s", part.mountpoint, exc)
            total, free = 0, 0
        used = max(total - free, 0)
        volumes[volume_id(part)] = {
            "TotalGB": to_gib(total),
            "UsedGB": to_gib(used),
            "FreeGB": to_gib(free),
            "UsedPct": percent(used, total),
        }
    return volumes
