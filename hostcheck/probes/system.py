"""System identity and uptime probe."""

from __future__ import annotations

import getpass
import logging
import platform
import socket
from datetime import datetime, timedelta
from typing import Any

import psutil

from hostcheck.host.models import CommandError
from hostcheck.host.powershell import PowerShell

logger = logging.getLogger(__name__)

_IS_ADMIN_COMMAND = (
    "([Security.Principal.WindowsPrincipal]"
    "[Security.Principal.WindowsIdentity]::GetCurrent())"
    ".IsInRole([Security.Principal.WindowsBuiltInRole]::Administrator)"
)


def format_uptime(delta: timedelta) -> str:
    """Render an uptime as ``{days}d {hours}h {minutes}m`` (truncated)."""
    total_minutes = max(int(delta.total_seconds()) // 60, 0)
    days, rest = divmod(total_minutes, 24 * 60)
    hours, minutes = divmod(rest, 60)
    return f"{days}d {hours}h {minutes}m"


def is_admin(shell: PowerShell) -> bool | None:
    """Whether the current user holds the Administrator role (None if unknown)."""
    try:
        result = shell.run(_IS_ADMIN_COMMAND).raise_for_error()
    except CommandError as exc:
        logger.warning("Administrator check failed: %s", exc)
        return None
    return result.output.strip().lower() == "true"


def probe_system(shell: PowerShell) -> dict[str, Any]:
    now = datetime.now()
    boot = datetime.fromtimestamp(psutil.boot_time())
    return {
        "ComputerName": socket.gethostname(),
        "UserName": getpass.getuser(),
        "OSVersion": platform.platform(),
        "IsAdmin": is_admin(shell),
        "Uptime": format_uptime(now - boot),
        "Timestamp": now.isoformat(timespec="seconds"),
    }
