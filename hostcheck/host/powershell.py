"""PowerShell runner — the gateway to Windows instrumentation (CIM, counters, Storage)."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from typing import Any

from hostcheck.host.models import CommandError, CommandResult

logger = logging.getLogger(__name__)

_CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)


class PowerShell:
    """Runs PowerShell commands as one-shot subprocesses."""

    def __init__(self, executable: str = "powershell", timeout: int = 30) -> None:
        self.executable = executable
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return shutil.which(self.executable) is not None

    def run(self, command: str) -> CommandResult:
        """Run a command and return its output. Never raises."""
        if not self.available:
            return CommandResult(
                command=command, output="", success=False,
                error=f"{self.executable} not found on PATH",
            )

        argv = [self.executable, "-NoProfile", "-NonInteractive", "-Command", command]
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                creationflags=_CREATE_NO_WINDOW,
            )
        except subprocess.TimeoutExpired:
            logger.warning("PowerShell command timed out after %ds: %s",
                           self.timeout, command)
            return CommandResult(
                command=command, output="", success=False,
                error=f"Timed out after {self.timeout}s",
            )
        except OSError as exc:
            return CommandResult(
                command=command, output="", success=False, error=str(exc),
            )

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            return CommandResult(
                command=command, output=proc.stdout or "", success=False,
                error=stderr or f"Exit code {proc.returncode}",
                return_code=proc.returncode,
            )
        return CommandResult(
            command=command, output=proc.stdout or "",
            return_code=proc.returncode,
        )

    def query(self, command: str) -> Any:
        """Run a command through ``ConvertTo-Json`` and return the parsed value.

        Returns None when the command produced no output. Raises
        ``CommandError`` if the command fails or emits invalid JSON.
        """
        result = self.run(f"{command} | ConvertTo-Json -Compress -Depth 3")
        result.raise_for_error()
        raw = result.output.strip()
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CommandError(CommandResult(
                command=result.command, output=raw, success=False,
                error=f"Invalid JSON from PowerShell: {exc}",
            )) from exc

    def records(self, command: str) -> list[dict[str, Any]]:
        """Like ``query`` but always a list of objects (single objects are wrapped)."""
        data = self.query(command)
        if data is None:
            return []
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list):
            return [item for item in data if isinstance(item, dict)]
        return []

    def has_command(self, name: str) -> bool:
        """Whether a cmdlet or function is installed (e.g. ``Get-PhysicalDisk``).

        False only when PowerShell itself is missing or the lookup ran and
        found nothing. A lookup that fails to run raises ``CommandError``.
        """
        if not self.available:
            return False
        result = self.run(
            f"[bool](Get-Command {name} -ErrorAction SilentlyContinue)"
        ).raise_for_error()
        return result.output.strip().lower() == "true"
