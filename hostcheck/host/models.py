"""Host command data models and errors."""

from __future__ import annotations

from dataclasses import dataclass


class HostcheckError(Exception):
    """Base class for hostcheck errors."""


class CommandError(HostcheckError):
    """A PowerShell command could not be run or reported a failure."""

    def __init__(self, result: CommandResult) -> None:
        super().__init__(result.error or f"Command failed: {result.command}")
        self.result = result


class ConfigError(HostcheckError):
    """The configuration file is unreadable or invalid."""


@dataclass
class CommandResult:
    command: str
    output: str
    success: bool = True
    error: str | None = None
    return_code: int | None = None

    def raise_for_error(self) -> CommandResult:
        if not self.success:
            raise CommandError(self)
        return self
