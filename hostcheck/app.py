"""Application orchestrator — config, logging, report, output."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from hostcheck.config.settings import Settings, load_config
from hostcheck.host.powershell import PowerShell
from hostcheck.probes.registry import build_default_registry
from hostcheck.render import write_report
from hostcheck.report.assembly import build_report
from hostcheck.report.models import Report, exit_code
from hostcheck.ui.console import render_console
from hostcheck.ui.logging_handler import ConsoleLogHandler

logger = logging.getLogger(__name__)

_FILE_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_output_path(settings: Settings, fmt: str, when: datetime) -> Path:
    """``<directory>/HostHealth_<YYYYmmdd_HHMMSS>.<fmt>``."""
    return settings.output.directory_path / f"HostHealth_{when:%Y%m%d_%H%M%S}.{fmt}"


class Application:
    """Top-level application orchestrator."""

    def __init__(self, config_path: str | Path | None = None,
                 console: Console | None = None) -> None:
        self.settings = load_config(config_path)
        self.shell = PowerShell(
            executable=self.settings.powershell.executable,
            timeout=self.settings.powershell.timeout,
        )
        self.registry = build_default_registry(self.shell)
        self.console = console or Console()
        self._log_handlers: list[logging.Handler] = []
        self._previous_log_level: int | None = None

    def collect(self) -> Report:
        return build_report(self.registry)

    def run(self, *, output: str | Path | None = None, fmt: str | None = None,
            quiet: bool = False, verbose: bool = False) -> int:
        """Build the report, write it, print the summary; return the exit code."""
        self._setup_logging(verbose)
        try:
            report = self.collect()
            fmt = fmt or self.settings.output.format
            path = (Path(output) if output
                    else default_output_path(self.settings, fmt, report.generated_at))
            written = write_report(report, path, fmt)

            if not quiet:
                render_console(self.console, report)
            self.console.print(f"Report written to {written}")
            return exit_code(report)
        finally:
            self._teardown_logging()

    def _setup_logging(self, verbose: bool) -> None:
        level = logging.DEBUG if verbose else logging.getLevelName(
            self.settings.logging.level.upper()
        )
        if not isinstance(level, int):
            level = logging.WARNING
        self._previous_log_level = logging.root.level
        logging.root.setLevel(level)

        handler: logging.Handler = ConsoleLogHandler()
        self._log_handlers.append(handler)

        if self.settings.logging.file:
            log_path = Path(self.settings.logging.file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(_FILE_LOG_FORMAT))
            self._log_handlers.append(file_handler)

        for handler in self._log_handlers:
            logging.root.addHandler(handler)

    def _teardown_logging(self) -> None:
        for handler in self._log_handlers:
            logging.root.removeHandler(handler)
            handler.close()
        self._log_handlers.clear()
        if self._previous_log_level is not None:
            logging.root.setLevel(self._previous_log_level)
            self._previous_log_level = None
