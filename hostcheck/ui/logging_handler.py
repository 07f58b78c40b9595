"""Rich logging handler — colored level tags on stderr."""

from __future__ import annotations

import logging
from datetime import datetime

from rich.console import Console
from rich.text import Text

# Level tag + Rich style
_LEVEL_STYLES: dict[int, tuple[str, str]] = {
    logging.DEBUG:    ("DBG", "dim cyan"),
    logging.INFO:     ("INF", "cyan"),
    logging.WARNING:  ("WRN", "yellow"),
    logging.ERROR:    ("ERR", "red"),
    logging.CRITICAL: ("CRT", "bold red"),
}


class ConsoleLogHandler(logging.Handler):
    """Logging handler that prints formatted records to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(self._format_record(record))
        except Exception:
            self.handleError(record)

    @staticmethod
    def _format_record(record: logging.LogRecord) -> Text:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        tag, style = _LEVEL_STYLES.get(record.levelno, ("???", ""))
        name = record.name.rsplit(".", 1)[-1]
        msg = record.getMessage()

        text = Text()
        text.append(ts, style="dim")
        text.append(" ")
        text.append(tag, style=style)
        text.append(" ")
        text.append(f"{name}: ", style="dim")
        text.append(msg)
        return text
