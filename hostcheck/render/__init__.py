"""Report renderers — maps output formats to render functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from hostcheck.render.html import render_html
from hostcheck.render.json_renderer import render_json
from hostcheck.report.models import Report

logger = logging.getLogger(__name__)

RenderFunc = Callable[[Report], str]

RENDERERS: dict[str, RenderFunc] = {
    "html": render_html,
    "json": render_json,
}


def write_report(report: Report, path: str | Path, fmt: str = "html") -> Path:
    """Render *report* in *fmt* and write it to *path* (UTF-8)."""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown report format: {fmt}") from None

    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(renderer(report), encoding="utf-8")
    logger.info("Wrote %s report to %s", fmt, path)
    return path


__all__ = ["RENDERERS", "render_html", "render_json", "write_report"]
