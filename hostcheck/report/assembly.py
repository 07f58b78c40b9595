"""Report assembly — run every probe and collect the sections in order."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable

from hostcheck.metrics.sections import (
    cpu_section,
    memory_section,
    physical_disks_section,
    system_section,
    volumes_section,
)
from hostcheck.probes.registry import ProbeRegistry, build_default_registry
from hostcheck.report.models import Report, Section

logger = logging.getLogger(__name__)

SectionBuilder = Callable[[Any], Section]

# Probe name -> section builder, in report order
SECTION_BUILDERS: dict[str, SectionBuilder] = {
    "system": system_section,
    "cpu": cpu_section,
    "memory": memory_section,
    "volumes": volumes_section,
    "physical_disks": physical_disks_section,
}


def build_report(
    registry: ProbeRegistry | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> Report:
    """Run the full probe set and return the assembled report."""
    generated_at = clock()
    registry = registry or build_default_registry()

    sections = []
    for name, builder in SECTION_BUILDERS.items():
        section = builder(registry.run(name))
        logger.debug("Section %r: %s", section.title, section.severity.value)
        sections.append(section)

    return Report(generated_at=generated_at, sections=tuple(sections))
