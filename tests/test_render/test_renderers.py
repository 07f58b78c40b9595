"""Tests for the JSON and HTML renderers and report writing."""

from __future__ import annotations

import json

import pytest

from hostcheck.metrics.sections import physical_disks_section, volumes_section
from hostcheck.render import RENDERERS, write_report
from hostcheck.render.html import render_html, render_section
from hostcheck.render.json_renderer import render_json
from hostcheck.report.models import error_payload


# ── JSON ─────────────────────────────────────────────────────────────

def test_render_json_top_level_keys(sample_report):
    doc = json.loads(render_json(sample_report))
    assert list(doc) == ["GeneratedAt", "Sections"]
    assert doc["GeneratedAt"] == "2024-05-01T09:30:00"
    assert [s["Title"] for s in doc["Sections"]][0] == "System"
    assert doc["Sections"][1]["Data"]["PerCoreLoad"] == [10.0, 14.0, 9.0, 15.0]
    assert doc["Sections"][3]["Data"]["C:"]["Status"] == "Normal"


# ── HTML ─────────────────────────────────────────────────────────────

def test_render_html_document(sample_report):
    doc = render_html(sample_report)
    assert doc.startswith("<!DOCTYPE html>")
    assert doc.count('<div class="section') == 5
    assert "Generated 2024-05-01 09:30:00" in doc
    assert "10.0, 14.0, 9.0, 15.0" in doc


def test_render_section_severity_classes():
    section = volumes_section({
        "C:": {"TotalGB": 100.0, "UsedGB": 92.0, "FreeGB": 8.0, "UsedPct": 92.0},
    })
    block = render_section(section)
    assert 'class="section sev-error"' in block
    assert "<th>Volume</th>" in block
    assert "<td>C:</td>" in block
    assert "<td>Critical</td>" in block


def test_render_section_error_payload_as_key_values():
    section = physical_disks_section(
        error_payload(RuntimeError("<denied>"), "physical_disks")
    )
    block = render_section(section)
    assert "sev-warn" in block
    assert "&lt;denied&gt;" in block
    assert "<th>Message</th>" in block


def test_render_section_info_marker():
    block = render_section(physical_disks_section({"Info": "Get-PhysicalDisk not available"}))
    assert "sev-info" in block
    assert "Get-PhysicalDisk not available" in block


# ── Writing ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("fmt", sorted(RENDERERS))
def test_write_report(sample_report, tmp_path, fmt):
    path = write_report(sample_report, tmp_path / "out" / f"report.{fmt}", fmt)
    assert path.exists()
    assert path.read_text(encoding="utf-8") == RENDERERS[fmt](sample_report)


def test_write_report_unknown_format(sample_report, tmp_path):
    with pytest.raises(ValueError):
        write_report(sample_report, tmp_path / "report.txt", "txt")
