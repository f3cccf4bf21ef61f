"""Report rendering and export."""

from __future__ import annotations

from .report import build_report, build_table, format_duration, render_report, save_report

__all__ = [
    "build_report",
    "build_table",
    "format_duration",
    "render_report",
    "save_report",
]
