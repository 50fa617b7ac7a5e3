"""Aggregation, console rendering and export of diagnostics."""

from .aggregator import group_by_kind, summarize
from .console import render_report, render_summary
from .exporter import export_json

__all__ = ["export_json", "group_by_kind", "render_report", "render_summary", "summarize"]
