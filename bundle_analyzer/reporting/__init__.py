"""Report rendering for bundle analysis results."""

from .formatter import format_bytes, format_json, format_report

__all__ = ["format_bytes", "format_json", "format_report"]
