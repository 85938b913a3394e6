"""Data models for bundle analysis.

This module defines the core data structures used throughout the analyzer:
- ModuleInput: A single module record as handed over by the bundler
- ModuleReport: Derived size and usage metrics for one module
- AnalysisResult: Aggregated bundle totals plus the reported modules
- Filter variants and the option dataclasses shared by every entry point
"""

from .analysis_result import AnalysisResult
from .filters import AnySubstring, Predicate, Substring, coerce_filter
from .module_input import ModuleInput
from .module_report import ModuleReport
from .options import AnalyzerOptions, PluginOptions, ReportOptions

__all__ = [
    "ModuleInput",
    "ModuleReport",
    "AnalysisResult",
    "Substring",
    "AnySubstring",
    "Predicate",
    "coerce_filter",
    "AnalyzerOptions",
    "ReportOptions",
    "PluginOptions",
]
