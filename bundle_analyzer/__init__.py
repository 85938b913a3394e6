"""Bundle Analyzer Package.

This package turns the per-module metadata a bundler emits after tree-shaking
into a size and usage report, including:
- Rendered and original sizes with reduction percentages
- Each module's share of the bundle and the modules importing it
- A fixed-width text report and a JSON rendering
- A build-pipeline hook and a command-line interface
"""

__version__ = "0.3.0"

from .api import analyze, formatted
from .models.options import AnalyzerOptions, PluginOptions, ReportOptions
from .plugin import AnalyzerPlugin, plugin

__all__ = [
    "analyze",
    "formatted",
    "AnalyzerOptions",
    "ReportOptions",
    "PluginOptions",
    "AnalyzerPlugin",
    "plugin",
]
