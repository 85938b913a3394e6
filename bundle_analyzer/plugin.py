"""Build-pipeline hook that reports on every generated bundle.

The hook receives the bundler's output mapping (output file name -> chunk,
each chunk carrying a ``modules`` mapping of module id -> module info) and a
callable resolving the ids a module imports. It assembles the raw module list,
runs the analysis and hands the result to a callback and a text sink.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional

from .api import analyze
from .models.analysis_result import AnalysisResult
from .models.options import PluginOptions, ensure_options
from .reporting.formatter import format_report

logger = logging.getLogger(__name__)

PLUGIN_NAME = "bundle-analyzer"


def _lookup(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute-style object."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def collect_modules(
    bundle: Mapping[str, Any],
    resolve_imports: Optional[Callable[[str], Iterable[str]]] = None,
) -> List[Dict[str, Any]]:
    """Flatten the bundler's output mapping into module records.

    Args:
        bundle: Mapping of output file name to chunk. Outputs without a
            ``modules`` mapping (assets) are skipped.
        resolve_imports: Returns the ids a module imports; modules get no
            dependencies when it is None.

    Returns:
        Module records (``id``, ``dependencies`` plus the module info fields)
        in output order.
    """
    records: List[Dict[str, Any]] = []
    for chunk in bundle.values():
        chunk_modules = _lookup(chunk, "modules")
        if not isinstance(chunk_modules, Mapping):
            continue
        for module_id, module_info in chunk_modules.items():
            record = dict(module_info) if isinstance(module_info, Mapping) else dict(vars(module_info))
            record["id"] = module_id
            record["dependencies"] = list(resolve_imports(module_id)) if resolve_imports else []
            records.append(record)
    return records


def _default_sink(use_stdout: bool) -> Callable[[str], Any]:
    stream = sys.stdout if use_stdout else sys.stderr

    def write(text: str) -> None:
        print(text, file=stream)

    return write


class AnalyzerPlugin:
    """Bundler hook producing an analysis for every generated bundle.

    Attributes:
        name: Plugin name reported to the host.
        options: Resolved PluginOptions.
    """

    name = PLUGIN_NAME

    def __init__(self, options: Any = None) -> None:
        """Initialize the plugin.

        Args:
            options: PluginOptions, another options dataclass, or a mapping
                of option names.
        """
        self.options: PluginOptions = ensure_options(options, PluginOptions)
        self.write_to = self.options.write_to or _default_sink(self.options.stdout)

    def on_analysis(self, result: AnalysisResult) -> None:
        """Deliver an analysis to the callback and the text sink."""
        if callable(self.options.on_analysis):
            self.options.on_analysis(result)
        if not self.options.skip_formatted:
            self.write_to(format_report(result, self.options))

    async def generate_bundle(
        self,
        output_options: Any,
        bundle: Mapping[str, Any],
        is_write: bool = False,
        resolve_imports: Optional[Callable[[str], Iterable[str]]] = None,
    ) -> Optional[AnalysisResult]:
        """Analyze a generated bundle.

        Failures are logged and never raised into the bundler.

        Args:
            output_options: Host output options (unused).
            bundle: Mapping of output file name to chunk.
            is_write: Whether the host is writing to disk (unused).
            resolve_imports: Returns the ids a module imports.

        Returns:
            The AnalysisResult, or None if the analysis failed.
        """
        try:
            modules = collect_modules(bundle, resolve_imports)
            result = await analyze({"modules": modules}, self.options)
            self.on_analysis(result)
            return result
        except Exception:
            logger.error("Bundle analysis failed", exc_info=True)
            return None


def plugin(options: Any = None, **kwargs: Any) -> AnalyzerPlugin:
    """Create an AnalyzerPlugin from an options object or keyword options.

    Example:
        plugin(limit=10, hide_deps=True)
        plugin({"limit": 10, "hideDeps": True})
    """
    if options is None:
        options = kwargs
    elif kwargs:
        raise TypeError("pass either an options object or keyword options, not both")
    return AnalyzerPlugin(options)
