"""Configuration for the analyzer, the report formatter and the plugin.

Options are plain dataclasses passed explicitly by the caller. The core never
consults process-wide state: the working-directory default for ``root`` is
resolved at the entry points through resolve_root().
"""

import os
from dataclasses import dataclass, fields, replace
from collections.abc import Mapping
from typing import Any, Callable, Optional, Type, TypeVar

from .analysis_result import AnalysisResult
from .filters import ModuleFilter, coerce_filter

# Bundler-style option names accepted by options_from_mapping()
OPTION_ALIASES = {
    "transformModuleId": "transform_module_id",
    "hideDeps": "hide_deps",
    "showExports": "show_exports",
    "onAnalysis": "on_analysis",
    "skipFormatted": "skip_formatted",
    "writeTo": "write_to",
}


@dataclass
class ReportOptions:
    """Options controlling the text report.

    Attributes:
        root: Prefix removed from dependent ids that still carry it.
        hide_deps: Omit the list of dependent ids under each module.
        show_exports: List used and unused exports when both are known.
    """

    root: Optional[str] = None
    hide_deps: bool = False
    show_exports: bool = False


@dataclass
class AnalyzerOptions(ReportOptions):
    """Options controlling the analysis, shared by every entry point.

    Attributes:
        root: Prefix removed from every module id and dependency id.
        limit: Keep only the ``limit`` largest modules (None keeps all).
        filter: Substring, AnySubstring or Predicate; raw strings, lists of
            strings and callables are converted on construction.
        transform_module_id: Callable applied to every id after root
            stripping. Non-callable values are ignored by the analyzer.
    """

    limit: Optional[int] = None
    filter: Optional[ModuleFilter] = None
    transform_module_id: Optional[Callable[[str], str]] = None

    def __post_init__(self) -> None:
        self.filter = coerce_filter(self.filter)
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise TypeError(f"limit must be an integer, got {self.limit!r}")
            if self.limit < 0:
                raise ValueError(f"limit must be non-negative, got {self.limit}")


@dataclass
class PluginOptions(AnalyzerOptions):
    """Options for the build-pipeline hook.

    Attributes:
        on_analysis: Callback invoked with every AnalysisResult.
        skip_formatted: Do not write the text report.
        write_to: Sink receiving the text report.
        stdout: Write to stdout instead of stderr when write_to is unset.
    """

    on_analysis: Optional[Callable[[AnalysisResult], Any]] = None
    skip_formatted: bool = False
    write_to: Optional[Callable[[str], Any]] = None
    stdout: bool = False


OptionsT = TypeVar("OptionsT", bound=ReportOptions)


def resolve_root() -> Optional[str]:
    """Return the current working directory, or None if it is unavailable."""
    try:
        return os.getcwd()
    except OSError:
        return None


def options_from_mapping(
    data: Optional[Mapping[str, Any]], cls: Type[OptionsT] = AnalyzerOptions
) -> OptionsT:
    """Build an options dataclass from a mapping.

    Keys may be the dataclass field names or the bundler-style camelCase
    names listed in OPTION_ALIASES. Unknown keys are ignored.

    Args:
        data: Mapping of option names to values, or None for defaults.
        cls: Options dataclass to build.

    Returns:
        A new instance of ``cls``.
    """
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in (data or {}).items():
        name = OPTION_ALIASES.get(key, key)
        if name in known:
            kwargs[name] = value
    return cls(**kwargs)


def ensure_options(options: Any, cls: Type[OptionsT] = AnalyzerOptions) -> OptionsT:
    """Normalize an options argument for the public entry points.

    Args:
        options: None, a mapping, or an options dataclass instance. An
            instance of another options class is rebuilt as ``cls`` from
            the fields both classes share.
        cls: Options dataclass to build.

    Returns:
        An options instance whose ``root`` is resolved.

    Raises:
        TypeError: If ``options`` is neither a mapping nor an options instance.
    """
    if isinstance(options, cls):
        resolved = options
    elif isinstance(options, ReportOptions):
        known = {f.name for f in fields(cls)}
        resolved = cls(
            **{
                f.name: getattr(options, f.name)
                for f in fields(options)
                if f.name in known
            }
        )
    elif options is None or isinstance(options, Mapping):
        resolved = options_from_mapping(options, cls)
    else:
        raise TypeError(
            f"options must be a mapping or {cls.__name__}, "
            f"got {type(options).__name__}"
        )

    if resolved.root is None:
        resolved = replace(resolved, root=resolve_root())
    return resolved
