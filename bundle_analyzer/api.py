"""Awaitable entry points for bundle analysis.

The analysis itself is synchronous. These coroutines only give asynchronous
callers (build pipelines, plugin hosts) a uniform interface.
"""

import logging
from typing import Any, Mapping, Optional, Union

from .analysis.analyzer import BundleAnalyzer
from .models.analysis_result import AnalysisResult
from .models.options import AnalyzerOptions, ensure_options
from .reporting.formatter import describe_error, format_report

logger = logging.getLogger(__name__)

OptionsArg = Optional[Union[AnalyzerOptions, Mapping[str, Any]]]


def create_analyzer() -> BundleAnalyzer:
    """Create a BundleAnalyzer with default dependencies."""
    return BundleAnalyzer()


async def analyze(bundle: Any, options: OptionsArg = None) -> AnalysisResult:
    """Analyze a bundle descriptor.

    Args:
        bundle: Bundle descriptor (see BundleAnalyzer.analyze).
        options: AnalyzerOptions or a mapping of option names. An unset
            ``root`` defaults to the current working directory.

    Returns:
        AnalysisResult for the bundle.

    Raises:
        ValueError: If the bundle is malformed; the original cause is chained.
        TypeError: If the options cannot be interpreted.
    """
    resolved = ensure_options(options)
    return create_analyzer().analyze(bundle, resolved)


async def formatted(bundle: Any, options: OptionsArg = None) -> str:
    """Analyze a bundle and render the text report.

    Errors never propagate: the description of the error is returned in
    place of the report.

    Args:
        bundle: Bundle descriptor (see BundleAnalyzer.analyze).
        options: AnalyzerOptions or a mapping of option names.

    Returns:
        The text report, or the description of the error that prevented it.
    """
    try:
        resolved = ensure_options(options)
        result = create_analyzer().analyze(bundle, resolved)
        return format_report(result, resolved)
    except Exception as e:
        logger.debug("Bundle analysis failed", exc_info=True)
        return describe_error(e)
