"""Text and JSON rendering of bundle analysis results.

The text layout is fixed and must stay byte-for-byte stable: tools parse it.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Union

from ..models.analysis_result import AnalysisResult
from ..models.options import ReportOptions, options_from_mapping

logger = logging.getLogger(__name__)

REPORT_TITLE = "Rollup File Analysis"
BORDER = "-" * 29
INDENT = "  "
LABEL_WIDTH = 16
SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_number(value: Union[int, float]) -> str:
    """Render a number without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_bytes(num_bytes: Union[int, float]) -> str:
    """Format a byte count using a decimal (1000-based) scale.

    Args:
        num_bytes: Size in bytes.

    Returns:
        ``"0 Byte"`` for zero, otherwise the size with up to three decimals
        in Bytes, KB, MB or GB (e.g. ``"1 KB"``, ``"1.5 MB"``).
    """
    if num_bytes == 0:
        return "0 Byte"

    value = float(num_bytes)
    unit = 0
    while abs(value) >= 1000 and unit < len(SIZE_UNITS) - 1:
        value /= 1000
        unit += 1

    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[unit]}"


def describe_error(error: BaseException) -> str:
    """Render an exception the way it is reported in place of a report."""
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def _strip_root(module_id: str, root: Optional[str]) -> str:
    return module_id.replace(root, "", 1) if root else module_id


def _field(label: str, value: Any, spacer: str = "") -> str:
    """Left-align a label in the fixed label column."""
    return f"{label:<{LABEL_WIDTH}}{spacer}{value}"


def _render(result: AnalysisResult, options: ReportOptions) -> str:
    lines: List[str] = [
        BORDER,
        REPORT_TITLE,
        BORDER,
        _field("bundle size:", format_bytes(result.bundle_size)),
        _field("original size:", format_bytes(result.bundle_orig_size)),
        _field("code reduction:", f"{format_number(result.bundle_reduction)} %"),
        _field("module count:", result.module_count),
        BORDER,
    ]

    for module in result.modules:
        orig_size = format_bytes(module.orig_size) if module.orig_size else "unknown"
        lines.extend(
            [
                _field("file:", module.id, " "),
                _field("bundle space:", f"{format_number(module.percent)} %", " "),
                _field("rendered size:", format_bytes(module.size), " "),
                _field("original size:", orig_size, " "),
                _field("code reduction:", f"{format_number(module.reduction)} %", " "),
                _field("dependents:", len(module.dependents), " "),
            ]
        )

        if not options.hide_deps:
            lines.extend(
                f"{INDENT}- {_strip_root(dependent, options.root)}"
                for dependent in module.dependents
            )

        # Only when the bundler reported both lists
        if (
            options.show_exports
            and module.rendered_exports is not None
            and module.removed_exports is not None
        ):
            lines.append(_field("used exports:", len(module.rendered_exports), " "))
            lines.extend(f"{INDENT}- {name}" for name in module.rendered_exports)
            lines.append(_field("unused exports:", len(module.removed_exports), " "))
            lines.extend(f"{INDENT}- {name}" for name in module.removed_exports)

        lines.append(BORDER)

    return "\n".join(lines) + "\n"


def format_report(
    result: AnalysisResult,
    options: Union[ReportOptions, Mapping[str, Any], None] = None,
) -> str:
    """Format an analysis result as the fixed-width text report.

    Formatting never raises: a malformed result produces the description of
    the error instead of a report.

    Args:
        result: AnalysisResult to render.
        options: Report options (dependents, exports, root stripping), as
            ReportOptions or a mapping of option names.

    Returns:
        The report text, one block per module separated by rules.
    """
    try:
        if isinstance(options, Mapping):
            options = options_from_mapping(options, ReportOptions)
        return _render(result, options or ReportOptions())
    except Exception as e:
        logger.debug("Could not format analysis result", exc_info=True)
        return describe_error(e)


def format_json(result: AnalysisResult) -> str:
    """Format analysis result as JSON.

    Args:
        result: AnalysisResult object to format.

    Returns:
        JSON string representation.
    """
    return json.dumps(result.to_dict(), indent=2)
