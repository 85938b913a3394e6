"""Module filters for narrowing the reported module list.

A filter is one of three variants:
- Substring: keep modules whose id contains the text
- AnySubstring: keep modules whose id contains at least one of the texts
- Predicate: keep reports for which a callable returns a truthy value

Substring filters look at ids only and run before sizes are ranked. A
Predicate sees the finished ModuleReport and runs last.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from .module_report import ModuleReport


@dataclass(frozen=True)
class Substring:
    """Keep modules whose id contains ``text``."""

    text: str

    def matches(self, module_id: str) -> bool:
        return self.text in module_id


@dataclass(frozen=True)
class AnySubstring:
    """Keep modules whose id contains at least one of ``texts``."""

    texts: Tuple[str, ...]

    def matches(self, module_id: str) -> bool:
        return any(text in module_id for text in self.texts)


@dataclass(frozen=True)
class Predicate:
    """Keep module reports accepted by ``func``."""

    func: Callable[[ModuleReport], Any]

    def accepts(self, report: ModuleReport) -> bool:
        return bool(self.func(report))


ModuleFilter = Union[Substring, AnySubstring, Predicate]


def coerce_filter(value: Any) -> Optional[ModuleFilter]:
    """Convert a raw filter value into a filter variant.

    Args:
        value: None, a filter variant, a string, a list/tuple of strings,
            or a callable taking a ModuleReport.

    Returns:
        The matching filter variant, or None if no filtering is requested.

    Raises:
        TypeError: If the value cannot be interpreted as a filter.
    """
    if value is None or isinstance(value, (Substring, AnySubstring, Predicate)):
        return value
    if isinstance(value, str):
        return Substring(value)
    if isinstance(value, (list, tuple)):
        if not all(isinstance(text, str) for text in value):
            raise TypeError("filter list must only contain strings")
        return AnySubstring(tuple(value))
    if callable(value):
        return Predicate(value)
    raise TypeError(
        f"filter must be a string, a list of strings or a callable, "
        f"got {type(value).__name__}"
    )
