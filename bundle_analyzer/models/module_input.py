"""ModuleInput data model for module records handed over by a bundler."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple


def _optional_size(data: Mapping[str, Any], key: str) -> Optional[int]:
    """Read a non-negative numeric size, treating a missing key as None."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{key} must be a finite number, got {value}")
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {value}")
    return value


def _optional_names(data: Mapping[str, Any], key: str) -> Optional[Tuple[str, ...]]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise TypeError(f"{key} must be a list of export names")
    return tuple(value)


@dataclass(frozen=True)
class ModuleInput:
    """A single module as described by the bundler after tree-shaking.

    Attributes:
        id: Absolute path or other unique identifier of the module.
        dependencies: Ids of the modules this module imports, in import order.
        original_size: Size in bytes before dead-code elimination, if known.
        rendered_size: Size in bytes after dead-code elimination, if known.
        code: Rendered source text, used to derive the size when
            rendered_size is absent.
        rendered_exports: Export names kept in the bundle.
        removed_exports: Export names eliminated from the bundle.
    """

    id: str
    dependencies: Tuple[str, ...] = ()
    original_size: Optional[int] = None
    rendered_size: Optional[int] = None
    code: Optional[str] = None
    rendered_exports: Optional[Tuple[str, ...]] = None
    removed_exports: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModuleInput":
        """Create a ModuleInput from a bundler module record.

        The record uses the bundler's key names: ``id``, ``dependencies``,
        ``originalLength``, ``renderedLength``, ``code``, ``renderedExports``
        and ``removedExports``.

        Args:
            data: Mapping describing one module.

        Returns:
            The parsed ModuleInput.

        Raises:
            ValueError: If the record is missing fields or has the wrong shape.
        """
        try:
            if not isinstance(data, Mapping):
                raise TypeError(f"expected a mapping, got {type(data).__name__}")

            module_id = data["id"]
            if not isinstance(module_id, str):
                raise TypeError(f"id must be a string, got {type(module_id).__name__}")

            dependencies = data.get("dependencies")
            if dependencies is None:
                dependencies = ()
            if isinstance(dependencies, str) or not isinstance(
                dependencies, (list, tuple)
            ):
                raise TypeError("dependencies must be a list of module ids")
            if not all(isinstance(dep, str) for dep in dependencies):
                raise TypeError("dependencies must only contain string ids")

            code = data.get("code")
            if code is not None and not isinstance(code, str):
                raise TypeError(f"code must be a string, got {type(code).__name__}")

            return cls(
                id=module_id,
                dependencies=tuple(dependencies),
                original_size=_optional_size(data, "originalLength"),
                rendered_size=_optional_size(data, "renderedLength"),
                code=code,
                rendered_exports=_optional_names(data, "renderedExports"),
                removed_exports=_optional_names(data, "removedExports"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed module record: {e}") from e
