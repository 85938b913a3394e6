"""ModuleReport data model for per-module size and usage metrics."""

from dataclasses import asdict, dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ModuleReport:
    """Size and usage metrics for one module of the bundle.

    Attributes:
        id: Module id after root stripping and id transformation.
        size: Rendered size in bytes.
        orig_size: Original size in bytes, or None if the bundler did not
            report one.
        percent: Share of the total rendered bundle size (0-100).
        reduction: Percentage removed by tree-shaking (0-100).
        dependents: Ids of the modules importing this module.
        rendered_exports: Export names kept in the bundle, passed through.
        removed_exports: Export names eliminated, passed through.
    """

    id: str
    size: Union[int, float]
    orig_size: Optional[Union[int, float]] = None
    percent: float = 0.0
    reduction: float = 0.0
    dependents: Tuple[str, ...] = ()
    rendered_exports: Optional[Tuple[str, ...]] = None
    removed_exports: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        for name in ("dependents", "rendered_exports", "removed_exports"):
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))

    def to_dict(self) -> dict:
        """Serialize ModuleReport to a JSON-compatible dictionary.

        Returns:
            Dictionary representation of the ModuleReport with all fields.
        """
        data = asdict(self)
        for name in ("dependents", "rendered_exports", "removed_exports"):
            if data[name] is not None:
                data[name] = list(data[name])
        return data

    def __repr__(self) -> str:
        """Human-readable representation for debugging."""
        return (
            f"ModuleReport('{self.id}', size={self.size}, "
            f"percent={self.percent}, reduction={self.reduction}, "
            f"dependents={len(self.dependents)})"
        )
