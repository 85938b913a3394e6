"""AnalysisResult data model for aggregated bundle analysis results."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .module_report import ModuleReport


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregated results from analyzing a bundle.

    The totals always cover every module handed to the analyzer; filters and
    limits only narrow ``modules``.

    Attributes:
        bundle_size: Sum of rendered sizes over all input modules.
        bundle_orig_size: Sum of original sizes over all input modules.
        bundle_reduction: Percentage removed by tree-shaking (0-100).
        module_count: Number of input modules before filtering.
        modules: Reported modules, largest first.
    """

    bundle_size: Union[int, float]
    bundle_orig_size: Union[int, float]
    bundle_reduction: float
    module_count: int
    modules: Tuple[ModuleReport, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.modules, list):
            object.__setattr__(self, "modules", tuple(self.modules))

    def to_dict(self) -> dict:
        """Serialize AnalysisResult to a JSON-compatible dictionary.

        Returns:
            Dictionary representation with totals and all reported modules.
        """
        return {
            "bundle_size": self.bundle_size,
            "bundle_orig_size": self.bundle_orig_size,
            "bundle_reduction": self.bundle_reduction,
            "module_count": self.module_count,
            "modules": [module.to_dict() for module in self.modules],
        }

    def get_module(self, module_id: str) -> Optional[ModuleReport]:
        """Look up a reported module by its (normalized) id.

        Args:
            module_id: Id as it appears in the report.

        Returns:
            The matching ModuleReport, or None if it was not reported.
        """
        for module in self.modules:
            if module.id == module_id:
                return module
        return None

    def __repr__(self) -> str:
        """Human-readable representation for debugging."""
        return (
            f"AnalysisResult(size={self.bundle_size}, "
            f"original={self.bundle_orig_size}, "
            f"reduction={self.bundle_reduction}%, "
            f"modules={len(self.modules)}/{self.module_count})"
        )
