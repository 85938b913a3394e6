"""Size calculator for computing bundle size metrics."""

from typing import Optional, Union

from ..models.module_input import ModuleInput

Number = Union[int, float]


class SizeCalculator:
    """Calculates rendered sizes, reductions and bundle shares.

    All percentages are rounded to two decimals and kept within 0-100.
    Zero denominators yield 0.0 instead of NaN or infinity.
    """

    def rendered_size(self, module: ModuleInput) -> Number:
        """Determine the rendered size of a module.

        Args:
            module: Module record from the bundler.

        Returns:
            The explicit rendered size if present, else the UTF-8 byte length
            of the rendered code, else 0.
        """
        if module.rendered_size is not None:
            return module.rendered_size
        if module.code:
            return len(module.code.encode("utf-8"))
        return 0

    def reduction(self, size: Number, orig_size: Optional[Number]) -> float:
        """Calculate the percentage removed by tree-shaking.

        Args:
            size: Rendered size in bytes.
            orig_size: Original size in bytes, or None if unknown.

        Returns:
            Reduction percentage (0-100), or 0.0 if the original size is
            unknown or zero.
        """
        if not orig_size:
            return 0.0
        return max(0.0, round(100 - (size / orig_size) * 100, 2))

    def bundle_percent(self, size: Number, bundle_size: Number) -> float:
        """Calculate a module's share of the rendered bundle.

        Args:
            size: Rendered size of the module.
            bundle_size: Total rendered size of the bundle.

        Returns:
            Percentage (0-100), or 0.0 for an empty bundle.
        """
        if not bundle_size:
            return 0.0
        return min(round((size / bundle_size) * 100, 2), 100.0)
