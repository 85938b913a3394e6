"""Core bundle analyzer with dependency injection."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Union

from ..models.analysis_result import AnalysisResult
from ..models.filters import AnySubstring, Predicate, Substring
from ..models.module_input import ModuleInput
from ..models.module_report import ModuleReport
from ..models.options import AnalyzerOptions
from .size_calculator import SizeCalculator

logger = logging.getLogger(__name__)


class _Candidate(NamedTuple):
    """A module after normalization, before it is ranked and enriched."""

    id: str
    size: Union[int, float]
    module: ModuleInput


class BundleAnalyzer:
    """Derives per-module size and usage metrics from bundler metadata.

    The analysis runs in two passes. The first folds every input module into
    the bundle totals and the dependents index. The second narrows, ranks and
    enriches the module list. Filters and limits therefore never change the
    totals or the dependents of a module.

    Attributes:
        calculator: SizeCalculator used for sizes and percentages.
    """

    def __init__(self, calculator: Optional[SizeCalculator] = None) -> None:
        """Initialize the analyzer with injected dependencies.

        Args:
            calculator: Optional SizeCalculator (creates default if None).
        """
        self.calculator = calculator or SizeCalculator()

    def analyze(
        self, bundle: Any, options: Optional[AnalyzerOptions] = None
    ) -> AnalysisResult:
        """Analyze the modules of a bundle.

        Args:
            bundle: A mapping with a ``modules`` sequence (or ``cache.modules``
                when ``modules`` is absent), or a bare sequence of module
                records. Records are bundler mappings or ModuleInput objects.
            options: Analyzer options. ``root`` is used as given; callers
                resolve the working-directory default themselves.

        Returns:
            AnalysisResult with bundle totals and the reported modules.

        Raises:
            ValueError: If the bundle or one of its module records is malformed.
        """
        options = options or AnalyzerOptions()
        modules = self._load_modules(bundle)
        normalize = self._id_normalizer(options)

        # Pass 1: totals and dependents over every module
        dependents: Dict[str, List[str]] = {}
        candidates: List[_Candidate] = []
        bundle_size = 0
        bundle_orig_size = 0
        for module in modules:
            module_id = normalize(module.id)
            for dependency in module.dependencies:
                dependents.setdefault(normalize(dependency), []).append(module_id)

            size = self.calculator.rendered_size(module)
            bundle_size += size
            bundle_orig_size += module.original_size or 0
            candidates.append(_Candidate(module_id, size, module))

        logger.debug(
            "Folded %d modules: rendered=%s original=%s",
            len(modules),
            bundle_size,
            bundle_orig_size,
        )

        # Pass 2: narrow, rank, limit and enrich
        module_filter = options.filter
        if isinstance(module_filter, (Substring, AnySubstring)):
            candidates = [c for c in candidates if module_filter.matches(c.id)]
            logger.debug("%d modules match %r", len(candidates), module_filter)

        # Ties keep source order here, but the order of equal sizes is not
        # part of the contract.
        candidates.sort(key=lambda c: c.size, reverse=True)
        if options.limit is not None:
            candidates = candidates[: options.limit]

        reports = [
            self._build_report(candidate, dependents, bundle_size)
            for candidate in candidates
        ]
        if isinstance(module_filter, Predicate):
            reports = [report for report in reports if module_filter.accepts(report)]

        return AnalysisResult(
            bundle_size=bundle_size,
            bundle_orig_size=bundle_orig_size,
            bundle_reduction=self.calculator.reduction(bundle_size, bundle_orig_size),
            module_count=len(modules),
            modules=tuple(reports),
        )

    def _build_report(
        self,
        candidate: _Candidate,
        dependents: Dict[str, List[str]],
        bundle_size: Union[int, float],
    ) -> ModuleReport:
        module = candidate.module
        return ModuleReport(
            id=candidate.id,
            size=candidate.size,
            orig_size=module.original_size,
            percent=self.calculator.bundle_percent(candidate.size, bundle_size),
            reduction=self.calculator.reduction(candidate.size, module.original_size),
            dependents=tuple(dependents.get(candidate.id, ())),
            rendered_exports=module.rendered_exports,
            removed_exports=module.removed_exports,
        )

    @staticmethod
    def _id_normalizer(options: AnalyzerOptions) -> Callable[[str], str]:
        """Build the id normalization applied to module and dependency ids.

        The first occurrence of ``root`` is removed, then
        ``transform_module_id`` is applied if it is callable.
        """
        root = options.root
        transform = options.transform_module_id
        if transform is not None and not callable(transform):
            logger.debug("Ignoring non-callable transform_module_id %r", transform)
            transform = None

        def normalize(module_id: str) -> str:
            if root:
                module_id = module_id.replace(root, "", 1)
            if transform is not None:
                module_id = transform(module_id)
            return module_id

        return normalize

    @staticmethod
    def _load_modules(bundle: Any) -> List[ModuleInput]:
        """Extract and parse the module records of a bundle descriptor.

        Raises:
            ValueError: If the descriptor or a record is malformed.
        """
        if isinstance(bundle, Mapping):
            records = bundle.get("modules")
            cache = bundle.get("cache")
            if records is None and isinstance(cache, Mapping):
                records = cache.get("modules")
            if records is None:
                records = []
        elif isinstance(bundle, Sequence) and not isinstance(bundle, (str, bytes)):
            records = bundle
        else:
            raise ValueError(
                f"Malformed bundle: expected a mapping or a list of modules, "
                f"got {type(bundle).__name__}"
            )

        if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
            raise ValueError(
                f"Malformed bundle: modules must be a list, "
                f"got {type(records).__name__}"
            )

        modules: List[ModuleInput] = []
        for index, record in enumerate(records):
            if isinstance(record, ModuleInput):
                modules.append(record)
                continue
            try:
                modules.append(ModuleInput.from_dict(record))
            except ValueError as e:
                raise ValueError(f"Module #{index}: {e}") from e
        return modules
