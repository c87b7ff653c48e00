"""
Result assembler.

Single terminal shape for every lookup path (fixture or computed).
"""

from foodscan.domain.dietary.models import AnalysisVerdict
from foodscan.domain.product.models import NormalizedProduct, ResolvedProduct


class ResultAssembler:
    """Merges a normalized product with its verdict."""

    @staticmethod
    def assemble(product: NormalizedProduct, verdict: AnalysisVerdict) -> ResolvedProduct:
        """Merge product fields and verdict fields into a ResolvedProduct."""
        return ResolvedProduct(**product.model_dump(), **verdict.model_dump())
