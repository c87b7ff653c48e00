"""
Dietary analyzer.

Pure evaluation of a normalized product against a dietary profile.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from foodscan.domain.dietary.models import AnalysisVerdict, DietaryProfile
from foodscan.domain.dietary.rules import DEFAULT_RULES, DietRule
from foodscan.domain.product.models import NormalizedProduct

logger = structlog.get_logger(__name__)


class DietaryAnalyzer:
    """Evaluates products against the rules of the declared diets.

    Only rules whose diet is declared in the profile are considered.
    When several fire, the most restrictive status wins; ties keep the
    earliest rule in registry order. No rule firing yields the default
    YES verdict.

    Example:
        >>> analyzer = DietaryAnalyzer()
        >>> product = NormalizedProduct(
        ...     product_name="Latte",
        ...     ingredient_text="Water, Milk, Sugar",
        ...     image_uri="https://example.com/a.jpg",
        ...     nutrition_image_uri="https://example.com/a.jpg",
        ... )
        >>> verdict = analyzer.evaluate(product, DietaryProfile(diets=["vegan"]))
        >>> assert verdict.status.value == "NO"
    """

    def __init__(self, rules: Sequence[DietRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def evaluate(self, product: NormalizedProduct, profile: DietaryProfile) -> AnalysisVerdict:
        """Compute the verdict for a product.

        Args:
            product: Normalized product
            profile: Dietary profile (read-only)

        Returns:
            AnalysisVerdict
        """
        fired: DietRule | None = None
        for rule in self.rules:
            if not profile.follows(rule.diet):
                continue
            if not rule.matches(product.ingredient_text):
                continue
            if fired is None or rule.status.severity > fired.status.severity:
                fired = rule

        if fired is None:
            return AnalysisVerdict.safe()

        logger.debug(
            "Dietary rule fired",
            diet=fired.diet,
            status=fired.status.value,
            product_name=product.product_name,
        )
        return fired.verdict()
