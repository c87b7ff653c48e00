"""
Dietary rule registry.

Each rule belongs to one diet and fires on a case-insensitive
substring match against the product ingredient text.
"""

from __future__ import annotations

from dataclasses import dataclass

from foodscan.domain.dietary.models import AnalysisVerdict, VerdictStatus


@dataclass(frozen=True)
class DietRule:
    """Substring rule for one declared diet."""

    diet: str
    triggers: tuple[str, ...]
    status: VerdictStatus
    reason: str
    harmful_ingredients: str | None = None

    def matches(self, ingredient_text: str) -> bool:
        """Check whether any trigger occurs in the ingredient text."""
        text = ingredient_text.lower()
        return any(trigger.lower() in text for trigger in self.triggers)

    def verdict(self) -> AnalysisVerdict:
        """Verdict produced when the rule fires."""
        return AnalysisVerdict.for_status(
            self.status,
            self.reason,
            harmful_ingredients=self.harmful_ingredients,
        )


VEGAN_RULE = DietRule(
    diet="vegan",
    triggers=("milk", "egg", "honey"),
    status=VerdictStatus.NO,
    reason="Contains animal products (milk/egg/honey).",
)

DEFAULT_RULES: tuple[DietRule, ...] = (VEGAN_RULE,)
