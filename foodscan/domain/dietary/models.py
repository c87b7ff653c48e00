"""
Dietary domain models.

Profile consumed as read-only input and the verdict computed for a
product under that profile.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class VerdictStatus(str, Enum):
    """Dietary-safety classification."""

    YES = "YES"  # Safe
    MODERATE = "MODERATE"
    NO = "NO"  # Unsafe

    @property
    def severity(self) -> int:
        """Restrictiveness rank (higher is more restrictive)."""
        return _SEVERITY[self]


_SEVERITY = {
    VerdictStatus.YES: 0,
    VerdictStatus.MODERATE: 1,
    VerdictStatus.NO: 2,
}

# Health score implied by a status when a rule does not set one
STATUS_HEALTH_SCORES = {
    VerdictStatus.YES: 90,
    VerdictStatus.MODERATE: 50,
    VerdictStatus.NO: 20,
}

SAFE_REASON = "Safe to consume based on your profile."
NO_HARMFUL_INGREDIENTS = "None"
UNWANTED_INGREDIENTS = "Contains allergens/unwanted ingredients"


class DietaryProfile(BaseModel):
    """
    User dietary profile.

    Diet names are trimmed and lower-cased so "Vegan " and "vegan"
    select the same rules.

    Example:
        >>> profile = DietaryProfile(diets=["Vegan"])
        >>> assert profile.follows("vegan")
    """

    model_config = ConfigDict(frozen=True)

    diets: frozenset[str] = Field(default_factory=frozenset, description="Declared diets")

    @field_validator("diets", mode="before")
    @classmethod
    def normalize_diets(cls, v: object) -> frozenset[str]:
        """Accept any iterable of names; drop blanks."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, Iterable):
            raise ValueError("diets must be an iterable of strings")
        return frozenset(str(d).strip().lower() for d in v if str(d).strip())

    def follows(self, diet: str) -> bool:
        """Check whether the profile declares a diet."""
        return diet.strip().lower() in self.diets

    @classmethod
    def empty(cls) -> DietaryProfile:
        """Profile without any declared diet."""
        return cls(diets=frozenset())


class AnalysisVerdict(BaseModel):
    """
    Verdict for one product under one profile.

    Example:
        >>> verdict = AnalysisVerdict.safe()
        >>> assert verdict.status == VerdictStatus.YES
        >>> assert verdict.health_score == 90
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    status: VerdictStatus = Field(..., description="YES / NO / MODERATE")
    reason: str = Field(..., description="Human-readable explanation")
    health_score: int = Field(..., ge=0, le=100, description="Health score 0-100")
    harmful_ingredients: str = Field(
        NO_HARMFUL_INGREDIENTS, description="Harmful ingredient summary"
    )

    @classmethod
    def safe(cls) -> AnalysisVerdict:
        """Default verdict when no rule fires."""
        return cls.for_status(VerdictStatus.YES, SAFE_REASON)

    @classmethod
    def for_status(
        cls,
        status: VerdictStatus,
        reason: str,
        harmful_ingredients: str | None = None,
    ) -> AnalysisVerdict:
        """Build a verdict with the score and summary implied by status."""
        if harmful_ingredients is None:
            harmful_ingredients = (
                UNWANTED_INGREDIENTS if status == VerdictStatus.NO else NO_HARMFUL_INGREDIENTS
            )
        return cls(
            status=status,
            reason=reason,
            health_score=STATUS_HEALTH_SCORES[status],
            harmful_ingredients=harmful_ingredients,
        )
