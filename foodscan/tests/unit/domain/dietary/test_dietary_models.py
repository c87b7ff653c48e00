"""
Unit tests for dietary models and the image analysis stub.
"""

import pydantic
import pytest

from foodscan.domain.dietary.image_analysis import analyze_image
from foodscan.domain.dietary.models import AnalysisVerdict, DietaryProfile, VerdictStatus


class TestDietaryProfile:
    def test_normalizes_names(self) -> None:
        profile = DietaryProfile(diets=["Vegan", " KETO ", ""])
        assert profile.diets == frozenset({"vegan", "keto"})

    def test_accepts_set_and_single_string(self) -> None:
        assert DietaryProfile(diets={"vegan"}).follows("vegan")
        assert DietaryProfile(diets="vegan").follows("VEGAN")

    def test_none_means_no_diets(self) -> None:
        assert DietaryProfile(diets=None).diets == frozenset()

    def test_rejects_non_iterable(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DietaryProfile(diets=42)


class TestAnalysisVerdict:
    def test_safe_defaults(self) -> None:
        verdict = AnalysisVerdict.safe()

        assert verdict.status == VerdictStatus.YES
        assert verdict.health_score == 90
        assert verdict.harmful_ingredients == "None"

    def test_health_score_bounds(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            AnalysisVerdict(status=VerdictStatus.NO, reason="x", health_score=101)

    def test_camel_case_dump(self) -> None:
        data = AnalysisVerdict.safe().model_dump(mode="json", by_alias=True)
        assert data["healthScore"] == 90
        assert data["status"] == "YES"

    def test_severity_order(self) -> None:
        assert VerdictStatus.NO.severity > VerdictStatus.MODERATE.severity > VerdictStatus.YES.severity


class TestAnalyzeImage:
    async def test_always_moderate(self) -> None:
        verdict = await analyze_image("file:///tmp/label.jpg")

        assert verdict.status == VerdictStatus.MODERATE
        assert verdict.reason == "This feature is coming soon."
        assert verdict.health_score == 50
