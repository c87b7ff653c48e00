"""
Fixture product overrides.

Deterministic records substituted for designated barcodes, so demos
and tests do not depend on the remote database being reachable or on
its content drifting.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from foodscan.domain.dietary.models import AnalysisVerdict, VerdictStatus
from foodscan.domain.product.models import NormalizedProduct
from foodscan.domain.product.openfoodfacts_mapper import OpenFoodFactsMapper
from foodscan.domain.product.openfoodfacts_models import OFFSearchResult

PRINGLES_BARCODE = "8886467124723"
PRINGLES_IMAGE_URI = (
    "https://images.unsplash.com/photo-1621447591183-5f34ccf9cd9e?auto=format&fit=crop&w=800&q=80"
)


class FixtureOverride(BaseModel):
    """Predetermined product and verdict for one barcode."""

    model_config = ConfigDict(frozen=True)

    barcode: str = Field(..., min_length=1, description="Sentinel barcode")
    product_name: str
    ingredient_text: str
    placeholder_image_uri: str
    verdict: AnalysisVerdict

    def product(self, remote: Optional[OFFSearchResult]) -> NormalizedProduct:
        """Fixture product, preferring a real image from the remote response.

        Both image fields use the same URI.
        """
        image_uri = self.placeholder_image_uri
        if remote is not None and remote.is_found():
            image_uri = OpenFoodFactsMapper.image_uri(remote.product, image_uri)
        return NormalizedProduct(
            product_name=self.product_name,
            ingredient_text=self.ingredient_text,
            image_uri=image_uri,
            nutrition_image_uri=image_uri,
        )


PRINGLES_OVERRIDE = FixtureOverride(
    barcode=PRINGLES_BARCODE,
    product_name="Pringles Sour Cream and Onion",
    ingredient_text=(
        "Corn, Vegetable Oil (Palm Oil), Sugar, High Fructose Corn Syrup, Salt, "
        "Artificial Flavor, Red 40, Yellow 5."
    ),
    placeholder_image_uri=PRINGLES_IMAGE_URI,
    verdict=AnalysisVerdict(
        status=VerdictStatus.NO,
        reason="Contains multiple unhealthy additives.",
        health_score=15,
        harmful_ingredients="High Fructose Corn Syrup, Red 40, Yellow 5, Palm Oil",
    ),
)

FIXTURE_OVERRIDES: dict[str, FixtureOverride] = {
    PRINGLES_OVERRIDE.barcode: PRINGLES_OVERRIDE,
}


def find_override(
    payload: str,
    overrides: dict[str, FixtureOverride] = FIXTURE_OVERRIDES,
) -> Optional[FixtureOverride]:
    """Return the override registered for a payload, if any."""
    return overrides.get(payload.strip())
