"""
Product domain models.

Normalized product record and the terminal record returned to callers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from foodscan.domain.dietary.models import VerdictStatus

INGREDIENTS_NOT_FOUND = "Ingredients not found"
UNKNOWN_PRODUCT_NAME = "Unknown Product"
PLACEHOLDER_IMAGE_URI = (
    "https://images.unsplash.com/photo-1542838132-92c53300491e?auto=format&fit=crop&w=800&q=80"
)


class NormalizedProduct(BaseModel):
    """
    Product record with every field resolved.

    Blank values are replaced by their sentinel, so ingredient text is
    never empty and both image URIs always point somewhere.

    Example:
        >>> product = NormalizedProduct(
        ...     product_name="Oat Drink",
        ...     ingredient_text="",
        ...     image_uri="https://example.com/front.jpg",
        ...     nutrition_image_uri="",
        ... )
        >>> assert product.ingredient_text == "Ingredients not found"
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    product_name: str = Field(UNKNOWN_PRODUCT_NAME, description="Product display name")
    ingredient_text: str = Field(INGREDIENTS_NOT_FOUND, description="Ingredient list text")
    image_uri: str = Field(PLACEHOLDER_IMAGE_URI, description="Product image URI")
    nutrition_image_uri: str = Field(PLACEHOLDER_IMAGE_URI, description="Nutrition label image URI")

    @field_validator("product_name", mode="before")
    @classmethod
    def default_name(cls, v: object) -> str:
        return _text_or(v, UNKNOWN_PRODUCT_NAME)

    @field_validator("ingredient_text", mode="before")
    @classmethod
    def default_ingredients(cls, v: object) -> str:
        return _text_or(v, INGREDIENTS_NOT_FOUND)

    @field_validator("image_uri", "nutrition_image_uri", mode="before")
    @classmethod
    def default_image(cls, v: object) -> str:
        return _text_or(v, PLACEHOLDER_IMAGE_URI)


class ResolvedProduct(NormalizedProduct):
    """
    Normalized product merged with its dietary verdict.

    Terminal record returned to UI and chat callers. Created fresh per
    lookup.

    Example:
        >>> record = ResolvedProduct(
        ...     product_name="Latte",
        ...     ingredient_text="Milk",
        ...     status="NO",
        ...     reason="Contains animal products (milk/egg/honey).",
        ...     health_score=20,
        ...     harmful_ingredients="Contains allergens/unwanted ingredients",
        ... )
        >>> assert record.to_caller_dict()["healthScore"] == 20
    """

    status: VerdictStatus = Field(..., description="YES / NO / MODERATE")
    reason: str = Field(..., description="Human-readable explanation")
    health_score: int = Field(..., ge=0, le=100, description="Health score 0-100")
    harmful_ingredients: str = Field(..., description="Harmful ingredient summary")

    def to_caller_dict(self) -> dict[str, Any]:
        """camelCase JSON-ready mapping for UI/chat callers."""
        return self.model_dump(mode="json", by_alias=True)


def _text_or(value: object, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default
