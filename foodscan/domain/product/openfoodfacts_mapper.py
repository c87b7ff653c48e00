"""
OpenFoodFacts data mapper.

Transforms OpenFoodFacts API responses to domain models. Each
normalized field is read through an ordered fallback list; the first
non-blank value wins.
"""

from typing import Any, Iterable, Optional

import pydantic

from foodscan.domain.product.models import (
    INGREDIENTS_NOT_FOUND,
    PLACEHOLDER_IMAGE_URI,
    UNKNOWN_PRODUCT_NAME,
    NormalizedProduct,
)
from foodscan.domain.product.openfoodfacts_models import (
    OFFProduct,
    OFFSearchResult,
)
from foodscan.domain.shared.errors import MalformedResponseError

INGREDIENT_TEXT_FIELDS = ("ingredients_text_en", "ingredients_text")
IMAGE_FIELDS = ("image_url", "image_front_url")
NUTRITION_IMAGE_FIELDS = ("image_nutrition_url", "image_nutrition_small_url")
INGREDIENT_SEPARATOR = ", "


class OpenFoodFactsMapper:
    """Maps OpenFoodFacts API data to domain models."""

    @staticmethod
    def parse_product_response(response_data: Any) -> OFFSearchResult:
        """Parse OpenFoodFacts product API response.

        Args:
            response_data: Decoded JSON body

        Returns:
            Parsed OFFSearchResult

        Raises:
            MalformedResponseError: If the body does not have the
                expected shape

        Example:
            >>> response = {
            ...     "status": 1,
            ...     "product": {
            ...         "code": "3017620422003",
            ...         "product_name": "Nutella",
            ...         "ingredients_text": "Sugar, palm oil, hazelnuts",
            ...     },
            ... }
            >>> result = OpenFoodFactsMapper.parse_product_response(response)
            >>> assert result.product.product_name == "Nutella"
        """
        if not isinstance(response_data, dict):
            raise MalformedResponseError(
                f"Expected JSON object, got {type(response_data).__name__}"
            )

        status = response_data.get("status", 0)
        product_data = response_data.get("product")

        try:
            if status != 1 or not isinstance(product_data, dict):
                return OFFSearchResult(
                    status=status,
                    status_verbose=response_data.get("status_verbose"),
                    product=None,
                )
            return OFFSearchResult(
                status=status,
                status_verbose=response_data.get("status_verbose"),
                product=OFFProduct.model_validate(product_data),
            )
        except pydantic.ValidationError as e:
            raise MalformedResponseError(f"Unexpected product response shape: {e}") from e

    @staticmethod
    def ingredient_text(product: OFFProduct) -> str:
        """Resolve ingredient text.

        Order: localized text, generic text, structured list joined
        by ", ", then the "Ingredients not found" sentinel.
        """
        text = _first_present(product, INGREDIENT_TEXT_FIELDS)
        if text:
            return text

        joined = INGREDIENT_SEPARATOR.join(
            ingredient.text.strip()
            for ingredient in product.ingredients
            if ingredient.text and ingredient.text.strip()
        )
        return joined or INGREDIENTS_NOT_FOUND

    @staticmethod
    def image_uri(product: Optional[OFFProduct], placeholder: str = PLACEHOLDER_IMAGE_URI) -> str:
        """Resolve primary image: image_url, front image, placeholder."""
        if product is None:
            return placeholder
        return _first_present(product, IMAGE_FIELDS) or placeholder

    @staticmethod
    def nutrition_image_uri(product: OFFProduct, image_uri: str) -> str:
        """Resolve nutrition image, falling back to the primary image."""
        return _first_present(product, NUTRITION_IMAGE_FIELDS) or image_uri

    @staticmethod
    def normalize(product: OFFProduct) -> NormalizedProduct:
        """Convert OpenFoodFacts product to NormalizedProduct.

        Example:
            >>> product = OFFProduct(code="1", ingredients=[{"text": "Water"}, {"text": "Milk"}])
            >>> normalized = OpenFoodFactsMapper.normalize(product)
            >>> assert normalized.ingredient_text == "Water, Milk"
            >>> assert normalized.product_name == "Unknown Product"
        """
        image_uri = OpenFoodFactsMapper.image_uri(product)
        return NormalizedProduct(
            product_name=_clean(product.product_name) or UNKNOWN_PRODUCT_NAME,
            ingredient_text=OpenFoodFactsMapper.ingredient_text(product),
            image_uri=image_uri,
            nutrition_image_uri=OpenFoodFactsMapper.nutrition_image_uri(product, image_uri),
        )


def _first_present(product: OFFProduct, fields: Iterable[str]) -> Optional[str]:
    for name in fields:
        value = _clean(getattr(product, name))
        if value:
            return value
    return None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None
