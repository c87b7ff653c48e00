"""
Shared fixtures for foodscan tests.
"""

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from foodscan.domain.dietary.models import DietaryProfile
from foodscan.domain.product.models import NormalizedProduct
from foodscan.domain.product.openfoodfacts_mapper import OpenFoodFactsMapper
from foodscan.domain.product.openfoodfacts_models import OFFSearchResult
from foodscan.domain.shared.errors import BarcodeNotFoundError
from foodscan.infrastructure.openfoodfacts.api_client import OpenFoodFactsClient
from foodscan.infrastructure.scan.in_memory_source import InMemoryCodeSource


# ═══════════════════════════════════════════════════════════
# PROFILE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def vegan_profile() -> DietaryProfile:
    return DietaryProfile(diets=["vegan"])


@pytest.fixture
def omnivore_profile() -> DietaryProfile:
    return DietaryProfile.empty()


# ═══════════════════════════════════════════════════════════
# OPENFOODFACTS RESPONSE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def latte_response() -> dict[str, Any]:
    """Found product whose ingredients contain milk."""
    return {
        "status": 1,
        "status_verbose": "product found",
        "product": {
            "code": "5000112637922",
            "product_name": "Caffe Latte",
            "ingredients_text": "Water, Milk, Sugar",
            "image_url": "https://images.openfoodfacts.org/images/products/latte/front_en.jpg",
            "image_nutrition_url": "https://images.openfoodfacts.org/images/products/latte/nutrition_en.jpg",
        },
    }


@pytest.fixture
def pringles_response() -> dict[str, Any]:
    """Remote record for the fixture barcode."""
    return {
        "status": 1,
        "product": {
            "code": "8886467124723",
            "product_name": "Pringles Sour Cream & Onion 107g",
            "ingredients_text": "Dried potatoes, vegetable oils, rice flour",
            "image_front_url": "https://images.openfoodfacts.org/images/products/888/646/712/4723/front_en.jpg",
        },
    }


@pytest.fixture
def not_found_response() -> dict[str, Any]:
    return {"status": 0, "status_verbose": "product not found", "code": "0000000000000"}


@pytest.fixture
def make_http_response() -> Callable[..., MagicMock]:
    """Build an aiohttp-like response mock."""

    def _make(status: int = 200, body: Any = None, json_error: Exception | None = None) -> MagicMock:
        response = MagicMock()
        response.status = status
        if json_error is not None:
            response.json = AsyncMock(side_effect=json_error)
        else:
            response.json = AsyncMock(return_value=body)
        return response

    return _make


# ═══════════════════════════════════════════════════════════
# CLIENT / SOURCE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def mock_off_client() -> AsyncMock:
    """OpenFoodFacts client mock; get_product raises not-found by default."""
    client = AsyncMock(spec=OpenFoodFactsClient)
    client.get_product.side_effect = BarcodeNotFoundError("not found")
    return client


@pytest.fixture
def off_client_returning(mock_off_client: AsyncMock) -> Callable[[dict[str, Any]], AsyncMock]:
    """Configure the client mock to return a parsed raw response."""

    def _configure(body: dict[str, Any]) -> AsyncMock:
        result = OpenFoodFactsMapper.parse_product_response(body)
        if result.is_found():
            mock_off_client.get_product.side_effect = None
            mock_off_client.get_product.return_value = result
        else:
            mock_off_client.get_product.side_effect = BarcodeNotFoundError("not found")
        return mock_off_client

    return _configure


@pytest.fixture
def code_source() -> InMemoryCodeSource:
    return InMemoryCodeSource()


@pytest.fixture
def make_product() -> Callable[..., NormalizedProduct]:
    def _make(ingredient_text: str = "Water", product_name: str = "Test Product") -> NormalizedProduct:
        return NormalizedProduct(
            product_name=product_name,
            ingredient_text=ingredient_text,
            image_uri="https://example.com/front.jpg",
            nutrition_image_uri="https://example.com/nutrition.jpg",
        )

    return _make


@pytest.fixture
def found_result(latte_response: dict[str, Any]) -> OFFSearchResult:
    return OpenFoodFactsMapper.parse_product_response(latte_response)
