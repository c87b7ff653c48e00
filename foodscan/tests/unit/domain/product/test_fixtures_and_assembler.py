"""
Unit tests for fixture overrides, product models and the assembler.
"""

import pydantic
import pytest

from foodscan.domain.dietary.models import AnalysisVerdict, VerdictStatus
from foodscan.domain.product.assembler import ResultAssembler
from foodscan.domain.product.fixtures import (
    PRINGLES_BARCODE,
    PRINGLES_IMAGE_URI,
    PRINGLES_OVERRIDE,
    find_override,
)
from foodscan.domain.product.models import NormalizedProduct, ResolvedProduct
from foodscan.domain.product.openfoodfacts_models import OFFProduct, OFFSearchResult


class TestFixtureOverride:
    def test_find_registered_barcode(self) -> None:
        assert find_override(PRINGLES_BARCODE) is PRINGLES_OVERRIDE
        assert find_override(f" {PRINGLES_BARCODE} ") is PRINGLES_OVERRIDE

    def test_unknown_barcode(self) -> None:
        assert find_override("3017620422003") is None

    def test_custom_registry(self) -> None:
        assert find_override(PRINGLES_BARCODE, overrides={}) is None

    def test_placeholder_image_without_remote(self) -> None:
        product = PRINGLES_OVERRIDE.product(None)

        assert product.product_name == "Pringles Sour Cream and Onion"
        assert product.image_uri == PRINGLES_IMAGE_URI
        assert product.nutrition_image_uri == PRINGLES_IMAGE_URI

    def test_real_image_from_remote(self) -> None:
        remote = OFFSearchResult(
            status=1,
            product=OFFProduct(
                code=PRINGLES_BARCODE,
                image_front_url="https://images.openfoodfacts.org/front.jpg",
            ),
        )

        product = PRINGLES_OVERRIDE.product(remote)

        assert product.image_uri == "https://images.openfoodfacts.org/front.jpg"
        assert product.nutrition_image_uri == "https://images.openfoodfacts.org/front.jpg"

    def test_remote_without_images_keeps_placeholder(self) -> None:
        remote = OFFSearchResult(status=1, product=OFFProduct(code=PRINGLES_BARCODE))
        assert PRINGLES_OVERRIDE.product(remote).image_uri == PRINGLES_IMAGE_URI

    def test_override_verdict(self) -> None:
        verdict = PRINGLES_OVERRIDE.verdict

        assert verdict.status == VerdictStatus.NO
        assert verdict.health_score == 15
        assert verdict.reason == "Contains multiple unhealthy additives."
        assert verdict.harmful_ingredients == "High Fructose Corn Syrup, Red 40, Yellow 5, Palm Oil"


class TestNormalizedProduct:
    def test_blank_fields_replaced(self) -> None:
        product = NormalizedProduct(
            product_name=None, ingredient_text="  ", image_uri="", nutrition_image_uri=None
        )

        assert product.product_name == "Unknown Product"
        assert product.ingredient_text == "Ingredients not found"
        assert product.image_uri.startswith("https://")
        assert product.nutrition_image_uri == product.image_uri

    def test_populate_by_camel_alias(self) -> None:
        product = NormalizedProduct.model_validate(
            {"productName": "Tea", "ingredientText": "Tea leaves"}
        )
        assert product.product_name == "Tea"


class TestResultAssembler:
    def test_merge(self) -> None:
        product = NormalizedProduct(
            product_name="Caffe Latte",
            ingredient_text="Water, Milk, Sugar",
            image_uri="https://a/img.jpg",
            nutrition_image_uri="https://a/nutrition.jpg",
        )
        verdict = AnalysisVerdict.for_status(VerdictStatus.NO, "Contains animal products (milk/egg/honey).")

        resolved = ResultAssembler.assemble(product, verdict)

        assert isinstance(resolved, ResolvedProduct)
        assert resolved.product_name == "Caffe Latte"
        assert resolved.nutrition_image_uri == "https://a/nutrition.jpg"
        assert resolved.status == VerdictStatus.NO
        assert resolved.health_score == 20

    def test_caller_dict_shape(self) -> None:
        resolved = ResultAssembler.assemble(
            NormalizedProduct(product_name="Oat Drink"), AnalysisVerdict.safe()
        )

        assert set(resolved.to_caller_dict()) == {
            "productName",
            "ingredientText",
            "imageUri",
            "nutritionImageUri",
            "status",
            "reason",
            "healthScore",
            "harmfulIngredients",
        }

    def test_resolved_product_immutable(self) -> None:
        resolved = ResultAssembler.assemble(NormalizedProduct(), AnalysisVerdict.safe())
        with pytest.raises(pydantic.ValidationError):
            resolved.status = VerdictStatus.NO  # type: ignore[misc]
