"""
OpenFoodFacts domain models.

Models for OpenFoodFacts API responses. Source record quality varies,
so every product field is optional and loosely typed values are
dropped instead of failing the whole record.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OFFIngredient(BaseModel):
    """One entry of the structured ingredient list.

    Example:
        >>> ingredient = OFFIngredient(id="en:milk", text="Milk")
        >>> assert ingredient.text == "Milk"
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = Field(None, description="Taxonomy id (e.g., 'en:milk')")
    text: Optional[str] = Field(None, description="Ingredient text as printed")

    @field_validator("id", "text", mode="before")
    @classmethod
    def text_only(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None


class OFFProduct(BaseModel):
    """OpenFoodFacts product object.

    Example:
        >>> product = OFFProduct(
        ...     code="8886467124723",
        ...     product_name="Pringles Sour Cream & Onion",
        ...     image_front_url="https://images.openfoodfacts.org/front.jpg",
        ... )
        >>> assert product.image_url is None
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str = Field("", description="Product barcode")
    product_name: Optional[str] = Field(None, description="Product name")
    ingredients_text_en: Optional[str] = Field(None, description="English ingredients text")
    ingredients_text: Optional[str] = Field(None, description="Generic ingredients text")
    ingredients: list[OFFIngredient] = Field(
        default_factory=list, description="Structured ingredient list"
    )
    image_url: Optional[str] = Field(None, description="Primary product image URL")
    image_front_url: Optional[str] = Field(None, description="Front image URL")
    image_nutrition_url: Optional[str] = Field(None, description="Nutrition label image URL")
    image_nutrition_small_url: Optional[str] = Field(
        None, description="Small nutrition label image URL"
    )

    @field_validator("code", mode="before")
    @classmethod
    def code_as_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator(
        "product_name",
        "ingredients_text_en",
        "ingredients_text",
        "image_url",
        "image_front_url",
        "image_nutrition_url",
        "image_nutrition_small_url",
        mode="before",
    )
    @classmethod
    def text_only(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @field_validator("ingredients", mode="before")
    @classmethod
    def ingredient_list(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, dict)]


class OFFSearchResult(BaseModel):
    """OpenFoodFacts product response.

    Example:
        >>> result = OFFSearchResult(
        ...     status=1,
        ...     product=OFFProduct(code="3017620422003", product_name="Nutella"),
        ... )
        >>> assert result.is_found()
    """

    model_config = ConfigDict(frozen=True)

    status: int = Field(0, description="API status (1=found, 0=not)")
    status_verbose: Optional[str] = Field(None, description="API status message")
    product: Optional[OFFProduct] = Field(None, description="Product data (if found)")

    def is_found(self) -> bool:
        """Check if product was found.

        Returns:
            True if product exists in database
        """
        return self.status == 1 and self.product is not None
