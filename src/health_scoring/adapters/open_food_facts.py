"""Mapping of Open Food Facts product payloads to analysis inputs."""

from pydantic import BaseModel, ConfigDict, Field

from health_scoring.domain.nutrients import NutrientProfile, NutriScoreGrade
from health_scoring.domain.recommendations import ProductInput


class OpenFoodFactsProduct(BaseModel):
    """Subset of an Open Food Facts product used for scoring."""

    model_config = ConfigDict(extra="ignore")

    code: str | None = None
    product_name: str | None = None
    nutriscore_grade: str | None = None
    nutriments: dict[str, object] = Field(default_factory=dict)
    categories_tags: list[str] = Field(default_factory=list)
    labels_tags: list[str] = Field(default_factory=list)
    allergens_tags: list[str] | None = None
    ingredients_text: str | None = None

    def to_product_input(self) -> ProductInput:
        """Normalize the payload into an engine input."""
        return ProductInput(
            name=self.product_name,
            nutrients=NutrientProfile.from_nutriments(self.nutriments),
            official_grade=NutriScoreGrade.parse(self.nutriscore_grade),
            category_tags=frozenset([*self.categories_tags, *self.labels_tags]),
            allergens=(
                frozenset(self.allergens_tags)
                if self.allergens_tags is not None
                else None
            ),
            ingredients_text=self.ingredients_text,
        )

