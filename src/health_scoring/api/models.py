"""Request models for the scoring API."""

from pydantic import BaseModel, Field

from health_scoring.adapters.open_food_facts import OpenFoodFactsProduct
from health_scoring.domain.conditions import HealthCondition
from health_scoring.domain.nutrients import NutrientProfile, NutriScoreGrade
from health_scoring.domain.profiles import UserProfile
from health_scoring.domain.recommendations import MealType, MenuItem, ProductInput
from health_scoring.domain.restrictions import DietaryRestriction


class NutrientsPayload(BaseModel):
    """Per-100 g nutrient values; missing values count as zero."""

    energy_kcal: float | None = None
    proteins_g: float | None = None
    carbohydrates_g: float | None = None
    sugars_g: float | None = None
    fat_g: float | None = None
    saturated_fat_g: float | None = None
    fiber_g: float | None = None
    sodium_g: float | None = None
    cholesterol_mg: float | None = None
    potassium_mg: float | None = None
    phosphorus_mg: float | None = None

    def to_profile(self) -> NutrientProfile:
        """Convert to a domain profile."""
        return NutrientProfile.from_values(**self.model_dump())


class ProfilePayload(BaseModel):
    """Snapshot of the user's selected conditions and restrictions."""

    conditions: list[HealthCondition] = Field(default_factory=list)
    restrictions: list[DietaryRestriction] = Field(default_factory=list)

    def to_profile(self) -> UserProfile:
        """Convert to an immutable user profile."""
        return UserProfile.of(self.conditions, self.restrictions)


class ProductRequest(BaseModel):
    """A packaged product to analyze."""

    name: str | None = None
    nutrients: NutrientsPayload
    nutriscore_grade: str | None = None
    categories_tags: list[str] = Field(default_factory=list)
    allergens_tags: list[str] | None = None
    ingredients_text: str | None = None
    profile: ProfilePayload = Field(default_factory=ProfilePayload)

    def to_product_input(self) -> ProductInput:
        """Convert to an engine input."""
        return ProductInput(
            name=self.name,
            nutrients=self.nutrients.to_profile(),
            official_grade=NutriScoreGrade.parse(self.nutriscore_grade),
            category_tags=frozenset(self.categories_tags),
            allergens=(
                frozenset(self.allergens_tags)
                if self.allergens_tags is not None
                else None
            ),
            ingredients_text=self.ingredients_text,
        )


class OpenFoodFactsRequest(BaseModel):
    """A raw Open Food Facts product to analyze."""

    product: OpenFoodFactsProduct
    profile: ProfilePayload = Field(default_factory=ProfilePayload)


class MenuItemPayload(BaseModel):
    """A restaurant dish, optionally with nutrition data."""

    name: str = Field(min_length=1)
    description: str | None = None
    nutrients: NutrientsPayload | None = None
    categories_tags: list[str] = Field(default_factory=list)
    allergens_tags: list[str] | None = None
    ingredients_text: str | None = None

    def to_menu_item(self) -> MenuItem:
        """Convert to a domain menu item."""
        return MenuItem(
            name=self.name,
            description=self.description,
            nutrients=self.nutrients.to_profile() if self.nutrients else None,
            category_tags=frozenset(self.categories_tags),
            allergens=(
                frozenset(self.allergens_tags)
                if self.allergens_tags is not None
                else None
            ),
            ingredients_text=self.ingredients_text,
        )


class MenuRequest(BaseModel):
    """A menu to analyze."""

    items: list[MenuItemPayload]
    profile: ProfilePayload = Field(default_factory=ProfilePayload)


class MealPortionPayload(BaseModel):
    """One component of a meal."""

    grams: float = Field(gt=0)
    nutrients: NutrientsPayload


class MealRequest(BaseModel):
    """A multi-item meal to analyze."""

    name: str = "Meal"
    meal_type: MealType | None = None
    portions: list[MealPortionPayload] = Field(min_length=1)
    ingredients_text: str | None = None
    profile: ProfilePayload = Field(default_factory=ProfilePayload)
