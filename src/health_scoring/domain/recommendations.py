"""Domain models for analysis inputs and recommendations."""

from dataclasses import dataclass, field
from enum import Enum

from health_scoring.domain.conditions import AnalysisResult
from health_scoring.domain.nutrients import NutrientProfile, NutriScoreGrade
from health_scoring.domain.restrictions import ComplianceResult
from health_scoring.domain.scoring import HealthScore


class Recommendation(Enum):
    """Three-tier verdict for a product or dish."""

    BEST = "best"
    CAUTION = "caution"
    AVOID = "avoid"


class MealType(Enum):
    """When a meal is eaten."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def display_name(self) -> str:
        """Return a human-readable name."""
        return self.value.title()


class MealRating(Enum):
    """Overall rating of a built meal."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class ProductInput:
    """A packaged product with structured nutrition data."""

    nutrients: NutrientProfile
    name: str | None = None
    official_grade: NutriScoreGrade | None = None
    category_tags: frozenset[str] = field(default_factory=frozenset)
    allergens: frozenset[str] | None = None
    ingredients_text: str | None = None


@dataclass(frozen=True)
class MenuItem:
    """A restaurant dish, with or without nutrition data."""

    name: str
    description: str | None = None
    nutrients: NutrientProfile | None = None
    category_tags: frozenset[str] = field(default_factory=frozenset)
    allergens: frozenset[str] | None = None
    ingredients_text: str | None = None


@dataclass(frozen=True)
class DishAnalysis:
    """Analysis of a single product, dish, or meal."""

    name: str
    recommendation: Recommendation
    reason: str
    score: int
    health_score: HealthScore | None
    health: AnalysisResult
    compliance: ComplianceResult
    nutrients: NutrientProfile | None
    tip: str | None = None


@dataclass(frozen=True)
class MenuBuckets:
    """Dish analyses grouped by recommendation, input order preserved."""

    best: list[DishAnalysis]
    caution: list[DishAnalysis]
    avoid: list[DishAnalysis]


@dataclass(frozen=True)
class MenuAnalysis:
    """Analysis of a full menu."""

    dishes: list[DishAnalysis]
    buckets: MenuBuckets
    summary: str


@dataclass(frozen=True)
class MealAnalysis:
    """Analysis of a multi-item meal with its overall rating."""

    analysis: DishAnalysis
    meal_type: MealType | None
    rating: MealRating
    message: str
