"""Dietary restriction domain models and matcher tables."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class DietaryRestriction(Enum):
    """Dietary restrictions and preferences a user can select."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    HALAL = "halal"
    KOSHER = "kosher"
    GLUTEN_FREE = "gluten_free"
    DAIRY_FREE = "dairy_free"
    NUT_FREE = "nut_free"
    SOY_FREE = "soy_free"
    EGG_FREE = "egg_free"
    SHELLFISH_FREE = "shellfish_free"
    LOW_SODIUM = "low_sodium"
    LOW_SUGAR = "low_sugar"

    @property
    def display_name(self) -> str:
        """Human readable restriction name."""
        return self.value.replace("_", "-").title()

    @property
    def category(self) -> str:
        """Grouping shown in settings screens."""
        if self in _DIET_TYPES:
            return "Diet Type"
        if self in _HEALTH_GOALS:
            return "Health Goals"
        return "Allergies & Intolerances"


_DIET_TYPES = frozenset(
    {
        DietaryRestriction.VEGAN,
        DietaryRestriction.VEGETARIAN,
        DietaryRestriction.HALAL,
        DietaryRestriction.KOSHER,
    }
)
_HEALTH_GOALS = frozenset({DietaryRestriction.LOW_SODIUM, DietaryRestriction.LOW_SUGAR})


class ComplianceOutcome(Enum):
    """Result of evaluating one restriction."""

    MATCH = "match"
    VIOLATION = "violation"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class NutrientLimit:
    """Nutrient-based evidence for health-goal restrictions."""

    attribute: str
    compliant_at_most: float
    violation_above: float


@dataclass(frozen=True)
class RestrictionMatcher:
    """Tags confirming compliance and terms indicating a violation.

    ``dish_terms`` are extra hints matched only against restaurant dish names
    and descriptions, where no ingredient list is available.
    """

    confirms: frozenset[str]
    violates: frozenset[str]
    nutrient_limit: NutrientLimit | None = None
    dish_terms: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ComplianceResult:
    """Per-restriction outcomes of a compliance check."""

    outcomes: Mapping[DietaryRestriction, ComplianceOutcome] = field(
        default_factory=dict
    )

    @property
    def matches(self) -> frozenset[DietaryRestriction]:
        """Restrictions confirmed as compliant."""
        return self._with(ComplianceOutcome.MATCH)

    @property
    def violations(self) -> frozenset[DietaryRestriction]:
        """Restrictions the product violates."""
        return self._with(ComplianceOutcome.VIOLATION)

    @property
    def inconclusive(self) -> frozenset[DietaryRestriction]:
        """Restrictions with no evidence either way."""
        return self._with(ComplianceOutcome.INCONCLUSIVE)

    def _with(self, outcome: ComplianceOutcome) -> frozenset[DietaryRestriction]:
        return frozenset(r for r, value in self.outcomes.items() if value is outcome)


_MEAT = (
    "meat",
    "meats",
    "chicken",
    "beef",
    "pork",
    "bacon",
    "turkey",
    "sausage",
    "lamb",
    "duck",
    "veal",
    "fish",
    "salmon",
    "tuna",
    "anchovy",
    "shrimp",
    "crab",
    "lobster",
    "gelatin",
    "gelatine",
)
_DAIRY = (
    "milk",
    "dairy",
    "dairies",
    "lactose",
    "butter",
    "cheese",
    "cream",
    "whey",
    "casein",
    "yogurt",
)
_EGG = ("egg", "eggs")
_SHELLFISH = (
    "shellfish",
    "crustaceans",
    "molluscs",
    "shrimp",
    "prawn",
    "crab",
    "lobster",
)

# Dish names hinting at an ingredient.
_LIKELY_GLUTEN = (
    "bread",
    "bun",
    "wrap",
    "tortilla",
    "pasta",
    "noodle",
    "breaded",
    "crispy",
    "fried",
    "sandwich",
    "burger",
    "pizza",
    "pancake",
    "waffle",
    "muffin",
    "cookie",
    "cake",
    "pastry",
    "croissant",
    "bagel",
    "roll",
)
_LIKELY_MEAT = (
    "ham",
    "steak",
    "cod",
    "nugget",
    "wing",
    "rib",
    "brisket",
    "meatball",
    "pepperoni",
    "chorizo",
    "prawn",
)
_LIKELY_DAIRY = (
    "latte",
    "cappuccino",
    "mocha",
    "frappuccino",
    "ice cream",
    "milkshake",
)

RESTRICTION_MATCHERS: dict[DietaryRestriction, RestrictionMatcher] = {
    DietaryRestriction.VEGAN: RestrictionMatcher(
        confirms=frozenset({"vegan"}),
        violates=frozenset({"non-vegan", "honey", *_MEAT, *_DAIRY, *_EGG}),
        dish_terms=frozenset({*_LIKELY_MEAT, *_LIKELY_DAIRY}),
    ),
    DietaryRestriction.VEGETARIAN: RestrictionMatcher(
        confirms=frozenset({"vegetarian", "vegan"}),
        violates=frozenset({"non-vegetarian", *_MEAT}),
        dish_terms=frozenset(_LIKELY_MEAT),
    ),
    DietaryRestriction.HALAL: RestrictionMatcher(
        confirms=frozenset({"halal"}),
        violates=frozenset({"pork", "bacon", "lard", "gelatin", "alcohol", "wine"}),
    ),
    DietaryRestriction.KOSHER: RestrictionMatcher(
        confirms=frozenset({"kosher"}),
        violates=frozenset({"pork", "bacon", "lard", *_SHELLFISH}),
    ),
    DietaryRestriction.GLUTEN_FREE: RestrictionMatcher(
        confirms=frozenset({"gluten-free", "no-gluten"}),
        violates=frozenset({"gluten", "wheat", "barley", "rye", "spelt"}),
        dish_terms=frozenset(_LIKELY_GLUTEN),
    ),
    DietaryRestriction.DAIRY_FREE: RestrictionMatcher(
        confirms=frozenset({"dairy-free", "no-lactose", "lactose-free", "no-milk"}),
        violates=frozenset(_DAIRY),
        dish_terms=frozenset(_LIKELY_DAIRY),
    ),
    DietaryRestriction.NUT_FREE: RestrictionMatcher(
        confirms=frozenset({"nut-free", "no-nuts"}),
        violates=frozenset(
            {
                "nuts",
                "peanut",
                "peanuts",
                "almond",
                "hazelnut",
                "cashew",
                "walnut",
                "pecan",
                "pistachio",
            }
        ),
    ),
    DietaryRestriction.SOY_FREE: RestrictionMatcher(
        confirms=frozenset({"soy-free", "no-soy"}),
        violates=frozenset({"soy", "soya", "soybeans", "tofu", "edamame"}),
    ),
    DietaryRestriction.EGG_FREE: RestrictionMatcher(
        confirms=frozenset({"egg-free", "no-eggs"}),
        violates=frozenset(_EGG),
    ),
    DietaryRestriction.SHELLFISH_FREE: RestrictionMatcher(
        confirms=frozenset({"shellfish-free"}),
        violates=frozenset(_SHELLFISH),
    ),
    DietaryRestriction.LOW_SODIUM: RestrictionMatcher(
        confirms=frozenset({"low-sodium", "low-salt", "no-added-salt"}),
        violates=frozenset(),
        nutrient_limit=NutrientLimit(
            attribute="sodium_g", compliant_at_most=0.12, violation_above=0.6
        ),
    ),
    DietaryRestriction.LOW_SUGAR: RestrictionMatcher(
        confirms=frozenset({"low-sugar", "no-added-sugar", "sugar-free"}),
        violates=frozenset(),
        nutrient_limit=NutrientLimit(
            attribute="sugars_g", compliant_at_most=5, violation_above=22.5
        ),
    ),
}
