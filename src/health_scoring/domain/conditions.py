"""Health condition domain models and rule tables."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class HealthCondition(Enum):
    """Health conditions a user can select."""

    DIABETES = "diabetes"
    HYPERTENSION = "hypertension"
    HEART_DISEASE = "heart_disease"
    HIGH_CHOLESTEROL = "high_cholesterol"
    KIDNEY_DISEASE = "kidney_disease"
    OBESITY = "obesity"
    GOUT = "gout"

    @property
    def display_name(self) -> str:
        """Human readable condition name."""
        return _DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        """What the condition monitors."""
        return _DESCRIPTIONS[self]


_DISPLAY_NAMES = {
    HealthCondition.DIABETES: "Diabetes",
    HealthCondition.HYPERTENSION: "High Blood Pressure",
    HealthCondition.HEART_DISEASE: "Heart Disease",
    HealthCondition.HIGH_CHOLESTEROL: "High Cholesterol",
    HealthCondition.KIDNEY_DISEASE: "Kidney Disease",
    HealthCondition.OBESITY: "Obesity / Weight Management",
    HealthCondition.GOUT: "Gout",
}

_DESCRIPTIONS = {
    HealthCondition.DIABETES: "Monitors sugar, carbs, and glycemic impact",
    HealthCondition.HYPERTENSION: "Monitors sodium and salt content",
    HealthCondition.HEART_DISEASE: "Monitors fats, sodium, and cholesterol",
    HealthCondition.HIGH_CHOLESTEROL: "Monitors saturated fats and cholesterol",
    HealthCondition.KIDNEY_DISEASE: "Monitors sodium, potassium, and phosphorus",
    HealthCondition.OBESITY: "Monitors calories, fats, and sugars",
    HealthCondition.GOUT: "Monitors purines and certain proteins",
}


class Severity(IntEnum):
    """Ordinal risk level of a warning."""

    LOW = 1
    MODERATE = 2
    HIGH = 3

    @property
    def label(self) -> str:
        """Lowercase label used in payloads."""
        return self.name.lower()


@dataclass(frozen=True)
class HealthWarning:
    """A single condition-specific warning."""

    condition: HealthCondition
    severity: Severity
    title: str
    explanation: str
    observed_value: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Warnings produced for a product against the user's conditions."""

    warnings: list[HealthWarning]
    overall_severity: Severity | None
    summary: str

    @property
    def has_warnings(self) -> bool:
        """Return True when at least one warning was produced."""
        return bool(self.warnings)

    @property
    def has_high_severity(self) -> bool:
        """Return True when any warning is high severity."""
        return any(w.severity is Severity.HIGH for w in self.warnings)


@dataclass(frozen=True)
class Tier:
    """One severity tier of a rule."""

    severity: Severity
    title: str
    explanation: str


@dataclass(frozen=True)
class NutrientThreshold:
    """Ascending ``(limit, tier)`` pairs for one profile attribute.

    ``attribute`` names a ``NutrientProfile`` field or property. A value
    strictly above a limit crosses that tier.
    """

    attribute: str
    unit: str
    tiers: tuple[tuple[float, Tier], ...]


@dataclass(frozen=True)
class KeywordRule:
    """Ingredient keyword tiers, listed from most to least severe.

    When ``covers`` names a profile attribute, the rule is skipped if that
    nutrient already produced a warning for the same condition.
    """

    tiers: tuple[tuple[tuple[str, ...], Tier], ...]
    covers: str | None = None


@dataclass(frozen=True)
class ConditionRule:
    """All rules applied for one condition.

    ``dish_keywords`` look only at restaurant dish names and descriptions and
    are skipped once an ingredient keyword rule has warned for the condition.
    """

    thresholds: tuple[NutrientThreshold, ...] = ()
    keywords: tuple[KeywordRule, ...] = ()
    dish_keywords: tuple[KeywordRule, ...] = ()


_HIGH_SUGAR = Tier(
    Severity.MODERATE,
    "High Sugar Content",
    "Sugary foods provide calories without much nutritional value. "
    "They can also trigger cravings and make weight management harder.",
)

_SATURATED_FAT_HEART = NutrientThreshold(
    attribute="saturated_fat_g",
    unit="g",
    tiers=(
        (
            1.5,
            Tier(
                Severity.LOW,
                "Moderate Saturated Fat",
                "Contains some saturated fat. Monitor your total daily intake "
                "and balance with unsaturated fats like olive oil and nuts.",
            ),
        ),
        (
            5,
            Tier(
                Severity.HIGH,
                "High Saturated Fat",
                'Saturated fat can raise LDL ("bad") cholesterol levels, increasing '
                "the risk of heart disease and stroke. Limit intake to less than "
                "13g per day.",
            ),
        ),
    ),
)

_SATURATED_FAT_CHOLESTEROL = NutrientThreshold(
    attribute="saturated_fat_g",
    unit="g",
    tiers=(
        (
            1.5,
            Tier(
                Severity.LOW,
                "Moderate Saturated Fat",
                "Contains saturated fat which can contribute to elevated cholesterol "
                "levels. Keep your total daily saturated fat under 13g.",
            ),
        ),
        (
            5,
            Tier(
                Severity.HIGH,
                "High Saturated Fat",
                "Saturated fat is the primary dietary cause of high LDL cholesterol. "
                "Reducing saturated fat intake is one of the most effective ways to "
                "lower cholesterol.",
            ),
        ),
    ),
)

HIGH_PURINE_KEYWORDS = (
    "organ meat",
    "liver",
    "kidney",
    "heart",
    "brain",
    "anchovy",
    "anchovies",
    "sardine",
    "herring",
    "mackerel",
    "scallop",
    "mussel",
    "game meat",
    "venison",
)

MODERATE_PURINE_KEYWORDS = (
    "beef",
    "pork",
    "lamb",
    "duck",
    "shellfish",
    "crab",
    "lobster",
    "shrimp",
    "asparagus",
    "spinach",
    "mushroom",
)

RED_MEAT_KEYWORDS = (
    "beef",
    "steak",
    "brisket",
    "rib",
    "pork",
    "bacon",
    "ham",
    "sausage",
    "lamb",
)

CONDITION_RULES: dict[HealthCondition, ConditionRule] = {
    HealthCondition.DIABETES: ConditionRule(
        thresholds=(
            NutrientThreshold(
                attribute="sugars_g",
                unit="g",
                tiers=(
                    (
                        5,
                        Tier(
                            Severity.LOW,
                            "Moderate Sugar Content",
                            "This product contains moderate sugar. It may be "
                            "acceptable in small portions as part of a balanced "
                            "diabetic diet, but monitor your blood sugar response.",
                        ),
                    ),
                    (
                        12.5,
                        Tier(
                            Severity.MODERATE,
                            "High Sugar Content",
                            "This product has high sugar levels that may affect your "
                            "blood glucose. Monitor your portions carefully and "
                            "consider your total daily carb intake.",
                        ),
                    ),
                    (
                        22.5,
                        Tier(
                            Severity.HIGH,
                            "Very High Sugar Content",
                            "This product is very high in sugar which can cause rapid "
                            "blood sugar spikes and make blood sugar control very "
                            "difficult.",
                        ),
                    ),
                ),
            ),
            NutrientThreshold(
                attribute="carbohydrates_g",
                unit="g",
                tiers=(
                    (
                        50,
                        Tier(
                            Severity.MODERATE,
                            "High Carbohydrate Content",
                            "High carbohydrate foods can significantly impact blood "
                            "sugar levels. Consider portion size and pair with "
                            "protein or fiber to slow absorption.",
                        ),
                    ),
                ),
            ),
        ),
        keywords=(
            KeywordRule(
                tiers=(
                    (
                        ("high fructose corn syrup", "glucose syrup", "corn syrup"),
                        Tier(
                            Severity.MODERATE,
                            "Contains Added Syrups",
                            "This product contains added syrups which are quickly "
                            "absorbed and can cause rapid blood sugar spikes.",
                        ),
                    ),
                ),
            ),
        ),
    ),
    HealthCondition.HYPERTENSION: ConditionRule(
        thresholds=(
            NutrientThreshold(
                attribute="sodium_mg",
                unit="mg",
                tiers=(
                    (
                        300,
                        Tier(
                            Severity.LOW,
                            "Moderate Sodium Content",
                            "This product has moderate sodium. Keep track of your "
                            "total daily intake to stay within recommended limits "
                            "(less than 1500mg/day for hypertension).",
                        ),
                    ),
                    (
                        600,
                        Tier(
                            Severity.MODERATE,
                            "High Sodium Content",
                            "High sodium intake is linked to increased blood "
                            "pressure. Try to balance this with low-sodium foods "
                            "throughout the day.",
                        ),
                    ),
                    (
                        1500,
                        Tier(
                            Severity.HIGH,
                            "Very High Sodium Content",
                            "This product is extremely high in sodium which can raise "
                            "blood pressure significantly. The recommended daily "
                            "limit for hypertension is 1500mg total.",
                        ),
                    ),
                ),
            ),
        ),
        keywords=(
            KeywordRule(
                tiers=(
                    (
                        ("monosodium glutamate", "msg", "sodium"),
                        Tier(
                            Severity.LOW,
                            "Contains Sodium Additives",
                            "The ingredient list includes sodium-based additives. "
                            "Check the label for the total sodium content.",
                        ),
                    ),
                ),
                covers="sodium_mg",
            ),
        ),
    ),
    HealthCondition.HEART_DISEASE: ConditionRule(
        thresholds=(
            _SATURATED_FAT_HEART,
            NutrientThreshold(
                attribute="sodium_mg",
                unit="mg",
                tiers=(
                    (
                        600,
                        Tier(
                            Severity.MODERATE,
                            "High Sodium",
                            "High sodium intake can strain the heart and contribute "
                            "to high blood pressure, a major risk factor for heart "
                            "disease.",
                        ),
                    ),
                ),
            ),
        ),
        keywords=(
            KeywordRule(
                tiers=(
                    (
                        ("hydrogenated", "trans fat"),
                        Tier(
                            Severity.HIGH,
                            "May Contain Trans Fats",
                            "Trans fats (often from hydrogenated oils) raise bad "
                            "cholesterol, lower good cholesterol, and increase heart "
                            "disease risk.",
                        ),
                    ),
                ),
            ),
        ),
    ),
    HealthCondition.HIGH_CHOLESTEROL: ConditionRule(
        thresholds=(
            _SATURATED_FAT_CHOLESTEROL,
            NutrientThreshold(
                attribute="cholesterol_mg",
                unit="mg",
                tiers=(
                    (
                        50,
                        Tier(
                            Severity.MODERATE,
                            "Contains Dietary Cholesterol",
                            "While dietary cholesterol has less impact than saturated "
                            "fat, limiting intake can still be beneficial for those "
                            "with high cholesterol.",
                        ),
                    ),
                ),
            ),
        ),
    ),
    HealthCondition.KIDNEY_DISEASE: ConditionRule(
        thresholds=(
            NutrientThreshold(
                attribute="sodium_mg",
                unit="mg",
                tiers=(
                    (
                        400,
                        Tier(
                            Severity.MODERATE,
                            "High Sodium Content",
                            "Damaged kidneys cannot effectively remove excess sodium. "
                            "High sodium can lead to fluid retention and increased "
                            "blood pressure.",
                        ),
                    ),
                    (
                        800,
                        Tier(
                            Severity.HIGH,
                            "Very High Sodium Content",
                            "Damaged kidneys cannot effectively remove excess sodium. "
                            "This amount can lead to fluid retention and increased "
                            "blood pressure.",
                        ),
                    ),
                ),
            ),
            NutrientThreshold(
                attribute="potassium_mg",
                unit="mg",
                tiers=(
                    (
                        300,
                        Tier(
                            Severity.MODERATE,
                            "High Potassium Content",
                            "Kidneys with reduced function may not be able to remove "
                            "excess potassium.",
                        ),
                    ),
                    (
                        500,
                        Tier(
                            Severity.HIGH,
                            "Very High Potassium Content",
                            "High potassium levels can cause dangerous heart rhythm "
                            "problems when kidney function is reduced.",
                        ),
                    ),
                ),
            ),
            NutrientThreshold(
                attribute="phosphorus_mg",
                unit="mg",
                tiers=(
                    (
                        200,
                        Tier(
                            Severity.MODERATE,
                            "High Phosphorus Content",
                            "Excess phosphorus can weaken bones and cause calcium "
                            "deposits in blood vessels.",
                        ),
                    ),
                ),
            ),
        ),
        keywords=(
            KeywordRule(
                tiers=(
                    (
                        ("phosphate",),
                        Tier(
                            Severity.MODERATE,
                            "Contains Phosphate Additives",
                            "Phosphate additives are more readily absorbed than "
                            "natural phosphorus.",
                        ),
                    ),
                ),
                covers="phosphorus_mg",
            ),
        ),
    ),
    HealthCondition.OBESITY: ConditionRule(
        thresholds=(
            NutrientThreshold(
                attribute="energy_kcal",
                unit="kcal",
                tiers=(
                    (
                        250,
                        Tier(
                            Severity.LOW,
                            "Moderate-High Calories",
                            "This product has moderate to high calories. Track your "
                            "portions and balance with lower-calorie foods.",
                        ),
                    ),
                    (
                        400,
                        Tier(
                            Severity.MODERATE,
                            "Very High Calorie Content",
                            "This is a calorie-dense food. For weight management, be "
                            "mindful of portion sizes.",
                        ),
                    ),
                ),
            ),
            NutrientThreshold(
                attribute="fat_g",
                unit="g",
                tiers=(
                    (
                        17.5,
                        Tier(
                            Severity.MODERATE,
                            "High Fat Content",
                            "Fat is calorie-dense (9 calories per gram). High-fat "
                            "foods can contribute to weight gain if consumed in "
                            "excess.",
                        ),
                    ),
                ),
            ),
            NutrientThreshold(
                attribute="sugars_g",
                unit="g",
                tiers=((15, _HIGH_SUGAR),),
            ),
        ),
    ),
    HealthCondition.GOUT: ConditionRule(
        thresholds=(
            NutrientThreshold(
                attribute="proteins_g",
                unit="g",
                tiers=(
                    (
                        25,
                        Tier(
                            Severity.LOW,
                            "High Protein Content",
                            "Very high protein intake may contribute to elevated uric "
                            "acid levels. Balance with plenty of water and low-purine "
                            "foods.",
                        ),
                    ),
                ),
            ),
        ),
        keywords=(
            KeywordRule(
                tiers=(
                    (
                        HIGH_PURINE_KEYWORDS,
                        Tier(
                            Severity.HIGH,
                            "High Purine Content",
                            "This product contains high-purine ingredients which can "
                            "increase uric acid levels and trigger gout attacks.",
                        ),
                    ),
                    (
                        MODERATE_PURINE_KEYWORDS,
                        Tier(
                            Severity.LOW,
                            "Moderate Purine Content",
                            "This product contains ingredients with moderate purine "
                            "levels. Consume in moderation.",
                        ),
                    ),
                ),
            ),
            KeywordRule(
                tiers=(
                    (
                        ("high fructose", "fructose syrup"),
                        Tier(
                            Severity.MODERATE,
                            "Contains High Fructose",
                            "Fructose can increase uric acid production. High "
                            "fructose corn syrup has been linked to increased gout "
                            "risk.",
                        ),
                    ),
                ),
            ),
        ),
        dish_keywords=(
            KeywordRule(
                tiers=(
                    (
                        RED_MEAT_KEYWORDS,
                        Tier(
                            Severity.LOW,
                            "Contains Red Meat",
                            "Red meat is a moderate source of purines. Consider a "
                            "smaller portion or a plant-based side.",
                        ),
                    ),
                ),
            ),
        ),
    ),
}
