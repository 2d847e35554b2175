"""Numeric 0-100 health score with explanatory factors."""

from dataclasses import dataclass

from health_scoring.domain.nutrients import NutrientProfile, NutriScoreGrade
from health_scoring.domain.scoring import Factor, HealthScore
from health_scoring.services.nutri_score import (
    FIBER_G_POINTS,
    PROTEIN_G_POINTS,
    SATURATED_FAT_G_POINTS,
    SODIUM_MG_POINTS,
    SUGARS_G_POINTS,
    Breakpoints,
    resolve_grade,
)

BASE_SCORES: dict[NutriScoreGrade, int] = {
    NutriScoreGrade.A: 90,
    NutriScoreGrade.B: 75,
    NutriScoreGrade.C: 60,
    NutriScoreGrade.D: 40,
    NutriScoreGrade.E: 20,
}

MAX_PENALTY = 10.0
MAX_BONUS = 5.0


@dataclass(frozen=True)
class _Adjustment:
    name: str
    attribute: str
    unit: str
    table: Breakpoints
    weight: float
    is_positive: bool


# Order doubles as the tie-break for factors with equal impact.
_ADJUSTMENTS = (
    _Adjustment("sugar", "sugars_g", "g", SUGARS_G_POINTS, MAX_PENALTY, False),
    _Adjustment("sodium", "sodium_mg", "mg", SODIUM_MG_POINTS, MAX_PENALTY, False),
    _Adjustment(
        "saturated fat",
        "saturated_fat_g",
        "g",
        SATURATED_FAT_G_POINTS,
        MAX_PENALTY,
        False,
    ),
    _Adjustment("fiber", "fiber_g", "g", FIBER_G_POINTS, MAX_BONUS, True),
    _Adjustment("protein", "proteins_g", "g", PROTEIN_G_POINTS, MAX_BONUS, True),
)


@dataclass
class HealthScoreCalculator:
    """Turns a nutrient profile and optional official grade into a 0-100 score."""

    dead_zone: float = 1.0

    def score(
        self, profile: NutrientProfile, grade: NutriScoreGrade | None = None
    ) -> HealthScore:
        """Score a profile, using ``grade`` verbatim when it is provided."""
        resolved, source = resolve_grade(profile, grade)
        total = float(BASE_SCORES[resolved])
        factors: list[Factor] = []
        for adjustment in _ADJUSTMENTS:
            value = float(getattr(profile, adjustment.attribute))
            impact = _impact(value, adjustment)
            total += impact
            if abs(impact) >= self.dead_zone:
                factors.append(_factor(adjustment, value, impact))
        factors.sort(key=lambda factor: abs(factor.impact), reverse=True)
        return HealthScore(
            score=int(round(min(max(total, 0.0), 100.0))),
            factors=factors,
            grade=resolved,
            grade_source=source,
        )


def _impact(value: float, adjustment: _Adjustment) -> float:
    """Signed delta proportional to the distance past the first breakpoint."""
    healthy = adjustment.table[0][0]
    ceiling = adjustment.table[-1][0]
    ratio = min(max((value - healthy) / (ceiling - healthy), 0.0), 1.0)
    delta = ratio * adjustment.weight
    return delta if adjustment.is_positive else -delta


def _factor(adjustment: _Adjustment, value: float, impact: float) -> Factor:
    precision = 0 if adjustment.unit == "mg" else 1
    amount = f"{value:.{precision}f}{adjustment.unit}"
    if adjustment.is_positive:
        description = f"Good source of {adjustment.name} ({amount} per 100g)"
    else:
        description = f"High in {adjustment.name} ({amount} per 100g)"
    return Factor(
        name=adjustment.name,
        description=description,
        is_positive=adjustment.is_positive,
        impact=round(impact, 2),
    )
