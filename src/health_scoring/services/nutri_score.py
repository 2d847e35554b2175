"""Points-based A-E grade classification modeled on the Nutri-Score method."""

from dataclasses import dataclass

from health_scoring.domain.nutrients import NutrientProfile, NutriScoreGrade
from health_scoring.domain.scoring import GradeSource

Breakpoints = tuple[tuple[float, int], ...]

ENERGY_KCAL_POINTS: Breakpoints = (
    (0, 1),
    (70, 2),
    (135, 4),
    (200, 6),
    (270, 8),
    (335, 10),
)
SUGARS_G_POINTS: Breakpoints = (
    (4.5, 1),
    (9, 2),
    (18, 4),
    (27, 6),
    (36, 8),
    (45, 10),
)
SATURATED_FAT_G_POINTS: Breakpoints = (
    (1, 1),
    (2, 2),
    (4, 4),
    (6, 6),
    (8, 8),
    (10, 10),
)
SODIUM_MG_POINTS: Breakpoints = (
    (90, 1),
    (180, 2),
    (360, 4),
    (540, 6),
    (720, 8),
    (900, 10),
)
FIBER_G_POINTS: Breakpoints = ((0.6, 1), (1.2, 2), (2.4, 3), (3.5, 4), (4.7, 5))
PROTEIN_G_POINTS: Breakpoints = ((1.6, 1), (3.2, 2), (4.8, 3), (6.4, 4), (8, 5))

WHOLE_FOOD_BONUS = 5

# Upper bounds (inclusive) of the final score for each grade.
_GRADE_LIMITS = (
    (-1, NutriScoreGrade.A),
    (2, NutriScoreGrade.B),
    (10, NutriScoreGrade.C),
    (18, NutriScoreGrade.D),
)


@dataclass(frozen=True)
class NutriScorePoints:
    """Breakdown of the points behind a grade."""

    energy: int
    sugars: int
    saturated_fat: int
    sodium: int
    fiber: int
    protein: int
    whole_food_bonus: int

    @property
    def negative(self) -> int:
        """Sum of unfavourable points."""
        return self.energy + self.sugars + self.saturated_fat + self.sodium

    @property
    def positive(self) -> int:
        """Sum of favourable points."""
        return self.fiber + self.protein + self.whole_food_bonus

    @property
    def final(self) -> int:
        """Final score, lower is better."""
        return self.negative - self.positive


def points_for(value: float, table: Breakpoints) -> int:
    """Return the points of the highest breakpoint strictly exceeded."""
    earned = 0
    for threshold, points in table:
        if value > threshold:
            earned = points
        else:
            break
    return earned


def points(profile: NutrientProfile) -> NutriScorePoints:
    """Compute the points breakdown for a profile."""
    return NutriScorePoints(
        energy=points_for(profile.energy_kcal, ENERGY_KCAL_POINTS),
        sugars=points_for(profile.sugars_g, SUGARS_G_POINTS),
        saturated_fat=points_for(profile.saturated_fat_g, SATURATED_FAT_G_POINTS),
        sodium=points_for(profile.sodium_mg, SODIUM_MG_POINTS),
        fiber=points_for(profile.fiber_g, FIBER_G_POINTS),
        protein=points_for(profile.proteins_g, PROTEIN_G_POINTS),
        whole_food_bonus=WHOLE_FOOD_BONUS if _looks_like_whole_food(profile) else 0,
    )


def grade_for_points(final_score: int) -> NutriScoreGrade:
    """Map a final points score to its grade."""
    for limit, grade in _GRADE_LIMITS:
        if final_score <= limit:
            return grade
    return NutriScoreGrade.E


def classify(profile: NutrientProfile) -> NutriScoreGrade:
    """Classify a profile into an A-E grade."""
    return grade_for_points(points(profile).final)


def resolve_grade(
    profile: NutrientProfile, official: NutriScoreGrade | None = None
) -> tuple[NutriScoreGrade, GradeSource]:
    """Prefer an official label grade, otherwise compute one."""
    if official is not None:
        return official, GradeSource.OFFICIAL
    return classify(profile), GradeSource.COMPUTED


def _looks_like_whole_food(profile: NutrientProfile) -> bool:
    # Approximates fruit/vegetable content when no category tag is available.
    return (
        profile.energy_kcal < 100
        and profile.fiber_g > 1
        and profile.sugars_g < 10
        and profile.saturated_fat_g < 2
    )
