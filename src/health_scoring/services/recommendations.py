"""Final best / caution / avoid recommendations."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from health_scoring.domain.conditions import HealthWarning, Severity
from health_scoring.domain.recommendations import (
    DishAnalysis,
    MealRating,
    MealType,
    MenuBuckets,
    Recommendation,
)
from health_scoring.domain.restrictions import DietaryRestriction
from health_scoring.domain.scoring import Factor

SHORT_DISCLAIMER = (
    "For informational purposes only. Not medical advice. "
    "Verify nutrition info with the restaurant or product label."
)
CAUTION_TIP = "Consider checking portion size or pairing with lower-calorie sides."
AVOID_TIP = "You may want to explore other options on the menu."

# Lowest score earning each meal rating, best first.
_MEAL_RATINGS = (
    (75, MealRating.EXCELLENT),
    (60, MealRating.GOOD),
    (40, MealRating.FAIR),
)


@dataclass
class RecommendationComposer:
    """Combines score, warnings and violations into a recommendation.

    Safety signals dominate: any dietary violation or high-severity warning
    forces ``AVOID`` whatever the numeric score.
    """

    avoid_below: int = 40
    caution_below: int = 70

    def compose(
        self,
        score: int,
        warnings: Sequence[HealthWarning],
        violations: Iterable[DietaryRestriction],
    ) -> Recommendation:
        """Return the recommendation for one evaluation."""
        severities = {warning.severity for warning in warnings}
        if set(violations) or score < self.avoid_below or Severity.HIGH in severities:
            return Recommendation.AVOID
        if score < self.caution_below or Severity.MODERATE in severities:
            return Recommendation.CAUTION
        return Recommendation.BEST

    def rationale(
        self,
        recommendation: Recommendation,
        score: int,
        warnings: Sequence[HealthWarning],
        violations: Iterable[DietaryRestriction],
        factors: Sequence[Factor] = (),
    ) -> str:
        """Explain a recommendation in one or two short sentences."""
        selected = set(violations)
        violated = [r for r in DietaryRestriction if r in selected]
        if violated:
            names = ", ".join(r.display_name for r in violated)
            return f"Does not fit your dietary preferences: {names}."
        if warnings:
            titles = ". ".join(warning.title for warning in warnings[:2])
            return f"{titles}."
        negatives = [factor.description for factor in factors if not factor.is_positive]
        positives = [factor.description for factor in factors if factor.is_positive]
        if recommendation is Recommendation.BEST:
            if positives:
                return f"Health score {score}/100. {positives[0]}."
            return f"Health score {score}/100."
        if negatives:
            return f"Health score {score}/100. {negatives[0]}."
        return f"Health score {score}/100."

    def tip(
        self,
        recommendation: Recommendation,
        warnings: Sequence[HealthWarning],
        violations: Iterable[DietaryRestriction],
        factors: Sequence[Factor] = (),
    ) -> str | None:
        """Suggest a next step; a mild note is preferred when there are concerns."""
        concerns = bool(set(violations)) or any(
            warning.severity > Severity.LOW for warning in warnings
        )
        notes = [w.title for w in warnings if w.severity is Severity.LOW]
        notes.extend(factor.description for factor in factors if factor.is_positive)
        if concerns and notes:
            return f"{notes[0]}."
        if recommendation is Recommendation.CAUTION:
            return CAUTION_TIP
        if recommendation is Recommendation.AVOID and concerns:
            return AVOID_TIP
        return None

    def rate_meal(self, score: int) -> MealRating:
        """Rate a meal from its 0-100 score."""
        for minimum, rating in _MEAL_RATINGS:
            if score >= minimum:
                return rating
        return MealRating.POOR

    def meal_message(self, rating: MealRating, meal_type: MealType | None) -> str:
        """Short headline for a rated meal, such as ``Good Lunch!``."""
        label = meal_type.display_name if meal_type is not None else "meal"
        if rating is MealRating.EXCELLENT:
            return f"Excellent {label}!"
        if rating is MealRating.GOOD:
            return f"Good {label}!"
        if rating is MealRating.FAIR:
            return f"Fair {label}"
        return "Could be healthier"

    def bucket(self, analyses: Iterable[DishAnalysis]) -> MenuBuckets:
        """Group analyses into best / caution / avoid, keeping input order."""
        grouped: dict[Recommendation, list[DishAnalysis]] = {
            recommendation: [] for recommendation in Recommendation
        }
        for analysis in analyses:
            grouped[analysis.recommendation].append(analysis)
        return MenuBuckets(
            best=grouped[Recommendation.BEST],
            caution=grouped[Recommendation.CAUTION],
            avoid=grouped[Recommendation.AVOID],
        )

    def summarize(self, buckets: MenuBuckets) -> str:
        """Describe a bucketed menu, followed by the short disclaimer."""
        if buckets.avoid:
            summary = (
                f"Based on your preferences, {len(buckets.avoid)} item(s) may not "
                "align with your goals. "
            )
        elif buckets.caution:
            summary = (
                f"{len(buckets.caution)} item(s) have higher values in some nutrients. "
            )
        else:
            summary = "These items generally align with your selected preferences. "
        if buckets.best:
            summary += (
                f"{len(buckets.best)} item(s) are lower in nutrients you're watching."
            )
        return f"{summary.strip()}\n\n{SHORT_DISCLAIMER}"
