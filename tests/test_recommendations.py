"""Tests for recommendation composition and menu bucketing."""

import pytest

from health_scoring.domain.conditions import AnalysisResult, Severity
from health_scoring.domain.recommendations import (
    DishAnalysis,
    MealRating,
    MealType,
    Recommendation,
)
from health_scoring.domain.restrictions import ComplianceResult, DietaryRestriction
from health_scoring.domain.scoring import Factor
from health_scoring.services.recommendations import (
    AVOID_TIP,
    CAUTION_TIP,
    SHORT_DISCLAIMER,
    RecommendationComposer,
)
from tests.conftest import make_warning


def _dish(name: str, recommendation: Recommendation) -> DishAnalysis:
    return DishAnalysis(
        name=name,
        recommendation=recommendation,
        reason="",
        score=50,
        health_score=None,
        health=AnalysisResult(warnings=[], overall_severity=None, summary=""),
        compliance=ComplianceResult(),
        nutrients=None,
    )


def test_violation_forces_avoid_despite_good_score() -> None:
    composer = RecommendationComposer()

    recommendation = composer.compose(85, [], {DietaryRestriction.GLUTEN_FREE})

    assert recommendation is Recommendation.AVOID
    assert composer.rationale(
        recommendation, 85, [], {DietaryRestriction.GLUTEN_FREE}
    ) == "Does not fit your dietary preferences: Gluten-Free."


def test_high_warning_forces_avoid_despite_excellent_score() -> None:
    composer = RecommendationComposer()

    assert (
        composer.compose(95, [make_warning(Severity.HIGH)], set())
        is Recommendation.AVOID
    )


@pytest.mark.parametrize(
    ("score", "severity", "expected"),
    [
        (39, None, Recommendation.AVOID),
        (40, None, Recommendation.CAUTION),
        (69, None, Recommendation.CAUTION),
        (70, None, Recommendation.BEST),
        (90, Severity.MODERATE, Recommendation.CAUTION),
        (90, Severity.LOW, Recommendation.BEST),
    ],
)
def test_compose_thresholds(
    score: int, severity: Severity | None, expected: Recommendation
) -> None:
    warnings = [make_warning(severity)] if severity is not None else []

    assert RecommendationComposer().compose(score, warnings, set()) is expected


def test_rationale_prefers_warning_titles() -> None:
    warnings = [
        make_warning(Severity.MODERATE),
        make_warning(Severity.LOW),
        make_warning(Severity.LOW),
    ]

    reason = RecommendationComposer().rationale(
        Recommendation.CAUTION, 80, warnings, set()
    )

    assert reason == "Moderate warning. Low warning."


def test_rationale_falls_back_to_score_and_factor() -> None:
    composer = RecommendationComposer()
    factors = [
        Factor("sugar", "High in sugar (30.0g per 100g)", False, -6.3),
        Factor("fiber", "Good source of fiber (4.0g per 100g)", True, 4.0),
    ]

    best = composer.rationale(Recommendation.BEST, 82, [], set(), factors)
    caution = composer.rationale(Recommendation.CAUTION, 55, [], set(), factors)

    assert best == "Health score 82/100. Good source of fiber (4.0g per 100g)."
    assert caution == "Health score 55/100. High in sugar (30.0g per 100g)."


def test_bucket_preserves_input_order() -> None:
    dishes = [
        _dish("soup", Recommendation.CAUTION),
        _dish("salad", Recommendation.BEST),
        _dish("fries", Recommendation.AVOID),
        _dish("fish", Recommendation.BEST),
        _dish("cake", Recommendation.CAUTION),
    ]

    buckets = RecommendationComposer().bucket(dishes)

    assert [d.name for d in buckets.best] == ["salad", "fish"]
    assert [d.name for d in buckets.caution] == ["soup", "cake"]
    assert [d.name for d in buckets.avoid] == ["fries"]


def test_summarize_mentions_counts_and_disclaimer() -> None:
    composer = RecommendationComposer()
    buckets = composer.bucket(
        [_dish("salad", Recommendation.BEST), _dish("fries", Recommendation.AVOID)]
    )

    summary = composer.summarize(buckets)

    assert summary.startswith("Based on your preferences, 1 item(s) may not")
    assert "1 item(s) are lower in nutrients you're watching." in summary
    assert summary.endswith(SHORT_DISCLAIMER)


def test_summarize_all_best() -> None:
    composer = RecommendationComposer()
    buckets = composer.bucket([_dish("salad", Recommendation.BEST)])

    assert composer.summarize(buckets).startswith(
        "These items generally align with your selected preferences."
    )


def test_tip_prefers_mild_note_alongside_concerns() -> None:
    composer = RecommendationComposer()
    warnings = [make_warning(Severity.HIGH), make_warning(Severity.LOW)]

    tip = composer.tip(Recommendation.AVOID, warnings, set())

    assert tip == "Low warning."


def test_tip_by_recommendation() -> None:
    composer = RecommendationComposer()

    assert composer.tip(Recommendation.CAUTION, [], set()) == CAUTION_TIP
    assert (
        composer.tip(Recommendation.AVOID, [], {DietaryRestriction.VEGAN})
        == AVOID_TIP
    )
    assert composer.tip(Recommendation.AVOID, [], set()) is None
    assert composer.tip(Recommendation.BEST, [], set()) is None


@pytest.mark.parametrize(
    ("score", "rating", "message"),
    [
        (92, MealRating.EXCELLENT, "Excellent Dinner!"),
        (75, MealRating.EXCELLENT, "Excellent Dinner!"),
        (60, MealRating.GOOD, "Good Dinner!"),
        (40, MealRating.FAIR, "Fair Dinner"),
        (39, MealRating.POOR, "Could be healthier"),
    ],
)
def test_meal_rating(score: int, rating: MealRating, message: str) -> None:
    composer = RecommendationComposer()

    assert composer.rate_meal(score) is rating
    assert composer.meal_message(rating, MealType.DINNER) == message


def test_meal_message_without_type() -> None:
    composer = RecommendationComposer()

    assert composer.meal_message(MealRating.GOOD, None) == "Good meal!"
