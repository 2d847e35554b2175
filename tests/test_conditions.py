"""Tests for health condition analysis."""

from health_scoring.domain.conditions import HealthCondition, Severity
from health_scoring.domain.nutrients import NutrientProfile
from health_scoring.services.conditions import (
    NO_CONDITIONS_SUMMARY,
    HealthConditionAnalyzer,
)


def test_very_high_sugar_is_high_severity_for_diabetes() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.DIABETES}, NutrientProfile(sugars_g=45)
    )

    assert len(result.warnings) == 1
    warning = result.warnings[0]
    assert warning.severity is Severity.HIGH
    assert "Sugar" in warning.title
    assert warning.observed_value == 45.0
    assert warning.unit == "g"
    assert result.overall_severity is Severity.HIGH
    assert result.has_high_severity


def test_only_highest_crossed_tier_is_reported() -> None:
    analyzer = HealthConditionAnalyzer()

    low = analyzer.analyze({HealthCondition.DIABETES}, NutrientProfile(sugars_g=10))
    moderate = analyzer.analyze(
        {HealthCondition.DIABETES}, NutrientProfile(sugars_g=15)
    )

    assert [w.severity for w in low.warnings] == [Severity.LOW]
    assert [w.severity for w in moderate.warnings] == [Severity.MODERATE]


def test_warnings_are_sorted_by_severity() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.OBESITY, HealthCondition.DIABETES},
        NutrientProfile(sugars_g=30, energy_kcal=300),
    )

    assert [w.severity for w in result.warnings] == [
        Severity.HIGH,
        Severity.MODERATE,
        Severity.LOW,
    ]
    assert result.warnings[0].condition is HealthCondition.DIABETES


def test_sodium_additive_keyword_without_sodium_data() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.HYPERTENSION},
        NutrientProfile(),
        "Chicken stock, monosodium glutamate",
    )

    assert [w.title for w in result.warnings] == ["Contains Sodium Additives"]
    assert result.warnings[0].observed_value is None


def test_sodium_keyword_skipped_when_sodium_is_flagged() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.HYPERTENSION},
        NutrientProfile(sodium_g=0.7),
        "Chicken stock, monosodium glutamate",
    )

    assert [w.title for w in result.warnings] == ["High Sodium Content"]
    assert result.warnings[0].unit == "mg"


def test_gout_reports_most_severe_purine_tier() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.GOUT}, None, "Beef and chicken liver pate"
    )

    assert [w.severity for w in result.warnings] == [Severity.HIGH]


def test_keywords_match_inside_compound_words() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.GOUT}, None, "Smoked sardines in oil"
    )

    assert [w.title for w in result.warnings] == ["High Purine Content"]


def test_red_meat_dish_name_warns_for_gout() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.GOUT}, None, "Ham and cheese toastie", "Ham and cheese toastie"
    )

    assert [w.title for w in result.warnings] == ["Contains Red Meat"]
    assert result.overall_severity is Severity.LOW


def test_red_meat_hint_skipped_after_purine_keyword() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.GOUT}, None, "Beef brisket", "Beef brisket"
    )

    assert [w.title for w in result.warnings] == ["Moderate Purine Content"]


def test_red_meat_hint_ignores_ingredient_lists() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.GOUT}, None, "Graham crackers, honey"
    )

    assert result.warnings == []


def test_trans_fat_keyword_for_heart_disease() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.HEART_DISEASE},
        NutrientProfile(saturated_fat_g=1),
        "Partially hydrogenated soybean oil",
    )

    assert [w.severity for w in result.warnings] == [Severity.HIGH]


def test_no_conditions_means_no_warnings() -> None:
    result = HealthConditionAnalyzer().analyze(set(), NutrientProfile(sugars_g=80))

    assert result.warnings == []
    assert result.overall_severity is None
    assert result.summary == NO_CONDITIONS_SUMMARY


def test_compatible_profile_has_no_overall_severity() -> None:
    result = HealthConditionAnalyzer().analyze(
        {HealthCondition.DIABETES, HealthCondition.HYPERTENSION},
        NutrientProfile(sugars_g=2, sodium_g=0.1),
    )

    assert not result.has_warnings
    assert result.overall_severity is None
    assert "compatible" in result.summary
