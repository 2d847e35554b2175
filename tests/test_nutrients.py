"""Tests for nutrient profile construction."""

import pytest

from health_scoring.domain.nutrients import (
    NutrientProfile,
    NutriScoreGrade,
    combine_portions,
)


def test_from_nutriments_reads_per_100g_keys() -> None:
    profile = NutrientProfile.from_nutriments(
        {
            "energy-kcal_100g": 389,
            "proteins_100g": "13.5",
            "sugars_100g": 1.2,
            "saturated-fat_100g": 1.3,
            "fiber_100g": 10.6,
            "sodium_100g": 0.006,
            "potassium_100g": 0.35,
            "fat_100g": None,
        }
    )

    assert profile.energy_kcal == 389
    assert profile.proteins_g == 13.5
    assert profile.fat_g == 0.0
    assert profile.sodium_mg == pytest.approx(6)
    assert profile.potassium_mg == pytest.approx(350)


def test_from_nutriments_derives_sodium_from_salt() -> None:
    profile = NutrientProfile.from_nutriments({"salt_100g": 1.25})

    assert profile.sodium_g == pytest.approx(0.5)


def test_from_nutriments_ignores_unparseable_values() -> None:
    profile = NutrientProfile.from_nutriments(
        {"sugars_100g": "n/a", "sugars": 4, "fiber_100g": True}
    )

    assert profile.sugars_g == 4
    assert profile.fiber_g == 0.0


def test_from_values_treats_none_as_zero() -> None:
    profile = NutrientProfile.from_values(sugars_g=None, fiber_g=3)

    assert profile.sugars_g == 0.0
    assert profile.fiber_g == 3.0


def test_combine_portions_weights_by_grams() -> None:
    light = NutrientProfile(energy_kcal=100, sugars_g=10)
    heavy = NutrientProfile(energy_kcal=400, sugars_g=0)

    combined = combine_portions([(light, 300), (heavy, 100), (heavy, 0)])

    assert combined.energy_kcal == pytest.approx(175)
    assert combined.sugars_g == pytest.approx(7.5)


def test_combine_portions_without_weight_is_empty() -> None:
    assert combine_portions([]) == NutrientProfile()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a", NutriScoreGrade.A),
        ("E", NutriScoreGrade.E),
        (NutriScoreGrade.C, NutriScoreGrade.C),
        ("unknown", None),
        ("not-applicable", None),
        (None, None),
    ],
)
def test_grade_parse(value: object, expected: NutriScoreGrade | None) -> None:
    assert NutriScoreGrade.parse(value) is expected
