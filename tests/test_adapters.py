"""Tests for Open Food Facts and FoodData Central mapping."""

import pytest

from health_scoring.adapters.fdc_nutrients import nutrient_profile_from_fdc
from health_scoring.adapters.open_food_facts import OpenFoodFactsProduct
from health_scoring.domain.nutrients import NutrientProfile, NutriScoreGrade


def test_open_food_facts_product_to_input() -> None:
    product = OpenFoodFactsProduct.model_validate(
        {
            "code": "3017620422003",
            "product_name": "Oat drink",
            "nutriscore_grade": "b",
            "nutriments": {"energy-kcal_100g": 46, "salt_100g": 0.1},
            "categories_tags": ["en:plant-based-foods"],
            "labels_tags": ["en:vegan"],
            "allergens_tags": ["en:gluten"],
            "ingredients_text": "Water, oats 10%, rapeseed oil",
            "brands": "ignored",
        }
    )

    product_input = product.to_product_input()

    assert product_input.name == "Oat drink"
    assert product_input.official_grade is NutriScoreGrade.B
    assert product_input.category_tags == {"en:plant-based-foods", "en:vegan"}
    assert product_input.allergens == {"en:gluten"}
    assert product_input.nutrients.energy_kcal == 46
    assert product_input.nutrients.sodium_g == pytest.approx(0.04)


def test_open_food_facts_unknown_grade_and_missing_allergens() -> None:
    product = OpenFoodFactsProduct(nutriscore_grade="unknown")

    product_input = product.to_product_input()

    assert product_input.official_grade is None
    assert product_input.allergens is None
    assert product_input.nutrients == NutrientProfile()


def test_fdc_payload_maps_nutrients() -> None:
    payload = {
        "description": "Chicken breast",
        "foodNutrients": [
            {"nutrient": {"id": 1008}, "amount": 165},
            {"nutrient": {"id": 1003}, "amount": 31},
            {"nutrientId": 1093, "value": 74},
            {"nutrientId": 1092, "value": 256},
            {"nutrientId": 9999, "value": 1},
            {"nutrient": {"id": 1004}, "amount": "3.6"},
            {"nutrient": "1005", "amount": 12},
            {"nutrientId": [1079], "value": 2},
            "bogus",
        ],
    }

    profile = nutrient_profile_from_fdc(payload)

    assert profile.energy_kcal == 165
    assert profile.proteins_g == 31
    assert profile.sodium_g == pytest.approx(0.074)
    assert profile.potassium_mg == 256
    assert profile.fat_g == 0.0
    assert profile.carbohydrates_g == 0.0
    assert profile.fiber_g == 0.0


def test_fdc_payload_without_nutrients() -> None:
    assert nutrient_profile_from_fdc({}) == NutrientProfile()
    assert nutrient_profile_from_fdc({"foodNutrients": "x"}) == NutrientProfile()
