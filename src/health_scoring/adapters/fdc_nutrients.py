"""Mapping of USDA FoodData Central nutrients to nutrient profiles."""

from health_scoring.domain.nutrients import NutrientProfile

_NUTRIENT_IDS = {
    1008: "energy_kcal",
    1003: "proteins_g",
    1004: "fat_g",
    1005: "carbohydrates_g",
    1079: "fiber_g",
    2000: "sugars_g",
    1093: "sodium_g",
    1258: "saturated_fat_g",
    1253: "cholesterol_mg",
    1092: "potassium_mg",
    1091: "phosphorus_mg",
}

# FDC reports sodium in mg; profiles store grams.
_MG_TO_G = {"sodium_g"}


def nutrient_profile_from_fdc(payload: dict[str, object]) -> NutrientProfile:
    """Extract a per-100 g profile from an FDC food payload."""
    values: dict[str, float] = {}
    food_nutrients = payload.get("foodNutrients") or []
    if not isinstance(food_nutrients, list):
        return NutrientProfile()
    for nutrient in food_nutrients:
        if not isinstance(nutrient, dict):
            continue
        nutrient_info = nutrient.get("nutrient")
        if not isinstance(nutrient_info, dict):
            nutrient_info = {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        amount = nutrient.get("amount", nutrient.get("value"))
        if not isinstance(nutrient_id, int):
            continue
        field_name = _NUTRIENT_IDS.get(nutrient_id)
        if field_name is None or not isinstance(amount, int | float):
            continue
        value = float(amount)
        values[field_name] = value / 1000 if field_name in _MG_TO_G else value
    return NutrientProfile(**values)
