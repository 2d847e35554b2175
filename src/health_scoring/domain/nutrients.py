"""Nutrient domain models.

All values are expressed per 100 g of product or dish. Unknown nutrients are
collapsed to ``0.0`` before they reach the scoring services, so sparse
upstream data produces optimistic scores rather than errors.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from enum import IntEnum

SALT_TO_SODIUM = 2.5


class NutriScoreGrade(IntEnum):
    """Letter grade A (best) to E (worst), ordered by value."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5

    @property
    def label(self) -> str:
        """Return the grade letter."""
        return self.name

    @classmethod
    def parse(cls, value: object) -> "NutriScoreGrade | None":
        """Parse an authoritative label such as ``"a"``; unknown labels give None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        cleaned = value.strip().upper()
        if cleaned in cls.__members__:
            return cls[cleaned]
        return None


@dataclass(frozen=True)
class NutrientProfile:
    """Normalized per-100 g nutrient reading."""

    energy_kcal: float = 0.0
    proteins_g: float = 0.0
    carbohydrates_g: float = 0.0
    sugars_g: float = 0.0
    fat_g: float = 0.0
    saturated_fat_g: float = 0.0
    fiber_g: float = 0.0
    sodium_g: float = 0.0
    cholesterol_mg: float = 0.0
    potassium_mg: float = 0.0
    phosphorus_mg: float = 0.0

    @property
    def sodium_mg(self) -> float:
        """Sodium in milligrams."""
        return self.sodium_g * 1000

    @classmethod
    def from_values(cls, **values: float | None) -> "NutrientProfile":
        """Build a profile from optional values, treating None as zero."""
        return cls(**{name: _to_float(value) for name, value in values.items()})

    @classmethod
    def from_nutriments(cls, nutriments: Mapping[str, object]) -> "NutrientProfile":
        """Normalize an Open Food Facts style nutriments mapping."""
        sodium = _first_value(nutriments, ("sodium_100g", "sodium"))
        if sodium is None:
            salt = _first_value(nutriments, ("salt_100g", "salt"))
            sodium = salt / SALT_TO_SODIUM if salt is not None else None
        return cls.from_values(
            energy_kcal=_first_value(
                nutriments, ("energy-kcal_100g", "energy-kcal", "energy_kcal")
            ),
            proteins_g=_first_value(
                nutriments, ("proteins_100g", "proteins", "protein_100g")
            ),
            carbohydrates_g=_first_value(
                nutriments, ("carbohydrates_100g", "carbohydrates")
            ),
            sugars_g=_first_value(nutriments, ("sugars_100g", "sugars")),
            fat_g=_first_value(nutriments, ("fat_100g", "fat")),
            saturated_fat_g=_first_value(
                nutriments,
                ("saturated-fat_100g", "saturated_fat_100g", "saturated-fat"),
            ),
            fiber_g=_first_value(nutriments, ("fiber_100g", "fiber")),
            sodium_g=sodium,
            cholesterol_mg=_grams_to_mg(
                _first_value(nutriments, ("cholesterol_100g", "cholesterol"))
            ),
            potassium_mg=_grams_to_mg(
                _first_value(nutriments, ("potassium_100g", "potassium"))
            ),
            phosphorus_mg=_grams_to_mg(
                _first_value(nutriments, ("phosphorus_100g", "phosphorus"))
            ),
        )


def combine_portions(
    portions: Iterable[tuple[NutrientProfile, float]],
) -> NutrientProfile:
    """Return the per-100 g profile of a meal made of (profile, grams) portions."""
    totals = {field.name: 0.0 for field in fields(NutrientProfile)}
    total_grams = 0.0
    for profile, grams in portions:
        if grams <= 0:
            continue
        total_grams += grams
        for name in totals:
            totals[name] += getattr(profile, name) * grams / 100
    if total_grams == 0:
        return NutrientProfile()
    return NutrientProfile(
        **{name: value * 100 / total_grams for name, value in totals.items()}
    )


def _first_value(mapping: Mapping[str, object], keys: tuple[str, ...]) -> float | None:
    for key in keys:
        value = mapping.get(key)
        if value is None:
            continue
        if isinstance(value, bool):
            continue
        if isinstance(value, int | float):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                continue
    return None


def _grams_to_mg(value: float | None) -> float | None:
    # Open Food Facts reports minerals in grams per 100 g.
    return value * 1000 if value is not None else None


def _to_float(value: object) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    return 0.0
