"""Shared test fixtures."""

import pytest

from health_scoring.config import Settings
from health_scoring.containers import AppContainer, build_container
from health_scoring.domain.conditions import HealthCondition, HealthWarning, Severity
from health_scoring.domain.nutrients import NutrientProfile
from health_scoring.services.analysis import AnalysisService

BROCCOLI = NutrientProfile(
    energy_kcal=34,
    proteins_g=2.8,
    carbohydrates_g=6.6,
    sugars_g=1.7,
    fat_g=0.4,
    saturated_fat_g=0.1,
    fiber_g=2.6,
    sodium_g=0.033,
)

BACON = NutrientProfile(
    energy_kcal=541,
    proteins_g=37,
    carbohydrates_g=1.4,
    sugars_g=0,
    fat_g=42,
    saturated_fat_g=17,
    fiber_g=0,
    sodium_g=1.717,
)


def make_warning(
    severity: Severity, condition: HealthCondition = HealthCondition.DIABETES
) -> HealthWarning:
    """Build a warning with placeholder text."""
    return HealthWarning(
        condition=condition,
        severity=severity,
        title=f"{severity.name.title()} warning",
        explanation="Test warning.",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", max_menu_items=5)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def service() -> AnalysisService:
    return AnalysisService()
