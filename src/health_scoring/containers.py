"""Dependency container wiring for the application."""

from dataclasses import dataclass

from health_scoring.config import Settings
from health_scoring.services.analysis import AnalysisService
from health_scoring.services.compliance import DietaryComplianceChecker
from health_scoring.services.conditions import HealthConditionAnalyzer
from health_scoring.services.health_score import HealthScoreCalculator
from health_scoring.services.recommendations import RecommendationComposer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    analysis_service = AnalysisService(
        calculator=HealthScoreCalculator(dead_zone=resolved_settings.factor_dead_zone),
        compliance_checker=DietaryComplianceChecker(),
        condition_analyzer=HealthConditionAnalyzer(),
        composer=RecommendationComposer(),
        debug=resolved_settings.debug,
    )
    return AppContainer(settings=resolved_settings, analysis_service=analysis_service)
