"""Tests for container wiring."""

from health_scoring.config import Settings
from health_scoring.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.analysis_service is not None
    assert container.analysis_service.debug is False


def test_build_container_applies_settings() -> None:
    settings = Settings(debug=True, factor_dead_zone=2.5)

    container = build_container(settings)

    assert container.analysis_service.debug is True
    assert container.analysis_service.calculator.dead_zone == 2.5
