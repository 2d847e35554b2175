"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from health_scoring.api.models import (
    MealRequest,
    MenuRequest,
    OpenFoodFactsRequest,
    ProductRequest,
)
from health_scoring.app_logging import configure_logging
from health_scoring.containers import AppContainer
from health_scoring.domain.conditions import AnalysisResult, HealthWarning
from health_scoring.domain.recommendations import (
    DishAnalysis,
    MealAnalysis,
    MenuAnalysis,
)
from health_scoring.domain.restrictions import ComplianceResult, DietaryRestriction
from health_scoring.domain.scoring import HealthScore


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/products/analyze")
    async def analyze_product(
        body: ProductRequest, request: Request
    ) -> dict[str, object]:
        """Analyze a product with structured nutrition data."""
        state_container: AppContainer = request.app.state.container
        analysis = state_container.analysis_service.analyze_product(
            body.to_product_input(), body.profile.to_profile()
        )
        return _serialize_dish(analysis)

    @app.post("/products/openfoodfacts")
    async def analyze_open_food_facts(
        body: OpenFoodFactsRequest, request: Request
    ) -> dict[str, object]:
        """Analyze a raw Open Food Facts product payload."""
        state_container: AppContainer = request.app.state.container
        analysis = state_container.analysis_service.analyze_product(
            body.product.to_product_input(), body.profile.to_profile()
        )
        return _serialize_dish(analysis)

    @app.post("/menus/analyze")
    async def analyze_menu(body: MenuRequest, request: Request) -> dict[str, object]:
        """Analyze restaurant menu items into best / caution / avoid."""
        state_container: AppContainer = request.app.state.container
        limit = state_container.settings.max_menu_items
        if len(body.items) > limit:
            logger.warning(
                "Rejected menu with %s items (max %s)", len(body.items), limit
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"A menu may contain at most {limit} items.",
            )
        analysis = state_container.analysis_service.analyze_menu(
            [item.to_menu_item() for item in body.items], body.profile.to_profile()
        )
        return _serialize_menu(analysis)

    @app.post("/meals/analyze")
    async def analyze_meal(body: MealRequest, request: Request) -> dict[str, object]:
        """Analyze a multi-item meal."""
        state_container: AppContainer = request.app.state.container
        analysis = state_container.analysis_service.analyze_meal(
            body.name,
            [
                (portion.nutrients.to_profile(), portion.grams)
                for portion in body.portions
            ],
            body.profile.to_profile(),
            ingredients_text=body.ingredients_text,
            meal_type=body.meal_type,
        )
        return _serialize_meal(analysis)

    return app


def _serialize_menu(analysis: MenuAnalysis) -> dict[str, object]:
    return {
        "summary": analysis.summary,
        "dishes": [_serialize_dish(dish) for dish in analysis.dishes],
        "best": [dish.name for dish in analysis.buckets.best],
        "caution": [dish.name for dish in analysis.buckets.caution],
        "avoid": [dish.name for dish in analysis.buckets.avoid],
    }


def _serialize_meal(meal: MealAnalysis) -> dict[str, object]:
    return {
        **_serialize_dish(meal.analysis),
        "meal_type": meal.meal_type.value if meal.meal_type is not None else None,
        "rating": meal.rating.value,
        "message": meal.message,
    }


def _serialize_dish(analysis: DishAnalysis) -> dict[str, object]:
    return {
        "name": analysis.name,
        "recommendation": analysis.recommendation.value,
        "reason": analysis.reason,
        "tip": analysis.tip,
        "score": analysis.score,
        "health_score": _serialize_health_score(analysis.health_score),
        "health": _serialize_health(analysis.health),
        "compliance": _serialize_compliance(analysis.compliance),
    }


def _serialize_health_score(
    health_score: HealthScore | None,
) -> dict[str, object] | None:
    if health_score is None:
        return None
    return {
        "score": health_score.score,
        "grade": health_score.grade.label,
        "grade_source": health_score.grade_source.value,
        "factors": [
            {
                "name": factor.name,
                "description": factor.description,
                "is_positive": factor.is_positive,
                "impact": factor.impact,
            }
            for factor in health_score.factors
        ],
    }


def _serialize_health(result: AnalysisResult) -> dict[str, object]:
    return {
        "overall_severity": (
            result.overall_severity.label
            if result.overall_severity is not None
            else None
        ),
        "summary": result.summary,
        "warnings": [_serialize_warning(warning) for warning in result.warnings],
    }


def _serialize_warning(warning: HealthWarning) -> dict[str, object]:
    return {
        "condition": warning.condition.value,
        "severity": warning.severity.label,
        "title": warning.title,
        "explanation": warning.explanation,
        "observed_value": warning.observed_value,
        "unit": warning.unit,
    }


def _serialize_compliance(result: ComplianceResult) -> dict[str, list[str]]:
    return {
        "matches": _ordered_values(result.matches),
        "violations": _ordered_values(result.violations),
    }


def _ordered_values(restrictions: frozenset[DietaryRestriction]) -> list[str]:
    return [r.value for r in DietaryRestriction if r in restrictions]
