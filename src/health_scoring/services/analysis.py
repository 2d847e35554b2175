"""Analysis entry points shared by products, dishes, menus and meals."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from health_scoring.domain.conditions import AnalysisResult
from health_scoring.domain.nutrients import (
    NutrientProfile,
    NutriScoreGrade,
    combine_portions,
)
from health_scoring.domain.profiles import UserProfile
from health_scoring.domain.recommendations import (
    DishAnalysis,
    MealAnalysis,
    MealType,
    MenuAnalysis,
    MenuItem,
    ProductInput,
)
from health_scoring.domain.restrictions import ComplianceResult
from health_scoring.domain.scoring import HealthScore
from health_scoring.services.compliance import DietaryComplianceChecker
from health_scoring.services.conditions import (
    NO_CONDITIONS_SUMMARY,
    HealthConditionAnalyzer,
)
from health_scoring.services.health_score import HealthScoreCalculator
from health_scoring.services.recommendations import RecommendationComposer

# Score used for dishes without any nutrition data.
UNKNOWN_NUTRITION_SCORE = 50

_logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """Runs the scoring engine identically for every kind of input."""

    calculator: HealthScoreCalculator = field(default_factory=HealthScoreCalculator)
    compliance_checker: DietaryComplianceChecker = field(
        default_factory=DietaryComplianceChecker
    )
    condition_analyzer: HealthConditionAnalyzer = field(
        default_factory=HealthConditionAnalyzer
    )
    composer: RecommendationComposer = field(default_factory=RecommendationComposer)
    debug: bool = False

    def analyze_product(
        self, product: ProductInput, profile: UserProfile
    ) -> DishAnalysis:
        """Analyze a packaged product, honouring its official grade."""
        return self._analyze(
            name=product.name or "Product",
            nutrients=product.nutrients,
            official_grade=product.official_grade,
            category_tags=product.category_tags,
            allergens=product.allergens,
            keyword_text=product.ingredients_text,
            dish_text=None,
            profile=profile,
        )

    def analyze_dish(self, item: MenuItem, profile: UserProfile) -> DishAnalysis:
        """Analyze a dish; the dish name stands in for missing ingredients."""
        dish_text = _dish_text(item)
        return self._analyze(
            name=item.name,
            nutrients=item.nutrients,
            official_grade=None,
            category_tags=item.category_tags,
            allergens=item.allergens,
            keyword_text=item.ingredients_text or dish_text,
            dish_text=dish_text,
            profile=profile,
        )

    def analyze_menu(
        self, items: Sequence[MenuItem], profile: UserProfile
    ) -> MenuAnalysis:
        """Analyze every dish and group them into recommendation buckets."""
        dishes = [self.analyze_dish(item, profile) for item in items]
        buckets = self.composer.bucket(dishes)
        if self.debug:
            _logger.info(
                "Menu analyzed: items=%s best=%s caution=%s avoid=%s",
                len(dishes),
                len(buckets.best),
                len(buckets.caution),
                len(buckets.avoid),
            )
        return MenuAnalysis(
            dishes=dishes,
            buckets=buckets,
            summary=self.composer.summarize(buckets),
        )

    def analyze_meal(  # noqa: PLR0913
        self,
        name: str,
        portions: Iterable[tuple[NutrientProfile, float]],
        profile: UserProfile,
        ingredients_text: str | None = None,
        meal_type: MealType | None = None,
    ) -> MealAnalysis:
        """Analyze a multi-item meal as one weighted per-100 g profile."""
        analysis = self._analyze(
            name=name,
            nutrients=combine_portions(portions),
            official_grade=None,
            category_tags=frozenset(),
            allergens=None,
            keyword_text=ingredients_text,
            dish_text=None,
            profile=profile,
        )
        rating = self.composer.rate_meal(analysis.score)
        return MealAnalysis(
            analysis=analysis,
            meal_type=meal_type,
            rating=rating,
            message=self.composer.meal_message(rating, meal_type),
        )

    def _analyze(  # noqa: PLR0913
        self,
        *,
        name: str,
        nutrients: NutrientProfile | None,
        official_grade: NutriScoreGrade | None,
        category_tags: Iterable[str],
        allergens: Iterable[str] | None,
        keyword_text: str | None,
        dish_text: str | None,
        profile: UserProfile,
    ) -> DishAnalysis:
        health_score: HealthScore | None = None
        score = UNKNOWN_NUTRITION_SCORE
        if nutrients is not None:
            health_score = self.calculator.score(nutrients, official_grade)
            score = health_score.score

        if profile.conditions:
            health = self.condition_analyzer.analyze(
                profile.conditions, nutrients, keyword_text, dish_text
            )
        else:
            health = AnalysisResult(
                warnings=[], overall_severity=None, summary=NO_CONDITIONS_SUMMARY
            )

        if profile.restrictions:
            compliance = self.compliance_checker.check(
                profile.restrictions,
                category_tags,
                allergens,
                keyword_text,
                nutrients,
                dish_text,
            )
        else:
            compliance = ComplianceResult()

        recommendation = self.composer.compose(
            score, health.warnings, compliance.violations
        )
        factors = health_score.factors if health_score else []
        reason = self.composer.rationale(
            recommendation, score, health.warnings, compliance.violations, factors
        )
        if health_score is None:
            reason = f"{reason} Limited nutrition data available."
        if self.debug:
            _logger.info(
                "Analyzed %s: score=%s recommendation=%s warnings=%s violations=%s",
                name,
                score,
                recommendation.value,
                len(health.warnings),
                len(compliance.violations),
            )
        return DishAnalysis(
            name=name,
            recommendation=recommendation,
            reason=reason,
            score=score,
            health_score=health_score,
            health=health,
            compliance=compliance,
            nutrients=nutrients,
            tip=self.composer.tip(
                recommendation, health.warnings, compliance.violations, factors
            ),
        )


def _dish_text(item: MenuItem) -> str:
    parts = [item.name]
    if item.description:
        parts.append(item.description)
    return " ".join(parts)
