"""Health condition analysis of nutrient profiles and ingredient lists."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from health_scoring.domain.conditions import (
    CONDITION_RULES,
    AnalysisResult,
    ConditionRule,
    HealthCondition,
    HealthWarning,
    KeywordRule,
    NutrientThreshold,
    Severity,
)
from health_scoring.domain.nutrients import NutrientProfile

NO_CONDITIONS_SUMMARY = "No health conditions configured."
_SUMMARIES = {
    None: "This product appears compatible with your health conditions.",
    Severity.HIGH: (
        "This product may significantly impact your health. "
        "Review the warnings below."
    ),
    Severity.MODERATE: (
        "This product has some concerns for your health conditions. "
        "Consume with caution."
    ),
    Severity.LOW: "This product is generally okay but has some points to consider.",
}


@dataclass
class HealthConditionAnalyzer:
    """Evaluates a profile against the user's health conditions."""

    rules: Mapping[HealthCondition, ConditionRule] = field(
        default_factory=lambda: CONDITION_RULES
    )

    def analyze(
        self,
        conditions: Iterable[HealthCondition],
        profile: NutrientProfile | None,
        ingredient_text: str | None = None,
        dish_text: str | None = None,
    ) -> AnalysisResult:
        """Return severity-ranked warnings for the selected conditions.

        ``profile`` may be None when only ingredient text is known; nutrient
        thresholds are then skipped and only keyword rules apply. Keywords
        match as case-insensitive substrings.
        """
        selected = set(conditions)
        if not selected:
            return AnalysisResult(
                warnings=[], overall_severity=None, summary=NO_CONDITIONS_SUMMARY
            )
        ingredients = ingredient_text.lower() if ingredient_text else ""
        dish = dish_text.lower() if dish_text else ""
        warnings: list[HealthWarning] = []
        for condition in HealthCondition:
            if condition not in selected or condition not in self.rules:
                continue
            warnings.extend(
                _evaluate(condition, self.rules[condition], profile, ingredients, dish)
            )
        warnings.sort(key=lambda warning: warning.severity, reverse=True)
        overall = max((w.severity for w in warnings), default=None)
        return AnalysisResult(
            warnings=warnings,
            overall_severity=overall,
            summary=_SUMMARIES[overall],
        )


def _evaluate(
    condition: HealthCondition,
    rule: ConditionRule,
    profile: NutrientProfile | None,
    ingredients: str,
    dish: str,
) -> list[HealthWarning]:
    warnings: list[HealthWarning] = []
    flagged: set[str] = set()
    keyword_hit = False
    if profile is not None:
        for threshold in rule.thresholds:
            warning = _check_threshold(condition, threshold, profile)
            if warning is not None:
                warnings.append(warning)
                flagged.add(threshold.attribute)
    if ingredients:
        for keyword_rule in rule.keywords:
            if keyword_rule.covers in flagged:
                continue
            warning = _check_keywords(condition, keyword_rule, ingredients)
            if warning is not None:
                warnings.append(warning)
                keyword_hit = True
    if dish and not keyword_hit:
        for keyword_rule in rule.dish_keywords:
            warning = _check_keywords(condition, keyword_rule, dish)
            if warning is not None:
                warnings.append(warning)
    return warnings


def _check_threshold(
    condition: HealthCondition, threshold: NutrientThreshold, profile: NutrientProfile
) -> HealthWarning | None:
    value = float(getattr(profile, threshold.attribute))
    crossed = None
    for limit, tier in threshold.tiers:
        if value > limit:
            crossed = tier
    if crossed is None:
        return None
    return HealthWarning(
        condition=condition,
        severity=crossed.severity,
        title=crossed.title,
        explanation=crossed.explanation,
        observed_value=round(value, 1),
        unit=threshold.unit,
    )


def _check_keywords(
    condition: HealthCondition, rule: KeywordRule, ingredients: str
) -> HealthWarning | None:
    for keywords, tier in rule.tiers:
        if any(keyword in ingredients for keyword in keywords):
            return HealthWarning(
                condition=condition,
                severity=tier.severity,
                title=tier.title,
                explanation=tier.explanation,
            )
    return None
