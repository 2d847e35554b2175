"""Dietary restriction compliance checks."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from health_scoring.domain.nutrients import NutrientProfile
from health_scoring.domain.restrictions import (
    RESTRICTION_MATCHERS,
    ComplianceOutcome,
    ComplianceResult,
    DietaryRestriction,
    RestrictionMatcher,
)

_LANGUAGE_PREFIX = re.compile(r"^[a-z]{2,3}:")
_SEPARATORS = re.compile(r"[\s_]+")
_NEGATION = "non-"


def normalize_tag(tag: str) -> str:
    """Normalize a tag, e.g. ``"en:Gluten Free"`` becomes ``"gluten-free"``."""
    cleaned = _LANGUAGE_PREFIX.sub("", tag.strip().lower())
    return _SEPARATORS.sub("-", cleaned)


@dataclass(frozen=True)
class _Evidence:
    tags: frozenset[str]
    allergens: frozenset[str]
    ingredients: str
    dish: str
    nutrients: NutrientProfile | None


@dataclass
class DietaryComplianceChecker:
    """Matches selected restrictions against tags, allergens and free text."""

    matchers: Mapping[DietaryRestriction, RestrictionMatcher] = field(
        default_factory=lambda: RESTRICTION_MATCHERS
    )

    def check(  # noqa: PLR0913
        self,
        restrictions: Iterable[DietaryRestriction],
        category_tags: Iterable[str],
        allergens: Iterable[str] | None = None,
        ingredient_text: str | None = None,
        nutrients: NutrientProfile | None = None,
        dish_text: str | None = None,
    ) -> ComplianceResult:
        """Evaluate every selected restriction; confirming evidence wins.

        Terms match as case-insensitive substrings of the ingredient text,
        of allergen tags and, for restaurant dishes, of ``dish_text``.
        """
        selected = set(restrictions)
        if not selected:
            return ComplianceResult()
        evidence = _Evidence(
            tags=frozenset(normalize_tag(tag) for tag in category_tags),
            allergens=frozenset(normalize_tag(a) for a in allergens or ()),
            ingredients=ingredient_text.lower() if ingredient_text else "",
            dish=dish_text.lower() if dish_text else "",
            nutrients=nutrients,
        )

        outcomes: dict[DietaryRestriction, ComplianceOutcome] = {}
        for restriction in DietaryRestriction:
            if restriction not in selected:
                continue
            matcher = self.matchers.get(restriction)
            if matcher is None:
                outcomes[restriction] = ComplianceOutcome.INCONCLUSIVE
                continue
            outcomes[restriction] = _evaluate(matcher, evidence)
        return ComplianceResult(outcomes=outcomes)


def _evaluate(matcher: RestrictionMatcher, evidence: _Evidence) -> ComplianceOutcome:
    if matcher.confirms & evidence.tags or _dish_confirms(matcher, evidence.dish):
        return ComplianceOutcome.MATCH
    if matcher.violates & evidence.tags:
        return ComplianceOutcome.VIOLATION
    if any(
        term in allergen for allergen in evidence.allergens for term in matcher.violates
    ):
        return ComplianceOutcome.VIOLATION
    if any(term in evidence.ingredients for term in matcher.violates):
        return ComplianceOutcome.VIOLATION
    dish_terms = matcher.violates | matcher.dish_terms
    if evidence.dish and any(term in evidence.dish for term in dish_terms):
        return ComplianceOutcome.VIOLATION
    limit = matcher.nutrient_limit
    if limit is not None and evidence.nutrients is not None:
        value = float(getattr(evidence.nutrients, limit.attribute))
        if value > limit.violation_above:
            return ComplianceOutcome.VIOLATION
        if value <= limit.compliant_at_most:
            return ComplianceOutcome.MATCH
    return ComplianceOutcome.INCONCLUSIVE


def _dish_confirms(matcher: RestrictionMatcher, dish_text: str) -> bool:
    # "Dairy Free Smoothie" confirms dairy-free; "non-vegan" confirms nothing.
    dish = _SEPARATORS.sub("-", dish_text)
    for term in matcher.confirms:
        start = dish.find(term)
        while start != -1:
            if not dish[:start].endswith(_NEGATION):
                return True
            start = dish.find(term, start + 1)
    return False
