"""Domain models for numeric health scores."""

from dataclasses import dataclass
from enum import Enum

from health_scoring.domain.nutrients import NutriScoreGrade


class GradeSource(Enum):
    """Where the grade behind a score came from."""

    OFFICIAL = "official"
    COMPUTED = "computed"


@dataclass(frozen=True)
class Factor:
    """A nutrient that moved the score away from its base band."""

    name: str
    description: str
    is_positive: bool
    impact: float


@dataclass(frozen=True)
class HealthScore:
    """0-100 score with the factors that explain it."""

    score: int
    factors: list[Factor]
    grade: NutriScoreGrade
    grade_source: GradeSource
