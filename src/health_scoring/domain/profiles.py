"""User profile snapshots."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from health_scoring.domain.conditions import HealthCondition
from health_scoring.domain.restrictions import DietaryRestriction


@dataclass(frozen=True)
class UserProfile:
    """Immutable snapshot of the user's selected conditions and restrictions."""

    conditions: frozenset[HealthCondition] = field(default_factory=frozenset)
    restrictions: frozenset[DietaryRestriction] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        conditions: Iterable[HealthCondition] = (),
        restrictions: Iterable[DietaryRestriction] = (),
    ) -> "UserProfile":
        """Snapshot any iterables of conditions and restrictions."""
        return cls(
            conditions=frozenset(conditions), restrictions=frozenset(restrictions)
        )
