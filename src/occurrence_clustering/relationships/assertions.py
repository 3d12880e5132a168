"""
Feature assertions and the immutable result of comparing two records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Tuple, TypeVar

from occurrence_clustering.features.base import OccurrenceFeatures

T = TypeVar("T", bound=OccurrenceFeatures)


class FeatureAssertion(Enum):
    """
    Facts a pairwise comparison may establish. Pure tags: firing is binary.

    Declaration order is the order the rule set evaluates them in.
    """

    SAME_ACCEPTED_SPECIES = "SAME_ACCEPTED_SPECIES"
    SAME_SPECIMEN = "SAME_SPECIMEN"
    IDENTIFIERS_OVERLAP = "IDENTIFIERS_OVERLAP"
    SAME_DATE = "SAME_DATE"
    APPROXIMATE_DATE = "APPROXIMATE_DATE"
    SAME_COORDINATES = "SAME_COORDINATES"
    WITHIN_200m = "WITHIN_200m"
    WITHIN_2km = "WITHIN_2km"
    SAME_COUNTRY = "SAME_COUNTRY"
    SAME_RECORDER_NAME = "SAME_RECORDER_NAME"


@dataclass(frozen=True)
class RelationshipAssertion(Generic[T]):
    """
    Outcome of comparing exactly two records.

    Holds the two compared records by reference and the assertions that fired,
    in rule order. Built once by ``generate``; read-only afterwards.
    """

    o1: T
    o2: T
    justification: Tuple[FeatureAssertion, ...] = ()

    def justification_contains(self, kind: FeatureAssertion) -> bool:
        return kind in self.justification

    def justification_contains_all(self, *kinds: FeatureAssertion) -> bool:
        return all(k in self.justification for k in kinds)

    def justification_contains_any(self, *kinds: FeatureAssertion) -> bool:
        return any(k in self.justification for k in kinds)

    def count(self, *kinds: FeatureAssertion) -> int:
        """How many of the given kinds fired."""
        return sum(1 for k in set(kinds) if k in self.justification)

    def assertion_names(self) -> List[str]:
        return [a.value for a in self.justification]
