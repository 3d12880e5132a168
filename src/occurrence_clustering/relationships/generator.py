"""
Relationship generator.

Responsibilities:
- Run the full rule set over one pair of records, in fixed order.
- Package the fired assertions into an immutable RelationshipAssertion.

Non-Responsibilities:
- No candidate selection (which pairs get compared).
- No linking decision (see relationships.policy).
- No I/O, no shared state: safe to call from any number of threads/workers.

Invariant:
generate() never raises on data, and generate(a, b) and generate(b, a) fire the
same set of assertions.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Tuple

from occurrence_clustering.features.base import OccurrenceFeatures
from occurrence_clustering.relationships.assertions import RelationshipAssertion, T
from occurrence_clustering.relationships.rules import RULES, Rule


def generate(o1: T, o2: T, rules: Sequence[Rule] = RULES) -> RelationshipAssertion[T]:
    """Compare two records and return every assertion that holds, in rule order."""
    fired = []
    for rule in rules:
        assertion = rule(o1, o2)
        if assertion is not None:
            fired.append(assertion)
    return RelationshipAssertion(o1=o1, o2=o2, justification=tuple(fired))


def generate_all(
    pairs: Iterable[Tuple[OccurrenceFeatures, OccurrenceFeatures]],
) -> Iterator[RelationshipAssertion]:
    """Lazily compare each candidate pair."""
    for o1, o2 in pairs:
        yield generate(o1, o2)
