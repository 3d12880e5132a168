"""
Pluggable linking policies.

The engine stops at a justified set of assertions. Whether those assertions are
enough to link two records is decided here, from clauses supplied by the caller
(normally the ``policy`` section of config/occurrence_clustering.yml). No clause
is built in.

    policy:
      clauses:
        - require_all: [SAME_SPECIMEN]
        - require_all: [SAME_ACCEPTED_SPECIES]
          at_least:
            count: 2
            of: [WITHIN_200m, APPROXIMATE_DATE, SAME_COUNTRY]

A policy links a pair when any clause matches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Protocol, Tuple

from occurrence_clustering.config import get_config
from occurrence_clustering.core.exceptions import PolicyError
from occurrence_clustering.relationships.assertions import FeatureAssertion, RelationshipAssertion


class RelationshipPolicy(Protocol):
    def links(self, assertion: RelationshipAssertion) -> bool: ...


@dataclass(frozen=True)
class Clause:
    require_all: FrozenSet[FeatureAssertion] = frozenset()
    at_least: int = 0
    of: FrozenSet[FeatureAssertion] = frozenset()

    def matches(self, assertion: RelationshipAssertion) -> bool:
        if not assertion.justification_contains_all(*self.require_all):
            return False
        if self.at_least and assertion.count(*self.of) < self.at_least:
            return False
        return True


@dataclass(frozen=True)
class AssertionPolicy:
    clauses: Tuple[Clause, ...] = field(default_factory=tuple)

    def links(self, assertion: RelationshipAssertion) -> bool:
        return any(clause.matches(assertion) for clause in self.clauses)

    def matching_clauses(self, assertion: RelationshipAssertion) -> List[int]:
        """Indexes of the clauses the pair satisfies (for reporting)."""
        return [i for i, clause in enumerate(self.clauses) if clause.matches(assertion)]


# ---------------------------------------------------------------------------
# Building policies from configuration
# ---------------------------------------------------------------------------

def _assertions(names: Any, where: str) -> FrozenSet[FeatureAssertion]:
    if names is None:
        return frozenset()
    if isinstance(names, str) or not isinstance(names, Iterable):
        raise PolicyError(f"{where} must be a list of assertion names, got {names!r}")

    kinds = set()
    for name in names:
        try:
            kinds.add(FeatureAssertion(str(name)))
        except ValueError:
            raise PolicyError(f"Unknown assertion {name!r} in {where}") from None
    return frozenset(kinds)


def _clause_from_mapping(raw: Any, index: int) -> Clause:
    where = f"policy.clauses[{index}]"
    if not isinstance(raw, Mapping):
        raise PolicyError(f"{where} must be a mapping, got {raw!r}")

    require_all = _assertions(raw.get("require_all"), f"{where}.require_all")

    at_least = 0
    of: FrozenSet[FeatureAssertion] = frozenset()
    at_least_cfg = raw.get("at_least")
    if at_least_cfg is not None:
        if not isinstance(at_least_cfg, Mapping):
            raise PolicyError(f"{where}.at_least must be a mapping with 'count' and 'of'")
        count = at_least_cfg.get("count")
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise PolicyError(f"{where}.at_least.count must be a positive integer, got {count!r}")
        of = _assertions(at_least_cfg.get("of"), f"{where}.at_least.of")
        if count > len(of):
            raise PolicyError(f"{where}.at_least.count={count} exceeds the {len(of)} assertions listed")
        at_least = count

    if not require_all and not at_least:
        raise PolicyError(f"{where} has no conditions")

    return Clause(require_all=require_all, at_least=at_least, of=of)


def policy_from_config(section: Optional[Mapping[str, Any]]) -> AssertionPolicy:
    """Build a policy from a ``policy`` config mapping."""
    if not section:
        return AssertionPolicy()
    clauses_cfg = section.get("clauses") or []
    if not isinstance(clauses_cfg, list):
        raise PolicyError("policy.clauses must be a list")
    return AssertionPolicy(
        clauses=tuple(_clause_from_mapping(raw, i) for i, raw in enumerate(clauses_cfg))
    )


def load_policy() -> Optional[AssertionPolicy]:
    """The configured policy, or None when the config defines no clauses."""
    policy = policy_from_config(get_config().policy)
    return policy if policy.clauses else None
