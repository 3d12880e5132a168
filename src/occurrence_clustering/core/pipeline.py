from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from occurrence_clustering.core.context import ComparisonContext
from occurrence_clustering.core.exceptions import ClusteringError, PipelineError
from occurrence_clustering.features.base import OccurrenceFeatures
from occurrence_clustering.relationships.assertions import RelationshipAssertion
from occurrence_clustering.relationships.generator import generate


@dataclass(frozen=True)
class PairResult:
    assertion: RelationshipAssertion
    linked: Optional[bool]

    def to_dict(self) -> dict:
        return {
            "a": self.assertion.o1.id,
            "b": self.assertion.o2.id,
            "assertions": self.assertion.assertion_names(),
            "linked": self.linked,
        }


class ComparisonPipeline:
    """
    Runs the relationship engine over a stream of candidate pairs.
    No comparison logic lives here.
    """

    def __init__(self, context: ComparisonContext):
        self.ctx = context
        self.log = context.logger

    def _reset_stats(self) -> Counter:
        counts: Counter = Counter()
        self.ctx.stats = {
            "pairs": 0,
            "with_assertions": 0,
            "linked": 0,
            "assertions": counts,
        }
        return counts

    def run(self, pairs: Iterable[Tuple[OccurrenceFeatures, OccurrenceFeatures]]) -> Iterator[PairResult]:
        self.log.info("Comparison pipeline starting (policy=%s)", "yes" if self.ctx.policy else "none")
        counts = self._reset_stats()
        stats = self.ctx.stats

        try:
            for o1, o2 in pairs:
                assertion = generate(o1, o2)

                linked = None
                if self.ctx.policy is not None:
                    linked = bool(self.ctx.policy.links(assertion))

                stats["pairs"] += 1
                if assertion.justification:
                    stats["with_assertions"] += 1
                if linked:
                    stats["linked"] += 1
                counts.update(a.value for a in assertion.justification)

                if self.ctx.debug:
                    self.log.debug("%s ~ %s: %s", o1.id, o2.id, assertion.assertion_names())

                yield PairResult(assertion=assertion, linked=linked)

        except ClusteringError:
            raise
        except Exception as exc:
            self.log.exception("Comparison pipeline failed after %d pairs", stats["pairs"])
            self.ctx.errors.append(str(exc))
            raise PipelineError(str(exc)) from exc

        self.log.info(
            "Comparison pipeline complete: pairs=%d with_assertions=%d linked=%d",
            stats["pairs"],
            stats["with_assertions"],
            stats["linked"],
        )
