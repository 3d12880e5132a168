# tests/test_pipeline.py

from __future__ import annotations

import pytest

from occurrence_clustering.config import ClusteringConfig
from occurrence_clustering.core.context import ComparisonContext
from occurrence_clustering.core.exceptions import PipelineError
from occurrence_clustering.core.pipeline import ComparisonPipeline, PairResult
from occurrence_clustering.features import OccurrenceRecord
from occurrence_clustering.logging import get_logger
from occurrence_clustering.relationships.policy import policy_from_config


A = OccurrenceRecord(id="a", species_key=1, country_code="DK", year=2004, month=8, day=1)
B = OccurrenceRecord(id="b", species_key=1, country_code="DK", year=2004, month=8, day=2)
C = OccurrenceRecord(id="c", species_key=2, country_code="NO")
D = OccurrenceRecord(id="d")


def _context(policy=None):
    return ComparisonContext(
        config=ClusteringConfig({}),
        logger=get_logger("tests.pipeline"),
        policy=policy,
        debug=True,
    )


def test_run_yields_one_result_per_pair_with_stats():
    ctx = _context()
    results = list(ComparisonPipeline(ctx).run([(A, B), (A, C), (C, D)]))

    assert [r.to_dict()["b"] for r in results] == ["b", "c", "d"]
    assert all(r.linked is None for r in results)

    assert ctx.stats["pairs"] == 3
    assert ctx.stats["with_assertions"] == 1
    assert ctx.stats["linked"] == 0
    assert ctx.stats["assertions"]["SAME_ACCEPTED_SPECIES"] == 1
    assert ctx.stats["assertions"]["APPROXIMATE_DATE"] == 1
    assert ctx.stats["assertions"]["SAME_DATE"] == 0
    assert ctx.errors == []


def test_pair_result_to_dict():
    ctx = _context()
    (result,) = ComparisonPipeline(ctx).run([(A, B)])

    assert isinstance(result, PairResult)
    assert result.to_dict() == {
        "a": "a",
        "b": "b",
        "assertions": ["SAME_ACCEPTED_SPECIES", "APPROXIMATE_DATE", "SAME_COUNTRY"],
        "linked": None,
    }


def test_policy_decides_linking():
    policy = policy_from_config(
        {"clauses": [{"require_all": ["SAME_ACCEPTED_SPECIES", "APPROXIMATE_DATE"]}]}
    )
    ctx = _context(policy)

    results = list(ComparisonPipeline(ctx).run([(A, B), (A, C)]))

    assert [r.linked for r in results] == [True, False]
    assert ctx.stats["linked"] == 1


def test_stats_reset_between_runs():
    ctx = _context()
    pipeline = ComparisonPipeline(ctx)

    list(pipeline.run([(A, B), (A, B)]))
    list(pipeline.run([(A, C)]))

    assert ctx.stats["pairs"] == 1
    assert ctx.stats["with_assertions"] == 0


def test_run_is_lazy():
    ctx = _context()
    seen = []

    def pairs():
        for pair in [(A, B), (A, C)]:
            seen.append(pair)
            yield pair

    results = ComparisonPipeline(ctx).run(pairs())
    assert seen == []
    next(results)
    assert len(seen) == 1


def test_unexpected_failure_becomes_pipeline_error():
    ctx = _context()

    with pytest.raises(PipelineError):
        list(ComparisonPipeline(ctx).run([(A, B), (object(), object())]))

    assert ctx.stats["pairs"] == 1
    assert len(ctx.errors) == 1
