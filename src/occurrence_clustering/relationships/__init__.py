"""
Occurrence relationship engine.

Decides, without shared identifiers, which facts two occurrence records from
different datasets have in common, and records the assertions that fired.
"""

from occurrence_clustering.relationships.assertions import FeatureAssertion, RelationshipAssertion
from occurrence_clustering.relationships.generator import generate, generate_all
from occurrence_clustering.relationships.rules import RULES

__all__ = [
    "FeatureAssertion",
    "RULES",
    "RelationshipAssertion",
    "generate",
    "generate_all",
]
