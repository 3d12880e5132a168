"""
occurrence_clustering.normalization package

Text normalization used to build comparison keys:

- identifiers: collector names, catalog/record numbers
"""

from occurrence_clustering.normalization.identifiers import (
    identifier_keys,
    normalize_id,
    normalize_identifier,
)

__all__ = [
    "identifier_keys",
    "normalize_id",
    "normalize_identifier",
]
