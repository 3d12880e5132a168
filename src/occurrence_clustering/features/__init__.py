"""
Occurrence feature accessors.

``OccurrenceFeatures`` is the protocol the relationship engine reads; the record
shapes below implement it independently of each other.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from occurrence_clustering.features.base import OccurrenceFeatures
from occurrence_clustering.features.mapping import InterpretedOccurrence, VerbatimOccurrence
from occurrence_clustering.features.records import OccurrenceRecord


class RecordShape(str, Enum):
    RECORD = "record"
    VERBATIM = "verbatim"
    INTERPRETED = "interpreted"


def features_from_dict(data: Mapping[str, Any], shape: RecordShape = RecordShape.INTERPRETED) -> OccurrenceFeatures:
    """Wrap a decoded JSON object in the accessor matching its shape."""
    shape = RecordShape(shape)
    if shape is RecordShape.RECORD:
        return OccurrenceRecord.from_dict(dict(data))
    if shape is RecordShape.VERBATIM:
        return VerbatimOccurrence(data)
    return InterpretedOccurrence(data)


__all__ = [
    "InterpretedOccurrence",
    "OccurrenceFeatures",
    "OccurrenceRecord",
    "RecordShape",
    "VerbatimOccurrence",
    "features_from_dict",
]
