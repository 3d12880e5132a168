from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from occurrence_clustering.features.values import safe_float, safe_int, safe_str

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# camelCase spellings that do not snake-case mechanically
_ALIASES = {
    "occurrenceID": "occurrence_id",
    "key": "id",
}


def _snake(name: str) -> str:
    return _ALIASES.get(name) or _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class OccurrenceRecord:
    """
    Plain, immutable occurrence features.

    Used for synthetic fixtures and for callers that already hold the values;
    every field defaults to absent.
    """

    id: Optional[str] = None
    dataset_key: Optional[str] = None
    occurrence_id: Optional[str] = None
    record_number: Optional[str] = None
    catalog_number: Optional[str] = None
    species_key: Optional[int] = None
    taxon_key: Optional[int] = None
    decimal_latitude: Optional[float] = None
    decimal_longitude: Optional[float] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    event_date: Optional[str] = None
    country_code: Optional[str] = None
    recorded_by: Optional[str] = None
    type_status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OccurrenceRecord":
        """Build from snake_case or camelCase keys; unknown keys are ignored."""
        kinds = {
            "species_key": safe_int,
            "taxon_key": safe_int,
            "year": safe_int,
            "month": safe_int,
            "day": safe_int,
            "decimal_latitude": safe_float,
            "decimal_longitude": safe_float,
        }
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            name = _snake(str(key))
            if name not in known:
                continue
            values[name] = kinds.get(name, safe_str)(raw)
        return cls(**values)
