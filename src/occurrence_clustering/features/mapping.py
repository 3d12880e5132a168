"""
Dict-backed occurrence features.

Two record shapes arrive from the ingestion pipeline:

- VerbatimOccurrence: the raw import, Darwin Core terms as published. Keys may be
  bare ("catalogNumber"), prefixed ("dwc:catalogNumber") or full term URIs
  ("http://rs.tdwg.org/dwc/terms/catalogNumber"); values are strings.
- InterpretedOccurrence: an interpreted GBIF occurrence (camelCase JSON with
  backbone keys such as speciesKey/taxonKey). Multi-valued fields may be lists.

Both wrap the source mapping without copying it and coerce on access, so a bad
value only ever yields None.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from occurrence_clustering.features.values import safe_float, safe_int, safe_str


def _local_term(key: str) -> str:
    """'http://rs.tdwg.org/dwc/terms/catalogNumber' / 'dwc:catalogNumber' -> 'catalognumber'."""
    name = str(key).strip()
    for sep in ("/", "#", ":"):
        if sep in name:
            name = name.rsplit(sep, 1)[1]
    return name.lower()


class _MappingFeatures:
    """Shared lookup for dict-backed shapes; subclasses define the term names."""

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def _get(self, *names: str) -> Any:
        for name in names:
            value = self._data.get(name)
            if value is not None:
                return value
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, dataset_key={self.dataset_key!r})"


class VerbatimOccurrence(_MappingFeatures):
    """Features of a raw Darwin Core record."""

    def __init__(self, data: Mapping[str, Any]):
        super().__init__(data)
        self._terms: Dict[str, Any] = {}
        for key, value in data.items():
            # first spelling wins when a record repeats a term
            self._terms.setdefault(_local_term(key), value)

    def _get(self, *names: str) -> Any:
        for name in names:
            value = self._terms.get(name.lower())
            if value is not None:
                return value
        return None

    @property
    def id(self) -> Optional[str]:
        return safe_str(self._get("gbifID", "id"))

    @property
    def dataset_key(self) -> Optional[str]:
        return safe_str(self._get("datasetKey", "datasetID"))

    @property
    def occurrence_id(self) -> Optional[str]:
        return safe_str(self._get("occurrenceID"))

    @property
    def record_number(self) -> Optional[str]:
        return safe_str(self._get("recordNumber"))

    @property
    def catalog_number(self) -> Optional[str]:
        return safe_str(self._get("catalogNumber"))

    @property
    def species_key(self) -> Optional[int]:
        return safe_int(self._get("speciesKey"))

    @property
    def taxon_key(self) -> Optional[int]:
        return safe_int(self._get("taxonKey"))

    @property
    def decimal_latitude(self) -> Optional[float]:
        return safe_float(self._get("decimalLatitude"))

    @property
    def decimal_longitude(self) -> Optional[float]:
        return safe_float(self._get("decimalLongitude"))

    @property
    def year(self) -> Optional[int]:
        return safe_int(self._get("year"))

    @property
    def month(self) -> Optional[int]:
        return safe_int(self._get("month"))

    @property
    def day(self) -> Optional[int]:
        return safe_int(self._get("day"))

    @property
    def event_date(self) -> Optional[str]:
        return safe_str(self._get("eventDate"))

    @property
    def country_code(self) -> Optional[str]:
        return safe_str(self._get("countryCode"))

    @property
    def recorded_by(self) -> Optional[str]:
        return safe_str(self._get("recordedBy"))

    @property
    def type_status(self) -> Optional[str]:
        return safe_str(self._get("typeStatus"))


class InterpretedOccurrence(_MappingFeatures):
    """Features of an interpreted GBIF occurrence record."""

    @property
    def id(self) -> Optional[str]:
        return safe_str(self._get("key", "gbifID", "id"))

    @property
    def dataset_key(self) -> Optional[str]:
        return safe_str(self._get("datasetKey"))

    @property
    def occurrence_id(self) -> Optional[str]:
        return safe_str(self._get("occurrenceID"))

    @property
    def record_number(self) -> Optional[str]:
        return safe_str(self._get("recordNumber"))

    @property
    def catalog_number(self) -> Optional[str]:
        return safe_str(self._get("catalogNumber"))

    @property
    def species_key(self) -> Optional[int]:
        return safe_int(self._get("speciesKey"))

    @property
    def taxon_key(self) -> Optional[int]:
        return safe_int(self._get("taxonKey"))

    @property
    def decimal_latitude(self) -> Optional[float]:
        return safe_float(self._get("decimalLatitude"))

    @property
    def decimal_longitude(self) -> Optional[float]:
        return safe_float(self._get("decimalLongitude"))

    @property
    def year(self) -> Optional[int]:
        return safe_int(self._get("year"))

    @property
    def month(self) -> Optional[int]:
        return safe_int(self._get("month"))

    @property
    def day(self) -> Optional[int]:
        return safe_int(self._get("day"))

    @property
    def event_date(self) -> Optional[str]:
        return safe_str(self._get("eventDate"))

    @property
    def country_code(self) -> Optional[str]:
        return safe_str(self._get("countryCode"))

    @property
    def recorded_by(self) -> Optional[str]:
        return safe_str(self._get("recordedBy"))

    @property
    def type_status(self) -> Optional[str]:
        return safe_str(self._get("typeStatus"))
