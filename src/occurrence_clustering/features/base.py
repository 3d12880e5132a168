"""
The comparable attributes of one occurrence record.

Any object exposing these attributes can be compared, whatever backs it: a raw
Darwin Core import, an interpreted GBIF record or a test fixture. No base class
is required; only the attribute names matter.

Invariant: every attribute is total. Missing or unparseable data is ``None``,
never an exception.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class OccurrenceFeatures(Protocol):

    # identity
    @property
    def id(self) -> Optional[str]: ...

    @property
    def dataset_key(self) -> Optional[str]: ...

    @property
    def occurrence_id(self) -> Optional[str]: ...

    @property
    def record_number(self) -> Optional[str]: ...

    @property
    def catalog_number(self) -> Optional[str]: ...

    # taxonomy
    @property
    def species_key(self) -> Optional[int]: ...

    @property
    def taxon_key(self) -> Optional[int]: ...

    # space / time
    @property
    def decimal_latitude(self) -> Optional[float]: ...

    @property
    def decimal_longitude(self) -> Optional[float]: ...

    @property
    def year(self) -> Optional[int]: ...

    @property
    def month(self) -> Optional[int]: ...

    @property
    def day(self) -> Optional[int]: ...

    @property
    def event_date(self) -> Optional[str]: ...

    @property
    def country_code(self) -> Optional[str]: ...

    # provenance / specimen
    @property
    def recorded_by(self) -> Optional[str]: ...

    @property
    def type_status(self) -> Optional[str]: ...
