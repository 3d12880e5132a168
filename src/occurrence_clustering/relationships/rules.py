"""
Feature assertion rules.

Each rule compares two records and returns the assertion it establishes, or None.
Rules are independent: one firing neither implies nor suppresses another. A rule
whose inputs are missing on either side does not fire. Every rule is symmetric in
its two arguments.

RULES fixes the evaluation order, which is the order assertions appear in a
justification:

    SAME_ACCEPTED_SPECIES, SAME_SPECIMEN, IDENTIFIERS_OVERLAP, SAME_DATE,
    APPROXIMATE_DATE, SAME_COORDINATES, WITHIN_200m, WITHIN_2km, SAME_COUNTRY,
    SAME_RECORDER_NAME
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from occurrence_clustering.dates.normalizer import calendar_date, occurrence_date
from occurrence_clustering.features.base import OccurrenceFeatures
from occurrence_clustering.geo.distance import WITHIN_200M, WITHIN_2KM, located, within_distance
from occurrence_clustering.normalization.identifiers import (
    identifier_keys,
    normalize_id,
    normalize_identifier,
)
from occurrence_clustering.relationships.assertions import FeatureAssertion
from occurrence_clustering.relationships.type_status import UNIQUE_TYPES, parse_type_status

Rule = Callable[[OccurrenceFeatures, OccurrenceFeatures], Optional[FeatureAssertion]]

APPROXIMATE_DATE_DAYS = 1


def _equal_and_present(a, b) -> bool:
    return a is not None and b is not None and a == b


def _same_taxon(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> bool:
    """Taxon keys on both sides, else species keys on both; never one against the other."""
    if o1.taxon_key is not None and o2.taxon_key is not None:
        return o1.taxon_key == o2.taxon_key
    return _equal_and_present(o1.species_key, o2.species_key)


# ---------------------------------------------------------------------------
# Taxonomy / specimen
# ---------------------------------------------------------------------------

def same_accepted_species(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    """Species keys equal; taxon keys stand in when either lacks a species key."""
    if o1.species_key is not None and o2.species_key is not None:
        matched = o1.species_key == o2.species_key
    else:
        matched = _equal_and_present(o1.taxon_key, o2.taxon_key)
    return FeatureAssertion.SAME_ACCEPTED_SPECIES if matched else None


def same_specimen(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    """
    Same taxon and either the same catalog number or a shared name-bearing
    type (holotype, lectotype, ...). A holotype has one specimen, so two
    holotype records of one taxon describe it even when their localities
    disagree.
    """
    if not _same_taxon(o1, o2):
        return None

    if _equal_and_present(normalize_identifier(o1.catalog_number), normalize_identifier(o2.catalog_number)):
        return FeatureAssertion.SAME_SPECIMEN

    shared = parse_type_status(o1.type_status) & parse_type_status(o2.type_status)
    if shared & UNIQUE_TYPES:
        return FeatureAssertion.SAME_SPECIMEN

    return None


def identifiers_overlap(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    """Any of occurrenceID / catalogNumber / recordNumber shared across the two records."""
    keys1 = identifier_keys(o1.occurrence_id, o1.catalog_number, o1.record_number)
    if not keys1:
        return None
    keys2 = identifier_keys(o2.occurrence_id, o2.catalog_number, o2.record_number)
    return FeatureAssertion.IDENTIFIERS_OVERLAP if keys1 & keys2 else None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def same_date(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    """Same real calendar date from year/month/day; impossible dates (30 Feb) are skipped."""
    d1 = calendar_date(o1.year, o1.month, o1.day)
    if d1 is None:
        return None
    if d1 == calendar_date(o2.year, o2.month, o2.day):
        return FeatureAssertion.SAME_DATE
    return None


def approximate_date(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    """
    Dates at most a day apart: a trap set one evening and emptied the next
    morning, or a timestamp shifted across midnight by a timezone. Fires for
    identical dates too.
    """
    d1 = occurrence_date(o1)
    if d1 is None:
        return None
    d2 = occurrence_date(o2)
    if d2 is None:
        return None
    if abs((d1 - d2).days) <= APPROXIMATE_DATE_DAYS:
        return FeatureAssertion.APPROXIMATE_DATE
    return None


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def same_coordinates(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    if not (located(o1) and located(o2)):
        return None
    if _equal_and_present(o1.decimal_latitude, o2.decimal_latitude) and _equal_and_present(
        o1.decimal_longitude, o2.decimal_longitude
    ):
        return FeatureAssertion.SAME_COORDINATES
    return None


def within_200m(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    return FeatureAssertion.WITHIN_200m if within_distance(o1, o2, WITHIN_200M) else None


def within_2km(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    return FeatureAssertion.WITHIN_2km if within_distance(o1, o2, WITHIN_2KM) else None


def same_country(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    c1 = o1.country_code.strip().casefold() if o1.country_code else None
    c2 = o2.country_code.strip().casefold() if o2.country_code else None
    return FeatureAssertion.SAME_COUNTRY if c1 and c1 == c2 else None


# ---------------------------------------------------------------------------
# Provenance
# ---------------------------------------------------------------------------

def same_recorder_name(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[FeatureAssertion]:
    n1 = normalize_id(o1.recorded_by)
    n2 = normalize_id(o2.recorded_by)
    return FeatureAssertion.SAME_RECORDER_NAME if n1 and n1 == n2 else None


RULES: Tuple[Rule, ...] = (
    same_accepted_species,
    same_specimen,
    identifiers_overlap,
    same_date,
    approximate_date,
    same_coordinates,
    within_200m,
    within_2km,
    same_country,
    same_recorder_name,
)
