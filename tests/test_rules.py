# tests/test_rules.py

from __future__ import annotations

from occurrence_clustering.features import OccurrenceRecord as R
from occurrence_clustering.relationships import rules
from occurrence_clustering.relationships.assertions import FeatureAssertion as FA


# ---------------------------------------------------------------------------
# SAME_ACCEPTED_SPECIES
# ---------------------------------------------------------------------------

def test_same_species_key():
    assert rules.same_accepted_species(R(species_key=1), R(species_key=1)) is FA.SAME_ACCEPTED_SPECIES


def test_different_species_key_wins_over_taxon_key():
    a = R(species_key=1, taxon_key=10)
    b = R(species_key=2, taxon_key=10)
    assert rules.same_accepted_species(a, b) is None


def test_taxon_key_used_when_species_key_missing():
    a = R(species_key=1, taxon_key=10)
    b = R(taxon_key=10)
    assert rules.same_accepted_species(a, b) is FA.SAME_ACCEPTED_SPECIES
    assert rules.same_accepted_species(b, a) is FA.SAME_ACCEPTED_SPECIES


def test_species_rule_skipped_without_keys():
    assert rules.same_accepted_species(R(), R()) is None
    assert rules.same_accepted_species(R(species_key=1), R()) is None


# ---------------------------------------------------------------------------
# SAME_SPECIMEN / IDENTIFIERS_OVERLAP
# ---------------------------------------------------------------------------

def test_same_specimen_by_normalized_catalog_number():
    a = R(taxon_key=5, catalog_number="TIM 1")
    b = R(taxon_key=5, catalog_number="tim-1")
    assert rules.same_specimen(a, b) is FA.SAME_SPECIMEN


def test_catalog_numbers_differing_only_in_digits_do_not_match():
    a = R(taxon_key=5, catalog_number="TIM1")
    b = R(taxon_key=5, catalog_number="TIM2")
    assert rules.same_specimen(a, b) is None


def test_same_catalog_number_different_taxon():
    a = R(taxon_key=5, catalog_number="TIM1")
    b = R(taxon_key=6, catalog_number="TIM1")
    assert rules.same_specimen(a, b) is None


def test_same_specimen_requires_taxon():
    assert rules.same_specimen(R(catalog_number="TIM1"), R(catalog_number="TIM1")) is None


def test_taxon_key_is_not_compared_with_species_key():
    a = R(taxon_key=5, catalog_number="TIM1")
    b = R(species_key=5, catalog_number="TIM1")
    assert rules.same_specimen(a, b) is None
    assert rules.same_specimen(b, a) is None


def test_same_specimen_falls_back_to_species_keys():
    a = R(species_key=5, taxon_key=7, catalog_number="TIM1")
    b = R(species_key=5, catalog_number="TIM1")
    assert rules.same_specimen(a, b) is FA.SAME_SPECIMEN


def test_shared_holotype_is_same_specimen():
    a = R(taxon_key=3350984, type_status="HoloType", country_code="DK")
    b = R(taxon_key=3350984, type_status="holotype", country_code="NO")
    assert rules.same_specimen(a, b) is FA.SAME_SPECIMEN


def test_shared_paratype_is_not_same_specimen():
    a = R(taxon_key=1, type_status="Paratype")
    b = R(taxon_key=1, type_status="Paratype")
    assert rules.same_specimen(a, b) is None


def test_different_unique_types_are_not_same_specimen():
    a = R(taxon_key=1, type_status="Holotype")
    b = R(taxon_key=1, type_status="Lectotype")
    assert rules.same_specimen(a, b) is None


def test_unrecognised_type_status_does_not_fail():
    a = R(taxon_key=1, type_status="definitely not a type")
    b = R(taxon_key=1, type_status="definitely not a type")
    assert rules.same_specimen(a, b) is None


def test_identifiers_overlap_across_fields():
    a = R(record_number="TEB 12-16", catalog_number="304835")
    b = R(catalog_number="O-DFL-6644/2-D", record_number="teb12/16")
    assert rules.identifiers_overlap(a, b) is FA.IDENTIFIERS_OVERLAP


def test_identifiers_overlap_ignores_placeholders():
    a = R(catalog_number="unknown", record_number="s.n.")
    b = R(catalog_number="UNKNOWN", record_number="SN")
    assert rules.identifiers_overlap(a, b) is None


def test_identifiers_overlap_no_shared_key():
    a = R(occurrence_id="1", catalog_number="TIM1")
    b = R(occurrence_id="2", catalog_number="TIM2")
    assert rules.identifiers_overlap(a, b) is None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def test_same_date():
    a = R(year=2007, month=5, day=26)
    assert rules.same_date(a, R(year=2007, month=5, day=26)) is FA.SAME_DATE


def test_same_date_needs_all_parts():
    assert rules.same_date(R(year=2007, month=5), R(year=2007, month=5)) is None


def test_same_date_skips_impossible_calendar_date():
    a = R(year=2015, month=2, day=30)
    assert rules.same_date(a, R(year=2015, month=2, day=30)) is None
    assert rules.approximate_date(a, R(year=2015, month=2, day=30)) is None


def test_same_date_with_overflowing_year_does_not_fail():
    a = R(year=10**30, month=1, day=1)
    assert rules.same_date(a, a) is None
    assert rules.approximate_date(a, R(year=2000, month=1, day=1)) is None


def test_approximate_date_one_day_apart():
    a = R(year=2004, month=8, day=1)
    b = R(year=2004, month=8, day=2)
    assert rules.approximate_date(a, b) is FA.APPROXIMATE_DATE
    assert rules.same_date(a, b) is None


def test_approximate_date_across_month_end():
    a = R(year=2004, month=7, day=31)
    b = R(year=2004, month=8, day=1)
    assert rules.approximate_date(a, b) is FA.APPROXIMATE_DATE


def test_approximate_date_two_days_apart():
    a = R(year=2004, month=8, day=1)
    b = R(year=2004, month=8, day=3)
    assert rules.approximate_date(a, b) is None


def test_approximate_date_co_fires_with_same_date():
    a = R(year=2016, month=6, day=11)
    assert rules.approximate_date(a, R(year=2016, month=6, day=11)) is FA.APPROXIMATE_DATE


def test_approximate_date_from_event_timestamp():
    a = R(event_date="2016-06-11T23:30:00+02:00")
    b = R(year=2016, month=6, day=12)
    assert rules.approximate_date(a, b) is FA.APPROXIMATE_DATE


def test_approximate_date_skipped_for_month_precision():
    assert rules.approximate_date(R(year=2016, month=6), R(year=2016, month=6)) is None


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def test_same_coordinates():
    a = R(decimal_latitude=44.0, decimal_longitude=44.0)
    assert rules.same_coordinates(a, R(decimal_latitude=44.0, decimal_longitude=44.0)) is FA.SAME_COORDINATES
    assert rules.same_coordinates(a, R(decimal_latitude=44.0, decimal_longitude=44.0001)) is None


def test_same_coordinates_ignores_out_of_range_values():
    bad = R(decimal_latitude=91.0, decimal_longitude=10.0)
    assert rules.same_coordinates(bad, bad) is None


def test_within_200m_and_2km():
    a = R(decimal_latitude=55.737, decimal_longitude=12.538)
    near = R(decimal_latitude=55.736932, decimal_longitude=12.538104)
    km_away = R(decimal_latitude=55.746, decimal_longitude=12.538)

    assert rules.within_200m(a, near) is FA.WITHIN_200m
    assert rules.within_2km(a, near) is FA.WITHIN_2km
    assert rules.within_200m(a, km_away) is None
    assert rules.within_2km(a, km_away) is FA.WITHIN_2km


def test_within_200m_boundary_is_inclusive(monkeypatch):
    import occurrence_clustering.geo.distance as distance

    a = R(decimal_latitude=1.0, decimal_longitude=1.0)
    b = R(decimal_latitude=1.0, decimal_longitude=1.0)

    monkeypatch.setattr(distance, "haversine_distance", lambda *args: 200.0)
    assert rules.within_200m(a, b) is FA.WITHIN_200m

    monkeypatch.setattr(distance, "haversine_distance", lambda *args: 200.01)
    assert rules.within_200m(a, b) is None


def test_within_200m_skipped_without_coordinates():
    assert rules.within_200m(R(decimal_latitude=1.0), R(decimal_latitude=1.0)) is None


def test_same_country_case_insensitive():
    assert rules.same_country(R(country_code="dk"), R(country_code=" DK")) is FA.SAME_COUNTRY
    assert rules.same_country(R(country_code="DK"), R(country_code="NO")) is None
    assert rules.same_country(R(country_code=""), R(country_code="")) is None


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------

def test_same_recorder_name_after_normalization():
    a = R(recorded_by="D. Hobern")
    b = R(recorded_by="d hobern")
    assert rules.same_recorder_name(a, b) is FA.SAME_RECORDER_NAME


def test_reordered_recorder_name_does_not_match():
    a = R(recorded_by="Donald Hobern")
    b = R(recorded_by="Hobern, Donald")
    assert rules.same_recorder_name(a, b) is None


def test_recorder_without_letters_never_matches():
    assert rules.same_recorder_name(R(recorded_by="123"), R(recorded_by="123")) is None
    assert rules.same_recorder_name(R(), R()) is None


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------

def test_rule_order_matches_assertion_declaration_order():
    everything = R(
        species_key=1,
        taxon_key=1,
        catalog_number="TIM1",
        year=1978,
        month=12,
        day=21,
        decimal_latitude=44.0,
        decimal_longitude=44.0,
        country_code="DK",
        recorded_by="Tim Robertson",
    )
    fired = [rule(everything, everything) for rule in rules.RULES]
    assert fired == list(FA)
