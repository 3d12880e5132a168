# src/occurrence_clustering/geo/distance.py

from __future__ import annotations

import math
from typing import Optional

from occurrence_clustering.features.base import OccurrenceFeatures

# Mean Earth radius (IUGG), metres
EARTH_RADIUS_M = 6_371_008.8

WITHIN_200M = 200.0
WITHIN_2KM = 2_000.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in metres between two decimal-degree coordinates."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    h = (
        math.sin(d_phi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    )
    # rounding can push h a hair past 1 for antipodal points
    h = min(1.0, h)
    return 2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(h))


def _valid_coordinate(lat: Optional[float], lon: Optional[float]) -> bool:
    if lat is None or lon is None:
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def located(o: OccurrenceFeatures) -> bool:
    """True when the record carries an in-range latitude/longitude pair."""
    return _valid_coordinate(o.decimal_latitude, o.decimal_longitude)


def distance_between(o1: OccurrenceFeatures, o2: OccurrenceFeatures) -> Optional[float]:
    """
    Distance in metres between two records, or None if either lacks a usable
    coordinate pair.
    """
    if not (located(o1) and located(o2)):
        return None
    return haversine_distance(
        o1.decimal_latitude,
        o1.decimal_longitude,
        o2.decimal_latitude,
        o2.decimal_longitude,
    )


def within_distance(o1: OccurrenceFeatures, o2: OccurrenceFeatures, threshold_m: float) -> bool:
    """True when both records are located and at most ``threshold_m`` apart (inclusive)."""
    distance = distance_between(o1, o2)
    if distance is None:
        return False
    return distance <= threshold_m
