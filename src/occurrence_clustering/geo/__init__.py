"""
Geospatial helpers: great-circle distance between occurrence coordinates.
"""

from occurrence_clustering.geo.distance import (
    EARTH_RADIUS_M,
    WITHIN_200M,
    WITHIN_2KM,
    distance_between,
    haversine_distance,
    located,
    within_distance,
)

__all__ = [
    "EARTH_RADIUS_M",
    "WITHIN_200M",
    "WITHIN_2KM",
    "distance_between",
    "haversine_distance",
    "located",
    "within_distance",
]
