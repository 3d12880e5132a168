from occurrence_clustering.dates.normalizer import (
    calendar_date,
    occurrence_date,
    parse_event_date,
)

__all__ = [
    "calendar_date",
    "occurrence_date",
    "parse_event_date",
]
