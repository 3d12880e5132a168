# src/occurrence_clustering/dates/normalizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from occurrence_clustering.features.base import OccurrenceFeatures


# ---------------------------------------------------------------------------
# ISO-8601 patterns seen in Darwin Core eventDate
# ---------------------------------------------------------------------------

# 2016-06-11, 2016-06-11T00:00:00, 2016-06-11T22:15:00.000+02:00, 2016-06-11 22:15Z
_DATE_TIME = re.compile(
    r"""
    ^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})
    (?:[T\s]
        \d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?
        (?:Z|[+-]\d{2}(?::?\d{2})?)?
    )?$
    """,
    re.VERBOSE,
)


@dataclass
class ParsedEventDate:
    """Internal helper for one side of an eventDate value."""
    date: Optional[date]
    precision: Optional[str]     # 'day' or None
    raw: str


# ---------------------------------------------------------------------------
# Core parsing helpers
# ---------------------------------------------------------------------------

def calendar_date(year: Optional[int], month: Optional[int], day: Optional[int]) -> Optional[date]:
    """A real calendar date from its parts, or None (missing part, 31 Feb, year 10**30, ...)."""
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except (TypeError, ValueError, OverflowError):
        return None


def _parse_single(text: str) -> ParsedEventDate:
    s = text.strip()
    m = _DATE_TIME.match(s)
    if not m:
        return ParsedEventDate(date=None, precision=None, raw=s)

    d = calendar_date(int(m.group("year")), int(m.group("month")), int(m.group("day")))
    if d is None:
        return ParsedEventDate(date=None, precision=None, raw=s)
    return ParsedEventDate(date=d, precision="day", raw=s)


def _split_interval(raw: str) -> Tuple[str, Optional[str]]:
    if "/" not in raw:
        return raw, None
    start, _, end = raw.partition("/")
    return start, end


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def parse_event_date(raw: Optional[str]) -> Optional[date]:
    """
    Calendar date of an eventDate value, at day precision only.

        '2016-06-11'                    -> date(2016, 6, 11)
        '2016-06-11T23:30:00+02:00'     -> date(2016, 6, 11)   (local date as written)
        '2016-06-11/2016-06-11'         -> date(2016, 6, 11)
        '2016-06-11/2016-06-14'         -> None   (spans several days)
        '2016-06', '2016', 'summer'     -> None
    """
    if raw is None:
        return None
    s = str(raw).strip()
    if not s:
        return None

    start_text, end_text = _split_interval(s)
    start = _parse_single(start_text)
    if start.date is None:
        return None

    if end_text is None:
        return start.date

    end = _parse_single(end_text)
    if end.date is None or end.date != start.date:
        return None
    return start.date


def occurrence_date(features: OccurrenceFeatures) -> Optional[date]:
    """Day-precision date of a record: year/month/day first, eventDate otherwise."""
    d = calendar_date(features.year, features.month, features.day)
    if d is not None:
        return d
    return parse_event_date(features.event_date)
