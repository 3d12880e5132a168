"""
identifiers.py
Identifier / name normalization for cross-dataset comparison.

Publishers format the same collector or catalog number in many ways
("D. S. Seigler & J. T. Miller", "TEB 12-16", "teb12-16"). Comparison keys are
built by stripping everything but a small character class and uppercasing, so
punctuation, whitespace and separator variance collapse into one token stream.

Known limitation: reordered names or different abbreviation styles still give
different keys ("David S. Seigler|J.T. Miller" vs "D. S. Seigler & J. T. Miller").
"""

from __future__ import annotations

import re
from typing import FrozenSet, Optional

_NON_LETTER = re.compile(r"[^A-Z]+")
_NON_ALNUM = re.compile(r"[^A-Z0-9]+")

# Values publishers use to mean "no identifier"
PLACEHOLDER_IDENTIFIERS = frozenset({
    "NA",
    "NULL",
    "NONE",
    "NIL",
    "UNKNOWN",
    "NOTRECORDED",
    "SN",
})


def normalize_id(value: Optional[str]) -> Optional[str]:
    """
    Canonical comparison key for free-text names and identifiers.

    Every character that is not an ASCII letter is dropped and the rest is
    uppercased:

        " A-/, B \\C"                    -> "ABC"
        "David S. Seigler|J.T. Miller"  -> "DAVIDSSEIGLERJTMILLER"

    ``None`` stays ``None``. A value with no letters gives ``""``.
    """
    if value is None:
        return None
    return _NON_LETTER.sub("", str(value).upper())


def normalize_identifier(value: Optional[str]) -> Optional[str]:
    """
    Like normalize_id but keeps ASCII digits, for catalog and record numbers
    where the digits are the identity ("TIM1" != "TIM2").

    Returns None for absent values and for values with nothing left to compare.
    """
    if value is None:
        return None
    key = _NON_ALNUM.sub("", str(value).upper())
    return key or None


def identifier_keys(*values: Optional[str]) -> FrozenSet[str]:
    """Normalized identifier keys of the given values, minus absent/placeholder ones."""
    keys = set()
    for value in values:
        key = normalize_identifier(value)
        if key and key not in PLACEHOLDER_IDENTIFIERS:
            keys.add(key)
    return frozenset(keys)
