"""
Type-status vocabulary lookup.

Publishers write type status freely ("HoloType", "Holotype of Abies alba",
"paratype | isotype"). Values are split, reduced to their letters and matched
against the GBIF TypeStatus vocabulary. Anything unrecognised is dropped.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, FrozenSet, Optional

from occurrence_clustering.logging import get_logger
from occurrence_clustering.normalization.identifiers import normalize_id

log = get_logger(__name__)


class TypeStatus(Enum):
    ALLOLECTOTYPE = "ALLOLECTOTYPE"
    ALLONEOTYPE = "ALLONEOTYPE"
    ALLOTYPE = "ALLOTYPE"
    COTYPE = "COTYPE"
    EPITYPE = "EPITYPE"
    EXEPITYPE = "EXEPITYPE"
    EXHOLOTYPE = "EXHOLOTYPE"
    EXISOTYPE = "EXISOTYPE"
    EXLECTOTYPE = "EXLECTOTYPE"
    EXNEOTYPE = "EXNEOTYPE"
    EXPARATYPE = "EXPARATYPE"
    EXSYNTYPE = "EXSYNTYPE"
    EXTYPE = "EXTYPE"
    HAPANTOTYPE = "HAPANTOTYPE"
    HOLOTYPE = "HOLOTYPE"
    ICONOTYPE = "ICONOTYPE"
    ISOLECTOTYPE = "ISOLECTOTYPE"
    ISONEOTYPE = "ISONEOTYPE"
    ISOSYNTYPE = "ISOSYNTYPE"
    ISOTYPE = "ISOTYPE"
    LECTOTYPE = "LECTOTYPE"
    NEOTYPE = "NEOTYPE"
    NOTATYPE = "NOTATYPE"
    ORIGINAL_MATERIAL = "ORIGINAL_MATERIAL"
    PARALECTOTYPE = "PARALECTOTYPE"
    PARANEOTYPE = "PARANEOTYPE"
    PARATYPE = "PARATYPE"
    PLASTOHOLOTYPE = "PLASTOHOLOTYPE"
    PLASTOISOTYPE = "PLASTOISOTYPE"
    PLASTOLECTOTYPE = "PLASTOLECTOTYPE"
    PLASTONEOTYPE = "PLASTONEOTYPE"
    PLASTOPARATYPE = "PLASTOPARATYPE"
    PLASTOSYNTYPE = "PLASTOSYNTYPE"
    PLASTOTYPE = "PLASTOTYPE"
    SECONDARY_TYPE = "SECONDARY_TYPE"
    SUPPLEMENTARY_TYPE = "SUPPLEMENTARY_TYPE"
    SYNTYPE = "SYNTYPE"
    TOPOTYPE = "TOPOTYPE"
    TYPE = "TYPE"
    TYPE_GENUS = "TYPE_GENUS"
    TYPE_SPECIES = "TYPE_SPECIES"


# A name has exactly one specimen of these kinds.
UNIQUE_TYPES: FrozenSet[TypeStatus] = frozenset({
    TypeStatus.HOLOTYPE,
    TypeStatus.LECTOTYPE,
    TypeStatus.NEOTYPE,
    TypeStatus.EPITYPE,
})

_LOOKUP: Dict[str, TypeStatus] = {ts.name.replace("_", ""): ts for ts in TypeStatus}
_SEPARATORS = re.compile(r"[|;,]")


def lookup_type_status(token: str) -> Optional[TypeStatus]:
    """Match one value, whole first, then on its first word."""
    key = normalize_id(token)
    if key in _LOOKUP:
        return _LOOKUP[key]

    words = token.split()
    if len(words) > 1:
        first = normalize_id(words[0])
        if first in _LOOKUP:
            return _LOOKUP[first]

    return None


def parse_type_status(raw: Optional[str]) -> FrozenSet[TypeStatus]:
    """All recognised type statuses in a (possibly multi-valued) string."""
    if not raw:
        return frozenset()

    found = set()
    for token in _SEPARATORS.split(str(raw)):
        token = token.strip()
        if not token:
            continue
        status = lookup_type_status(token)
        if status is None:
            log.debug("Unrecognised type status ignored: %r", token)
            continue
        found.add(status)
    return frozenset(found)
