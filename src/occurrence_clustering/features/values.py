"""
Tolerant value coercion shared by the dict-backed record shapes.

Publisher data is stringly typed and noisy ("", "NA", "12.0", ["a", "b"]).
Each helper returns None instead of failing.
"""

from __future__ import annotations

import math
from typing import Any, Optional

_MISSING = {"", "NA", "N/A", "NULL", "NONE", "NAN", "\\N"}


def safe_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        parts = [safe_str(v) for v in value]
        joined = "|".join(p for p in parts if p)
        return joined or None
    out = str(value).strip()
    if out.upper() in _MISSING:
        return None
    return out


def safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = safe_str(value)
        if text is None:
            return None
        try:
            result = float(text)
        except ValueError:
            return None
    return result if math.isfinite(result) else None


def safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    number = safe_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)
