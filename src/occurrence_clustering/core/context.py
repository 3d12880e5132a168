from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ComparisonContext:
    """
    Shared batch context.
    Passed to the comparison pipeline; holds no per-pair state.
    """

    config: Any
    logger: Any

    policy: Optional[Any] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: list = field(default_factory=list)

    debug: bool = False
