"""
Core orchestration for occurrence_clustering: exceptions, batch context and the
comparison pipeline.

This __init__ intentionally exports NOTHING to avoid circular imports
(config imports core.exceptions).
"""

__all__ = []
