"""codecurriculum utilities."""

from .validation import find_node_regressions, validate_curriculum

__all__ = [
    "find_node_regressions",
    "validate_curriculum",
]
