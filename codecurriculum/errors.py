"""
Error types for codecurriculum.

Two categories only:
- Configuration errors: authored data is malformed or references something
  that does not exist. Raised while loading, never during navigation.
- Strict lookup misses: a caller asked the canonical lookup for an id that
  is not registered.

Navigation and query helpers signal absence with None or an empty result.
"""


class CurriculumError(Exception):
    """Base class for all curriculum errors."""


class CurriculumConfigError(CurriculumError, ValueError):
    """Level, syllabus or exercise data is malformed or inconsistent."""


class LevelNotFoundError(CurriculumError, LookupError):
    """Strict level lookup for an unregistered id."""

    def __init__(self, level_id: str):
        self.level_id = level_id
        super().__init__(f"Level '{level_id}' not found")


class ExerciseNotFoundError(CurriculumError, LookupError):
    """Strict exercise lookup for an unregistered slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Exercise '{slug}' not found")
