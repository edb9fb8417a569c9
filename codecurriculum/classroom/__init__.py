"""
codecurriculum Classroom - Runtime components for querying the curriculum.

This module provides:
- LevelRegistry: level lookup and feature accumulation
- SyllabusNavigator: lesson lookup and sequencing
- load_curriculum: load YAML data into a cross-checked Curriculum
"""

from .levels import (
    LevelRegistry,
    ALLOWED_NODES_KEY,
    to_interpreter_config,
)

from .navigator import (
    SyllabusNavigator,
)

from .loader import (
    Curriculum,
    LEVELS_FILE,
    SYLLABUS_FILE,
    check_references,
    load_curriculum,
    load_levels,
    load_syllabus,
)

__all__ = [
    # Levels
    "LevelRegistry",
    "ALLOWED_NODES_KEY",
    "to_interpreter_config",
    # Navigator
    "SyllabusNavigator",
    # Loader
    "Curriculum",
    "LEVELS_FILE",
    "SYLLABUS_FILE",
    "check_references",
    "load_curriculum",
    "load_levels",
    "load_syllabus",
]
