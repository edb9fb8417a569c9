"""
codecurriculum - Curriculum data for an educational coding platform.

Levels gate which syntax nodes and interpreter semantics a learner may use,
the syllabus orders lessons across levels, and the exercise registry holds
the interactive exercises lessons point at.
"""

from codecurriculum.classroom import (
    Curriculum,
    LevelRegistry,
    SyllabusNavigator,
    load_curriculum,
)
from codecurriculum.errors import (
    CurriculumError,
    CurriculumConfigError,
    LevelNotFoundError,
    ExerciseNotFoundError,
)
from codecurriculum.exercises import (
    Exercise,
    ExerciseDefinition,
    ExerciseRegistry,
    default_exercise_registry,
)

__version__ = "0.1.0"

__all__ = [
    "Curriculum",
    "LevelRegistry",
    "SyllabusNavigator",
    "load_curriculum",
    "CurriculumError",
    "CurriculumConfigError",
    "LevelNotFoundError",
    "ExerciseNotFoundError",
    "Exercise",
    "ExerciseDefinition",
    "ExerciseRegistry",
    "default_exercise_registry",
    "__version__",
]
