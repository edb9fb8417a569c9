"""
codecurriculum Exercises - exercise contract and the exercise registry.

This module provides:
- Exercise: base class with functions, view, animations and state
- ExerciseDefinition / ExerciseRegistry: slug-keyed exercise metadata
- default_exercise_registry(): registry of the bundled exercises
"""

from .base import (
    Exercise,
    ExecutionContext,
    ExerciseFunction,
)

from .registry import (
    ExerciseDefinition,
    ExerciseRegistry,
)

from .basic_movement import (
    BasicMovementExercise,
    BASIC_MOVEMENT,
)

# Bundled exercises, in registration order
BUNDLED_EXERCISES = (
    BASIC_MOVEMENT,
)


def default_exercise_registry() -> ExerciseRegistry:
    """Build a registry of every bundled exercise."""
    return ExerciseRegistry(BUNDLED_EXERCISES)


__all__ = [
    # Contract
    "Exercise",
    "ExecutionContext",
    "ExerciseFunction",
    # Registry
    "ExerciseDefinition",
    "ExerciseRegistry",
    "BUNDLED_EXERCISES",
    "default_exercise_registry",
    # Bundled
    "BasicMovementExercise",
    "BASIC_MOVEMENT",
]
