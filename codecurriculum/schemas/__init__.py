"""
codecurriculum Schemas - Pydantic models for the curriculum data.

This module exports all schema classes for:
- Level: language features and feature flags per level
- Syllabus: lesson variants, level progression, syllabus root
- Exercise: animations, view handle, tasks, scenarios
"""

# Level schemas
from .level import (
    Language,
    LANGUAGES,
    FeatureFlags,
    LanguageFeatures,
    LanguageFeatureMap,
    Level,
)

# Syllabus schemas
from .syllabus import (
    LessonType,
    LessonBase,
    ExerciseLesson,
    TutorialLesson,
    ChallengeLesson,
    AssessmentLesson,
    Lesson,
    LevelProgression,
    Syllabus,
    content_reference,
)

# Exercise schemas
from .exercise import (
    StateValue,
    Animation,
    ExerciseView,
    TestExpect,
    Scenario,
    Task,
)

__all__ = [
    # Level
    'Language',
    'LANGUAGES',
    'FeatureFlags',
    'LanguageFeatures',
    'LanguageFeatureMap',
    'Level',
    # Syllabus
    'LessonType',
    'LessonBase',
    'ExerciseLesson',
    'TutorialLesson',
    'ChallengeLesson',
    'AssessmentLesson',
    'Lesson',
    'LevelProgression',
    'Syllabus',
    'content_reference',
    # Exercise
    'StateValue',
    'Animation',
    'ExerciseView',
    'TestExpect',
    'Scenario',
    'Task',
]
