"""Shared fixtures: small hand-built curricula independent of the bundled data."""

from typing import Optional

import pytest

from codecurriculum.classroom import LevelRegistry, SyllabusNavigator
from codecurriculum.config import DATA_DIR_ENV, LOG_LEVEL_ENV
from codecurriculum.schemas import (
    ExerciseLesson,
    FeatureFlags,
    LanguageFeatureMap,
    LanguageFeatures,
    Level,
    LevelProgression,
    Syllabus,
    TutorialLesson,
)


def make_level(
    level_id: str,
    js_nodes: Optional[list[str]] = None,
    js_flags: Optional[dict] = None,
    py_nodes: Optional[list[str]] = None,
    py_flags: Optional[dict] = None,
) -> Level:
    """Build a level configuring only the languages given."""
    javascript = None
    if js_nodes is not None or js_flags is not None:
        javascript = LanguageFeatures(
            allowed_nodes=js_nodes,
            feature_flags=FeatureFlags(**js_flags) if js_flags is not None else None,
        )
    python = None
    if py_nodes is not None or py_flags is not None:
        python = LanguageFeatures(
            allowed_nodes=py_nodes,
            feature_flags=FeatureFlags(**py_flags) if py_flags is not None else None,
        )
    return Level(
        id=level_id,
        title=level_id.replace("-", " ").title(),
        description=f"The {level_id} level",
        language_features=LanguageFeatureMap(javascript=javascript, python=python),
    )


@pytest.fixture
def two_levels() -> LevelRegistry:
    return LevelRegistry([
        make_level(
            "fundamentals",
            js_nodes=["ExpressionStatement", "Literal"],
            js_flags={"allow_truthiness": False, "enforce_strict_equality": True},
        ),
        make_level(
            "variables",
            js_nodes=["ExpressionStatement", "Literal", "VariableDeclaration"],
            js_flags={"require_variable_instantiation": True},
        ),
    ])


@pytest.fixture
def lesson_a() -> ExerciseLesson:
    return ExerciseLesson(id="lesson-a", title="Lesson A", exercise_slug="basic-movement")


@pytest.fixture
def lesson_b() -> TutorialLesson:
    return TutorialLesson(id="lesson-b", title="Lesson B", tutorial_content="Read this")


@pytest.fixture
def two_lesson_syllabus(lesson_a, lesson_b) -> Syllabus:
    return Syllabus(
        title="Test Syllabus",
        level_progression=[
            LevelProgression(level_id="fundamentals", lessons=[lesson_a]),
            LevelProgression(level_id="variables", lessons=[lesson_b]),
        ],
    )


@pytest.fixture
def navigator(two_lesson_syllabus) -> SyllabusNavigator:
    return SyllabusNavigator(two_lesson_syllabus)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset curriculum variables; anything load_dotenv() sets is undone afterwards."""
    for name in (DATA_DIR_ENV, LOG_LEVEL_ENV):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch
