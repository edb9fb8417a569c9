"""
CurriculumLoader - Load level and syllabus data from YAML files.

Reads:
- levels.yaml: ordered list of levels with per-language features
- syllabus.yaml: syllabus title and level progression

and wires the level registry, syllabus navigator and exercise registry
into a single read-only Curriculum.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from codecurriculum.config import DEFAULT_DATA_DIR
from codecurriculum.errors import CurriculumConfigError
from codecurriculum.exercises import ExerciseRegistry, default_exercise_registry
from codecurriculum.schemas import ExerciseLesson, Level, Syllabus

from .levels import LevelRegistry
from .navigator import SyllabusNavigator

logger = logging.getLogger(__name__)

LEVELS_FILE = "levels.yaml"
SYLLABUS_FILE = "syllabus.yaml"


@dataclass(frozen=True)
class Curriculum:
    """The three stores, cross-checked and ready to query."""
    levels: LevelRegistry
    syllabus: SyllabusNavigator
    exercises: ExerciseRegistry


def _read_yaml(path: Path) -> Any:
    """Parse a YAML file, wrapping syntax errors as configuration errors."""
    if not path.exists():
        raise FileNotFoundError(f"Curriculum file not found: {path}")
    logger.debug(f"Reading {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CurriculumConfigError(f"Invalid YAML in {path}: {e}") from e


def load_levels(path: Path) -> list[Level]:
    """
    Load levels in progression order.

    Args:
        path: YAML file with a top-level "levels" list

    Returns:
        Validated levels, in the order they appear in the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        CurriculumConfigError: If the YAML or any level is malformed
    """
    raw = _read_yaml(path)
    if not isinstance(raw, dict) or not isinstance(raw.get("levels"), list):
        raise CurriculumConfigError(f"{path}: expected a top-level 'levels' list")

    levels = []
    for idx, item in enumerate(raw["levels"]):
        try:
            levels.append(Level.model_validate(item))
        except ValidationError as e:
            raise CurriculumConfigError(f"{path}: level #{idx + 1} is invalid: {e}") from e
    return levels


def load_syllabus(path: Path) -> Syllabus:
    """
    Load the syllabus.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CurriculumConfigError: If the YAML or the syllabus is malformed
    """
    raw = _read_yaml(path)
    if not isinstance(raw, dict):
        raise CurriculumConfigError(f"{path}: expected a mapping at top level")
    try:
        return Syllabus.model_validate(raw)
    except ValidationError as e:
        raise CurriculumConfigError(f"{path}: syllabus is invalid: {e}") from e


def check_references(
    syllabus: Syllabus,
    levels: LevelRegistry,
    exercises: ExerciseRegistry,
) -> list[str]:
    """
    List dangling references between the syllabus, levels and exercises.

    Also reports a level progression whose order differs from the
    level registry's declared order.
    """
    problems = []
    for progression in syllabus.level_progression:
        if not levels.has_level(progression.level_id):
            problems.append(f"Syllabus references unknown level '{progression.level_id}'")

    syllabus_order = [
        progression.level_id
        for progression in syllabus.level_progression
        if levels.has_level(progression.level_id)
    ]
    registry_order = [lid for lid in levels.get_level_ids() if lid in syllabus_order]
    if syllabus_order != registry_order:
        problems.append(
            f"Syllabus level order {syllabus_order} does not match "
            f"level order {registry_order}"
        )

    for level_id, lesson in syllabus.iter_lessons():
        if isinstance(lesson, ExerciseLesson) and not exercises.has(lesson.exercise_slug):
            problems.append(
                f"Lesson '{lesson.id}' in level '{level_id}' "
                f"references unknown exercise '{lesson.exercise_slug}'"
            )
    for slug in exercises.slugs():
        level_id = exercises.get(slug).level_id
        if not levels.has_level(level_id):
            problems.append(f"Exercise '{slug}' references unknown level '{level_id}'")
    return problems


def load_curriculum(
    data_dir: Optional[Path] = None,
    exercises: Optional[ExerciseRegistry] = None,
) -> Curriculum:
    """
    Load and cross-check the full curriculum.

    Args:
        data_dir: Directory holding levels.yaml and syllabus.yaml
            (default: bundled data)
        exercises: Exercise registry (default: bundled exercises)

    Raises:
        FileNotFoundError: If a data file is missing
        CurriculumConfigError: If data is malformed or references dangle
    """
    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR
    exercises = exercises if exercises is not None else default_exercise_registry()

    levels = LevelRegistry(load_levels(data_dir / LEVELS_FILE))
    syllabus = load_syllabus(data_dir / SYLLABUS_FILE)

    problems = check_references(syllabus, levels, exercises)
    if problems:
        raise CurriculumConfigError("; ".join(problems))

    navigator = SyllabusNavigator(syllabus)
    logger.info(
        f"Loaded {len(levels)} levels, {navigator.total_lessons} lessons, "
        f"{len(exercises)} exercises from {data_dir}"
    )
    return Curriculum(levels=levels, syllabus=navigator, exercises=exercises)
