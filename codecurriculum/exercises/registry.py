"""
ExerciseRegistry - read-only table of exercise definitions keyed by slug.

get() is the strict lookup and raises ExerciseNotFoundError; has() is the
predicate callers use to probe.
"""

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from codecurriculum.errors import CurriculumConfigError, ExerciseNotFoundError
from codecurriculum.schemas import Scenario, Task
from codecurriculum.schemas.level import LEVEL_ID_PATTERN

from .base import Exercise

logger = logging.getLogger(__name__)


class ExerciseDefinition(BaseModel):
    """Metadata for one exercise plus the class implementing its behavior."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    slug: str = Field(..., pattern=r'^[a-z0-9]+(-[a-z0-9]+)*$')
    title: str
    instructions: str
    estimated_minutes: int = Field(..., ge=1)
    level_id: str = Field(..., pattern=LEVEL_ID_PATTERN)
    tasks: list[Task] = []
    scenarios: list[Scenario] = []
    exercise_class: type[Exercise]

    @model_validator(mode="after")
    def references_resolve(self):
        task_ids = {task.id for task in self.tasks}
        scenario_slugs = {scenario.slug for scenario in self.scenarios}
        for scenario in self.scenarios:
            if scenario.task_id not in task_ids:
                raise ValueError(
                    f"Scenario '{scenario.slug}' references unknown task '{scenario.task_id}'"
                )
        for task in self.tasks:
            missing = [s for s in task.required_scenarios if s not in scenario_slugs]
            if missing:
                raise ValueError(
                    f"Task '{task.id}' requires unknown scenarios: {', '.join(missing)}"
                )
        return self

    def create(self) -> Exercise:
        """Build a fresh exercise instance for one run."""
        return self.exercise_class()

    def get_scenarios_for_task(self, task_id: str) -> list[Scenario]:
        return [s for s in self.scenarios if s.task_id == task_id]


class ExerciseRegistry:
    """Immutable slug -> ExerciseDefinition mapping in registration order."""

    def __init__(self, definitions: Iterable[ExerciseDefinition]):
        table: dict[str, ExerciseDefinition] = {}
        for definition in definitions:
            if definition.slug in table:
                raise CurriculumConfigError(f"Duplicate exercise slug: {definition.slug}")
            table[definition.slug] = definition
        self._definitions = table
        logger.debug(f"Registered {len(table)} exercises")

    def get(self, slug: str) -> ExerciseDefinition:
        try:
            return self._definitions[slug]
        except KeyError:
            raise ExerciseNotFoundError(slug) from None

    def has(self, slug: str) -> bool:
        return slug in self._definitions

    def slugs(self) -> list[str]:
        return list(self._definitions)

    def create(self, slug: str) -> Exercise:
        return self.get(slug).create()

    def __contains__(self, slug: object) -> bool:
        return slug in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
