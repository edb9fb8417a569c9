"""
Syllabus schemas for codecurriculum.

Defines Pydantic models for:
- Lesson variants (exercise, tutorial, challenge, assessment)
- Level progression (a level id with its ordered lessons)
- The syllabus root aggregate
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Literal, Optional, Union

from .level import LEVEL_ID_PATTERN

LESSON_ID_PATTERN = r'^[a-z0-9]+(-[a-z0-9]+)*$'

LessonType = Literal["exercise", "tutorial", "challenge", "assessment"]


# -----------------------------------------------------------------------------
# Lesson variants
# -----------------------------------------------------------------------------

class LessonBase(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., pattern=LESSON_ID_PATTERN)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: str


class ExerciseLesson(LessonBase):
    type: Literal["exercise"] = "exercise"
    exercise_slug: str = Field(..., min_length=1)  # key into the exercise registry


class TutorialLesson(LessonBase):
    type: Literal["tutorial"] = "tutorial"
    tutorial_content: Optional[str] = None  # markdown or a content reference


class ChallengeLesson(LessonBase):
    type: Literal["challenge"] = "challenge"
    challenge_slug: Optional[str] = None


class AssessmentLesson(LessonBase):
    type: Literal["assessment"] = "assessment"
    assessment_slug: Optional[str] = None


Lesson = Annotated[
    Union[
        ExerciseLesson,
        TutorialLesson,
        ChallengeLesson,
        AssessmentLesson,
    ],
    Field(discriminator="type"),
]


def content_reference(lesson: LessonBase) -> Optional[str]:
    """
    Return the variant-specific content reference of a lesson.

    Exercise lessons always have one; the other variants may not.
    """
    if isinstance(lesson, ExerciseLesson):
        return lesson.exercise_slug
    if isinstance(lesson, TutorialLesson):
        return lesson.tutorial_content
    if isinstance(lesson, ChallengeLesson):
        return lesson.challenge_slug
    if isinstance(lesson, AssessmentLesson):
        return lesson.assessment_slug
    raise TypeError(f"Unknown lesson variant: {type(lesson).__name__}")


# -----------------------------------------------------------------------------
# Syllabus
# -----------------------------------------------------------------------------

class LevelProgression(BaseModel):
    """One level of the syllabus with its lessons in teaching order."""
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    level_id: str = Field(..., pattern=LEVEL_ID_PATTERN)
    lessons: list[Lesson] = []  # may be empty while a level is being authored


class Syllabus(BaseModel):
    """Root aggregate: ordered levels and their lessons."""
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    level_progression: list[LevelProgression]

    @model_validator(mode="after")
    def ids_unique(self):
        level_ids = [p.level_id for p in self.level_progression]
        duplicate_levels = sorted({lid for lid in level_ids if level_ids.count(lid) > 1})
        if duplicate_levels:
            raise ValueError(f"Duplicate level in progression: {', '.join(duplicate_levels)}")

        seen: dict[str, str] = {}
        for progression in self.level_progression:
            for lesson in progression.lessons:
                previous = seen.get(lesson.id)
                if previous is not None:
                    raise ValueError(
                        f"Duplicate lesson id: {lesson.id} (in {previous} and {progression.level_id})"
                    )
                seen[lesson.id] = progression.level_id
        return self

    def iter_lessons(self):
        """Yield (level_id, lesson) pairs in flattened syllabus order."""
        for progression in self.level_progression:
            for lesson in progression.lessons:
                yield progression.level_id, lesson
