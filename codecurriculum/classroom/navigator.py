"""
SyllabusNavigator - Lesson lookup and sequencing over a syllabus.

Provides:
- Lessons per level
- Lesson and owning-level lookup
- Next/previous lesson navigation across level boundaries
- Exercise lesson listing

Every query is pure and signals absence with None or an empty list.
"""

from typing import Optional

from codecurriculum.schemas import ExerciseLesson, Lesson, Syllabus


class SyllabusNavigator:
    """
    Navigate through a syllabus in declared order.

    The flattened order is every level's lessons, level by level, each
    level's lessons in the order they were authored.
    """

    def __init__(self, syllabus: Syllabus):
        """
        Initialize navigator.

        Args:
            syllabus: Validated syllabus (lesson ids are unique)
        """
        self.syllabus = syllabus
        self._lesson_order: list[Lesson] = []
        self._lesson_index: dict[str, int] = {}
        self._lesson_level: dict[str, str] = {}
        self._build_lesson_order()

    def _build_lesson_order(self):
        """Flatten lessons and index them by id (first occurrence wins)."""
        for level_id, lesson in self.syllabus.iter_lessons():
            if lesson.id not in self._lesson_index:
                self._lesson_index[lesson.id] = len(self._lesson_order)
                self._lesson_level[lesson.id] = level_id
            self._lesson_order.append(lesson)

    @property
    def total_lessons(self) -> int:
        return len(self._lesson_order)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_level_ids(self) -> list[str]:
        """Level ids in syllabus order."""
        return [p.level_id for p in self.syllabus.level_progression]

    def get_lessons_for_level(self, level_id: str) -> list[Lesson]:
        """Lessons of a level in order; empty if the level is unknown or has none."""
        for progression in self.syllabus.level_progression:
            if progression.level_id == level_id:
                return list(progression.lessons)
        return []

    def get_all_lessons(self) -> list[Lesson]:
        return list(self._lesson_order)

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        idx = self._lesson_index.get(lesson_id)
        if idx is None:
            return None
        return self._lesson_order[idx]

    def get_level_for_lesson(self, lesson_id: str) -> Optional[str]:
        return self._lesson_level.get(lesson_id)

    def get_all_exercise_lessons(self) -> list[ExerciseLesson]:
        """Exercise lessons in flattened syllabus order."""
        return [
            lesson for lesson in self._lesson_order
            if isinstance(lesson, ExerciseLesson)
        ]

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def get_first_lesson(self) -> Optional[Lesson]:
        return self._lesson_order[0] if self._lesson_order else None

    def get_next_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """Lesson right after lesson_id, crossing into the next level if needed."""
        idx = self._lesson_index.get(lesson_id)
        if idx is None or idx + 1 >= len(self._lesson_order):
            return None
        return self._lesson_order[idx + 1]

    def get_previous_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """Lesson right before lesson_id, crossing into the previous level if needed."""
        idx = self._lesson_index.get(lesson_id)
        if idx is None or idx <= 0:
            return None
        return self._lesson_order[idx - 1]

    def get_lesson_position(self, lesson_id: str) -> tuple[int, int]:
        """
        Get lesson position as (current, total).

        Returns (0, total) if lesson not found.
        """
        idx = self._lesson_index.get(lesson_id)
        if idx is None:
            return (0, len(self._lesson_order))
        return (idx + 1, len(self._lesson_order))
