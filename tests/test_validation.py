"""Tests for curriculum integrity checks."""

import logging

from codecurriculum.classroom import Curriculum, LevelRegistry, SyllabusNavigator, check_references
from codecurriculum.exercises import default_exercise_registry
from codecurriculum.utils import find_node_regressions, validate_curriculum

from conftest import make_level


class TestNodeRegressions:

    def test_monotonic_levels_pass(self, two_levels):
        assert find_node_regressions(two_levels) == []

    def test_dropped_node_reported(self):
        registry = LevelRegistry([
            make_level("fundamentals", js_nodes=["ExpressionStatement", "Literal"]),
            make_level("variables", js_nodes=["ExpressionStatement", "VariableDeclaration"]),
        ])
        problems = find_node_regressions(registry)
        assert problems == [
            "javascript: level 'variables' drops nodes allowed by 'fundamentals': Literal"
        ]

    def test_compares_against_all_earlier_levels(self):
        registry = LevelRegistry([
            make_level("first", py_nodes=["Module", "Expr"]),
            make_level("second", py_nodes=["Module", "Expr", "Call"]),
            make_level("third", py_nodes=["Module"]),
        ])
        problems = find_node_regressions(registry)
        assert len(problems) == 2
        assert all(p.startswith("python: level 'third'") for p in problems)

    def test_levels_without_language_skipped(self):
        registry = LevelRegistry([
            make_level("first", js_nodes=["A"], py_nodes=["Module"]),
            make_level("second", js_nodes=["A", "B"]),
            make_level("third", js_nodes=["A", "B"], py_nodes=["Module", "Expr"]),
        ])
        assert find_node_regressions(registry) == []


class TestValidateCurriculum:

    def test_sound_curriculum(self, two_levels, two_lesson_syllabus):
        curriculum = Curriculum(
            levels=two_levels,
            syllabus=SyllabusNavigator(two_lesson_syllabus),
            exercises=default_exercise_registry(),
        )
        assert validate_curriculum(curriculum) == []

    def test_problems_logged(self, two_lesson_syllabus, caplog):
        levels = LevelRegistry([
            make_level("fundamentals", js_nodes=["A", "B"]),
            make_level("variables", js_nodes=["A"]),
        ])
        curriculum = Curriculum(
            levels=levels,
            syllabus=SyllabusNavigator(two_lesson_syllabus),
            exercises=default_exercise_registry(),
        )
        caplog.set_level(logging.WARNING, logger="codecurriculum.utils.validation")
        problems = validate_curriculum(curriculum)
        assert len(problems) == 1
        assert "drops nodes" in caplog.text

    def test_dangling_references(self, two_lesson_syllabus):
        curriculum = Curriculum(
            levels=LevelRegistry([make_level("fundamentals", js_nodes=["A"])]),
            syllabus=SyllabusNavigator(two_lesson_syllabus),
            exercises=default_exercise_registry(),
        )
        problems = validate_curriculum(curriculum)
        assert problems == ["Syllabus references unknown level 'variables'"]

    def test_level_order_mismatch(self, two_lesson_syllabus):
        levels = LevelRegistry([
            make_level("variables", js_nodes=["A"]),
            make_level("fundamentals", js_nodes=["A"]),
        ])
        problems = check_references(two_lesson_syllabus, levels, default_exercise_registry())
        assert problems == [
            "Syllabus level order ['fundamentals', 'variables'] does not match "
            "level order ['variables', 'fundamentals']"
        ]
