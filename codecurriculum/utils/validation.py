"""
Integrity checks for authored curriculum data.

Monotonic relaxation (every level allows at least what earlier levels
allowed) is a design intent, not something the models enforce, so a
misauthored level only shows up here.
"""

import logging

from codecurriculum.classroom import Curriculum, LevelRegistry, check_references
from codecurriculum.schemas import LANGUAGES

logger = logging.getLogger(__name__)


def find_node_regressions(levels: LevelRegistry) -> list[str]:
    """
    List node kinds a level drops compared to an earlier level.

    Per language, each level with a non-empty allowed-node list is compared
    against every earlier level with a non-empty list. Levels that do not
    configure the language are skipped.
    """
    problems = []
    for language in LANGUAGES:
        earlier: list[tuple[str, list[str]]] = []
        for level_id in levels.get_level_ids():
            nodes = levels.get_allowed_nodes(level_id, language)
            if not nodes:
                continue
            current = set(nodes)
            for earlier_id, earlier_nodes in earlier:
                missing = [n for n in earlier_nodes if n not in current]
                if missing:
                    problems.append(
                        f"{language}: level '{level_id}' drops nodes allowed by "
                        f"'{earlier_id}': {', '.join(missing)}"
                    )
            earlier.append((level_id, nodes))
    return problems


def validate_curriculum(curriculum: Curriculum) -> list[str]:
    """Run every integrity check; an empty list means the curriculum is sound."""
    problems = check_references(
        curriculum.syllabus.syllabus,
        curriculum.levels,
        curriculum.exercises,
    )
    problems.extend(find_node_regressions(curriculum.levels))
    for problem in problems:
        logger.warning(problem)
    return problems
