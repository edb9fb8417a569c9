"""
LevelRegistry - Level lookup, per-language restrictions and accumulation.

Provides:
- Strict level lookup (raises LevelNotFoundError)
- Allowed nodes and feature flags for a single level
- Accumulated features across the progression up to a level
- camelCase conversion for the interpreter
"""

from typing import Any, Iterable, Optional

from pydantic.alias_generators import to_camel

from codecurriculum.errors import CurriculumConfigError, LevelNotFoundError
from codecurriculum.schemas import Level


ALLOWED_NODES_KEY = "allowed_nodes"


class LevelRegistry:
    """
    Ordered, read-only collection of levels.

    Declaration order is the progression order. get_level() is the only
    method that raises on an unknown id; every other query returns None
    or an empty result.
    """

    def __init__(self, levels: Iterable[Level]):
        """
        Initialize registry.

        Args:
            levels: Levels in progression order

        Raises:
            CurriculumConfigError: If two levels share an id
        """
        table: dict[str, Level] = {}
        for level in levels:
            if level.id in table:
                raise CurriculumConfigError(f"Duplicate level id: {level.id}")
            table[level.id] = level
        self._levels = table
        self._order = list(table)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_level(self, level_id: str) -> Level:
        """Get a level by id, raising LevelNotFoundError if absent."""
        level = self._levels.get(level_id)
        if level is None:
            raise LevelNotFoundError(level_id)
        return level

    def has_level(self, level_id: str) -> bool:
        return level_id in self._levels

    def get_level_ids(self) -> list[str]:
        """Level ids in progression order."""
        return list(self._order)

    def get_levels(self) -> list[Level]:
        return [self._levels[lid] for lid in self._order]

    def __len__(self) -> int:
        return len(self._order)

    # -------------------------------------------------------------------------
    # Single-level features
    # -------------------------------------------------------------------------

    def get_allowed_nodes(self, level_id: str, language: str) -> Optional[list[str]]:
        """Node kinds a level allows, or None if it does not configure the language."""
        features = self._features(level_id, language)
        if features is None or features.allowed_nodes is None:
            return None
        return list(features.allowed_nodes)

    def get_feature_flags(self, level_id: str, language: str) -> Optional[dict[str, bool]]:
        """Flags a level sets for a language, or None."""
        features = self._features(level_id, language)
        if features is None or features.feature_flags is None:
            return None
        return features.feature_flags.as_dict()

    def get_language_features(self, level_id: str, language: str) -> dict[str, Any]:
        """
        Features of one level, flattened for the interpreter.

        Returns {} for an unknown level or an unconfigured language.
        """
        features = self._features(level_id, language)
        if features is None:
            return {}
        result: dict[str, Any] = {}
        if features.allowed_nodes is not None:
            result[ALLOWED_NODES_KEY] = list(features.allowed_nodes)
        if features.feature_flags is not None:
            result.update(features.feature_flags.as_dict())
        return result

    def _features(self, level_id: str, language: str):
        level = self._levels.get(level_id)
        if level is None:
            return None
        return level.language_features.for_language(language)

    # -------------------------------------------------------------------------
    # Accumulation
    # -------------------------------------------------------------------------

    def get_accumulated_language_features(self, level_id: str, language: str) -> dict[str, Any]:
        """
        Everything a learner may use by the time they reach a level.

        Folds levels from the first through level_id (inclusive) in
        declared order: allowed nodes are unioned in first-seen order,
        flags are merged with the later level winning per key.

        Returns {} if level_id is unknown. The allowed_nodes key is left
        out when no visited level allows any node.
        """
        if level_id not in self._levels:
            return {}

        nodes: list[str] = []
        seen: set[str] = set()
        flags: dict[str, bool] = {}

        for current_id in self._order:
            features = self._features(current_id, language)
            if features is not None:
                for node in features.allowed_nodes or []:
                    if node not in seen:
                        seen.add(node)
                        nodes.append(node)
                if features.feature_flags is not None:
                    flags.update(features.feature_flags.as_dict())
            if current_id == level_id:
                break

        result: dict[str, Any] = {}
        if nodes:
            result[ALLOWED_NODES_KEY] = nodes
        result.update(flags)
        return result


def to_interpreter_config(features: dict[str, Any]) -> dict[str, Any]:
    """Rename snake_case feature keys to the interpreter's camelCase."""
    return {to_camel(key): value for key, value in features.items()}
