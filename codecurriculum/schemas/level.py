"""
Level schemas for codecurriculum.

Defines Pydantic models for the per-level language restrictions:
- Feature flags (interpreter semantics toggles)
- Allowed syntax node kinds per source language
- Level metadata
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Literal, Optional

# Source languages the interpreter understands
Language = Literal["javascript", "python"]
LANGUAGES: tuple[str, ...] = ("javascript", "python")

LEVEL_ID_PATTERN = r'^[a-z]+(-[a-z]+)*$'


class FeatureFlags(BaseModel):
    """
    Interpreter feature flags set by a level.

    Unset flags stay None so that accumulation can tell "not mentioned"
    apart from "explicitly false". Accepts the interpreter's camelCase
    spelling as well as snake_case.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    allow_shadowing: Optional[bool] = None
    allow_truthiness: Optional[bool] = None
    require_variable_instantiation: Optional[bool] = None
    allow_type_coercion: Optional[bool] = None
    one_statement_per_line: Optional[bool] = None
    enforce_strict_equality: Optional[bool] = None

    def as_dict(self) -> dict[str, bool]:
        """Flags this level actually sets, keyed by snake_case name."""
        return self.model_dump(exclude_none=True)


class LanguageFeatures(BaseModel):
    """Restrictions for one source language at one level."""
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    allowed_nodes: Optional[list[str]] = None  # interpreter node-kind names
    feature_flags: Optional[FeatureFlags] = None


class LanguageFeatureMap(BaseModel):
    """Per-language restrictions; a language left out is not taught at the level."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    javascript: Optional[LanguageFeatures] = None
    python: Optional[LanguageFeatures] = None

    def for_language(self, language: str) -> Optional[LanguageFeatures]:
        if language not in LANGUAGES:
            return None
        return getattr(self, language)

    @property
    def configured_languages(self) -> list[str]:
        return [lang for lang in LANGUAGES if getattr(self, lang) is not None]


class Level(BaseModel):
    """A stage of the curriculum gating which constructs a learner may use."""
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., pattern=LEVEL_ID_PATTERN)  # e.g. "fundamentals", "control-flow"
    title: str = Field(..., min_length=1)
    description: str                  # learner facing
    educational_goal: str = ""        # internal facing
    language_features: LanguageFeatureMap
