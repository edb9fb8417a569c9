"""
Exercise schemas for codecurriculum.

Defines Pydantic models for the data an exercise exposes to the front end:
- Animation instructions
- View handle
- Tasks, scenarios and state expectations
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Literal, Optional, Union

# Observable exercise state is a flat mapping of primitives
StateValue = Union[str, int, float, bool, None]

TRANSFORM_FIELDS = ("left", "top", "rotate", "scale", "opacity")


# -----------------------------------------------------------------------------
# Animation and view
# -----------------------------------------------------------------------------

class Animation(BaseModel):
    """
    One visual instruction produced by an exercise.

    Times are milliseconds on the interpreter's clock. Only the
    transformations below are supported by the renderer.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    targets: str = Field(..., min_length=1)  # CSS selector
    offset: int = Field(..., ge=0)
    duration: Optional[int] = Field(default=None, ge=0)
    easing: Optional[str] = None

    left: Optional[float] = None
    top: Optional[float] = None
    rotate: Optional[float] = None
    scale: Optional[float] = None
    opacity: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def has_transformation(self):
        if all(getattr(self, name) is None for name in TRANSFORM_FIELDS):
            raise ValueError(
                f"Animation must set at least one of: {', '.join(TRANSFORM_FIELDS)}"
            )
        return self

    @property
    def transformations(self) -> dict[str, float]:
        return {
            name: getattr(self, name)
            for name in TRANSFORM_FIELDS
            if getattr(self, name) is not None
        }


class ExerciseView(BaseModel):
    """Renderable handle for an exercise; the front end mounts it by id."""
    id: str
    children: list[str] = []  # markup fragments, in document order
    hidden: bool = True


# -----------------------------------------------------------------------------
# Tasks and scenarios
# -----------------------------------------------------------------------------

class TestExpect(BaseModel):
    """Expected value of one state key after a scenario has run."""
    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["state"] = "state"
    key: str
    value: StateValue
    description: Optional[str] = None

    def check(self, state: dict[str, StateValue]) -> bool:
        """True if state holds the expected value with the same type (True is not 1)."""
        if self.key not in state:
            return False
        actual = state[self.key]
        return type(actual) is type(self.value) and actual == self.value


class Scenario(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    slug: str
    name: str
    description: str = ""
    task_id: str
    setup: dict[str, StateValue] = {}
    expectations: list[TestExpect] = Field(..., min_length=1)


class Task(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    description: str = ""
    hints: list[str] = []
    required_scenarios: list[str] = []
    bonus: bool = False
