"""
Exercise base class and the capability interface learner code calls into.

The interpreter owns the concrete execution context; exercises only depend
on the narrow ExecutionContext protocol below.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Protocol
from uuid import uuid4

from codecurriculum.schemas import Animation, ExerciseView, StateValue


class ExecutionContext(Protocol):
    """What an exercise function may ask of the running interpreter."""

    def get_current_time(self) -> int:
        """Current interpreter clock in milliseconds."""
        ...

    def fast_forward(self, milliseconds: int) -> None:
        """Advance the interpreter clock."""
        ...


@dataclass(frozen=True)
class ExerciseFunction:
    """A named operation exposed to learner code."""
    name: str
    func: Callable[..., None]  # first positional argument is the ExecutionContext
    description: Optional[str] = None

    def __call__(self, ctx: ExecutionContext, *args) -> None:
        self.func(ctx, *args)


class Exercise(ABC):
    """
    Base class every curriculum exercise extends.

    An instance is built per run, owns its view and the animations it
    produces, and reports observable state for scenario checks.
    """

    def __init__(self):
        self.animations: list[Animation] = []
        self.view = ExerciseView(id=f"exercise-{uuid4().hex[:9]}")
        self.populate_view()

    @property
    @abstractmethod
    def available_functions(self) -> list[ExerciseFunction]:
        """Functions learner code may call."""

    @abstractmethod
    def get_state(self) -> dict[str, StateValue]:
        """Flat mapping of observable names to primitive values."""

    def populate_view(self) -> None:
        """Hook for subclasses to add markup to the view."""

    def get_view(self) -> ExerciseView:
        return self.view

    def get_function(self, name: str) -> Optional[ExerciseFunction]:
        for function in self.available_functions:
            if function.name == name:
                return function
        return None

    def add_animation(self, animation: Animation) -> None:
        self.animations.append(animation)
