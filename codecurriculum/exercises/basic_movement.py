"""
Basic movement - the first exercise: call a function to move a character.

The character walks along a horizontal track; each call to
move_character() advances it by STEP_SIZE.
"""

from codecurriculum.schemas import Animation, Scenario, StateValue, Task, TestExpect

from .base import Exercise, ExecutionContext, ExerciseFunction
from .registry import ExerciseDefinition

STEP_SIZE = 20       # track units per move
STEP_DURATION = 100  # ms per move


class BasicMovementExercise(Exercise):
    def __init__(self):
        self.position = 0
        super().__init__()

    def populate_view(self) -> None:
        self.view.children.append('<div class="track"></div>')
        self.view.children.append('<div class="character" style="left: 0%"></div>')

    def move_character(self, ctx: ExecutionContext) -> None:
        self.position += STEP_SIZE
        self.add_animation(Animation(
            targets=f"#{self.view.id} .character",
            offset=ctx.get_current_time(),
            duration=STEP_DURATION,
            left=self.position,
        ))
        ctx.fast_forward(STEP_DURATION)

    @property
    def available_functions(self) -> list[ExerciseFunction]:
        return [
            ExerciseFunction(
                name="move_character",
                func=self.move_character,
                description="Move the character one step forward",
            ),
        ]

    def get_state(self) -> dict[str, StateValue]:
        return {"position": self.position}


BASIC_MOVEMENT = ExerciseDefinition(
    slug="basic-movement",
    title="Basic Movement",
    instructions="Call move_character() five times to walk the character to the end of the track.",
    estimated_minutes=5,
    level_id="fundamentals",
    tasks=[
        Task(
            id="reach-the-end",
            name="Reach the end of the track",
            description="Move the character all the way to the right.",
            hints=["Each call moves the character one step.", "You need five steps."],
            required_scenarios=["move-to-end"],
        ),
    ],
    scenarios=[
        Scenario(
            slug="move-to-end",
            name="Move to the end",
            description="The character starts at 0 and must finish at 100.",
            task_id="reach-the-end",
            expectations=[
                TestExpect(key="position", value=100, description="Character reached position 100"),
            ],
        ),
    ],
    exercise_class=BasicMovementExercise,
)
