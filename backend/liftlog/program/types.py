"""Program definition shapes: the 9-day cycle and the exercise catalog.

Exercises come in three variants. The ``kind`` tag selects the variant and
defaults to ``plain`` so catalog entries only spell it out for supersets and
mechanical drop sets.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, model_validator

from liftlog.schemas.base import CamelModel

CYCLE_LENGTH = 9

class DayKind(str, Enum):
    training = "training"
    rest = "rest"

class ProgramDay(CamelModel):
    position: Annotated[int, Field(ge=1, le=CYCLE_LENGTH)]
    kind: DayKind
    workout_ref: str | None = None
    name: str

    @model_validator(mode="after")
    def training_days_have_a_workout(self) -> "ProgramDay":
        if (self.kind is DayKind.training) != (self.workout_ref is not None):
            raise ValueError("training days need a workout, rest days must not have one")
        return self

class ExerciseBase(CamelModel):
    id: str
    name: str
    # usually an int; catalog entries such as "2-3" or "AMRAP" are kept verbatim
    sets_prescribed: int | str
    rep_range_label: str
    notes: str | None = None
    is_pr: bool = Field(default=False, alias="isPR")
    variations: list[str] | None = None

class PlainExercise(ExerciseBase):
    kind: Literal["plain"] = "plain"

class SubExercise(CamelModel):
    name: str
    rep_range_label: str

class SupersetExercise(ExerciseBase):
    kind: Literal["superset"] = "superset"
    sub_exercises: Annotated[list[SubExercise], Field(min_length=1)]

class DropSetExercise(ExerciseBase):
    kind: Literal["drop_set"] = "drop_set"
    phases: Annotated[list[str], Field(min_length=1)]

def _exercise_kind(value: Any) -> str:
    if isinstance(value, dict):
        return value.get("kind", "plain")
    return getattr(value, "kind", "plain")

Exercise = Annotated[
    Union[
        Annotated[PlainExercise, Tag("plain")],
        Annotated[SupersetExercise, Tag("superset")],
        Annotated[DropSetExercise, Tag("drop_set")],
    ],
    Discriminator(_exercise_kind),
]

class SelectableExercise(PlainExercise):
    """Optional exercise the user ticks on for a session."""
    selected: bool = False

class Workout(CamelModel):
    id: str
    name: str
    focus: str
    warm_up: str | None = None
    core_exercises: list[Exercise]
    additional_exercises: list[SelectableExercise] = Field(default_factory=list)
    replacement_exercises: list[SelectableExercise] = Field(default_factory=list)

    def core_exercise(self, exercise_id: str):
        return next((ex for ex in self.core_exercises if ex.id == exercise_id), None)
