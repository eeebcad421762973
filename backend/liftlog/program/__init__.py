from liftlog.program.catalog import CYCLE_DAYS, WORKOUTS, get_day, get_workout
from liftlog.program.cycle import cycle_day_for, resolve_cycle_day
from liftlog.program.types import (
    CYCLE_LENGTH,
    DayKind,
    DropSetExercise,
    Exercise,
    PlainExercise,
    ProgramDay,
    SelectableExercise,
    SubExercise,
    SupersetExercise,
    Workout,
)

__all__ = [
    "CYCLE_DAYS", "CYCLE_LENGTH", "WORKOUTS", "DayKind", "DropSetExercise", "Exercise",
    "PlainExercise", "ProgramDay", "SelectableExercise", "SubExercise", "SupersetExercise",
    "Workout", "cycle_day_for", "get_day", "get_workout", "resolve_cycle_day",
]
