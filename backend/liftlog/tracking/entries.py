"""Blank entry state for a workout, and folding user edits into it."""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any

from liftlog.errors import EntryShapeError
from liftlog.program.types import (
    DropSetExercise,
    PlainExercise,
    SelectableExercise,
    SupersetExercise,
    Workout,
)
from liftlog.schemas.session import (
    EMPTY,
    DropSetSet,
    ExerciseEntry,
    PlainSet,
    SelectableEntry,
    SessionRecord,
    SupersetSet,
    coerce_measure,
)

# fallbacks when a prescription like "AMRAP" has no leading count
CORE_DEFAULT_SETS = 3
ADDITIONAL_DEFAULT_SETS = 2
REPLACEMENT_DEFAULT_SETS = 1

_LEADING_INT = re.compile(r"^\s*(\d+)")

def parse_set_count(prescribed: int | str | None, default: int) -> int:
    """Leading positive integer of ``prescribed`` ("2-3" -> 2), else ``default``."""
    if isinstance(prescribed, bool):
        return default
    if isinstance(prescribed, int):
        return prescribed if prescribed > 0 else default
    m = _LEADING_INT.match(prescribed or "")
    if not m or int(m.group(1)) <= 0:
        return default
    return int(m.group(1))

def _blank_sets(exercise, count: int) -> list:
    if isinstance(exercise, SupersetExercise):
        return [
            SupersetSet(sub_entries=[PlainSet() for _ in exercise.sub_exercises])
            for _ in range(count)
        ]
    if isinstance(exercise, DropSetExercise):
        return [DropSetSet(phase_reps=[EMPTY] * len(exercise.phases)) for _ in range(count)]
    if isinstance(exercise, PlainExercise):
        return [PlainSet() for _ in range(count)]
    raise TypeError(f"unknown exercise variant: {type(exercise).__name__}")

def initialize_entry_state(exercise, default_sets: int = CORE_DEFAULT_SETS) -> ExerciseEntry:
    count = parse_set_count(exercise.sets_prescribed, default_sets)
    return ExerciseEntry(
        variation=exercise.variations[0] if exercise.variations else None,
        sets=_blank_sets(exercise, count),
        exercise_notes="",
    )

def initialize_selectable_entry(exercise: SelectableExercise, default_sets: int) -> SelectableEntry:
    count = parse_set_count(exercise.sets_prescribed, default_sets)
    return SelectableEntry(selected=False, sets=[PlainSet() for _ in range(count)], exercise_notes="")

def new_session_record(
    workout: Workout,
    *,
    session_id: str,
    day: date,
    cycle_day: int,
    now: datetime | None = None,
) -> SessionRecord:
    """Unsaved record for ``workout`` with blank entries for every exercise.

    ``workout_name`` and ``cycle_day`` are copied now and never recomputed.
    """
    return SessionRecord(
        session_id=session_id,
        workout_id=workout.id,
        workout_name=workout.name,
        date=day,
        cycle_day=cycle_day,
        exercises={ex.id: initialize_entry_state(ex) for ex in workout.core_exercises},
        additional_exercises={
            ex.id: initialize_selectable_entry(ex, ADDITIONAL_DEFAULT_SETS)
            for ex in workout.additional_exercises
        },
        replacement_exercises={
            ex.id: initialize_selectable_entry(ex, REPLACEMENT_DEFAULT_SETS)
            for ex in workout.replacement_exercises
        },
        notes="",
        created_at=now or datetime.now(timezone.utc),
    )

# Shape checks

def entry_matches(exercise, entry: ExerciseEntry) -> bool:
    """True when every set of ``entry`` has the layout ``exercise`` calls for."""
    for s in entry.sets:
        if isinstance(exercise, SupersetExercise):
            if not isinstance(s, SupersetSet) or len(s.sub_entries) != len(exercise.sub_exercises):
                return False
        elif isinstance(exercise, DropSetExercise):
            if not isinstance(s, DropSetSet) or len(s.phase_reps) != len(exercise.phases):
                return False
        elif isinstance(exercise, PlainExercise):
            if not isinstance(s, PlainSet):
                return False
        else:
            raise TypeError(f"unknown exercise variant: {type(exercise).__name__}")
    return True

def check_entry(exercise, entry: ExerciseEntry) -> None:
    if not entry_matches(exercise, entry):
        raise EntryShapeError(f"entry for {exercise.id!r} does not match a {exercise.kind} exercise")

# Edits

_ENTRY_FIELDS = {"variation": "variation", "exerciseNotes": "exercise_notes", "exercise_notes": "exercise_notes"}

def apply_set_edit(
    exercise,
    entry: ExerciseEntry,
    field: str,
    value: Any,
    set_index: int | None = None,
    sub_index: int | None = None,
) -> ExerciseEntry:
    """Return a copy of ``entry`` with one field changed.

    Without ``set_index`` the edit targets the entry itself (variation, notes).
    ``sub_index`` picks the superset member or the drop-set phase.
    """
    check_entry(exercise, entry)
    updated = entry.model_copy(deep=True)

    if set_index is None:
        if field not in _ENTRY_FIELDS:
            raise EntryShapeError(f"{field!r} is not an entry field")
        setattr(updated, _ENTRY_FIELDS[field], value)
        return updated

    if not 0 <= set_index < len(updated.sets):
        raise IndexError(f"set {set_index} out of range for {exercise.id!r}")
    target = updated.sets[set_index]

    if isinstance(exercise, SupersetExercise):
        if sub_index is None or field not in ("weight", "reps"):
            raise EntryShapeError("superset edits need a sub-exercise index and weight or reps")
        setattr(target.sub_entries[sub_index], field, coerce_measure(value))
    elif isinstance(exercise, DropSetExercise):
        if field == "weight" and sub_index is None:
            target.weight = coerce_measure(value)
        elif field in ("phaseReps", "phase_reps") and sub_index is not None:
            target.phase_reps[sub_index] = coerce_measure(value)
        else:
            raise EntryShapeError("drop-set edits target the weight or one phase's reps")
    elif isinstance(exercise, PlainExercise):
        if sub_index is not None or field not in ("weight", "reps"):
            raise EntryShapeError("plain edits target weight or reps of a set")
        setattr(target, field, coerce_measure(value))
    else:
        raise TypeError(f"unknown exercise variant: {type(exercise).__name__}")
    return updated

def apply_selectable_edit(
    entry: SelectableEntry, field: str, value: Any, set_index: int | None = None
) -> SelectableEntry:
    updated = entry.model_copy(deep=True)
    if set_index is None:
        if field == "selected":
            updated.selected = bool(value)
        elif field in ("exerciseNotes", "exercise_notes"):
            updated.exercise_notes = value
        else:
            raise EntryShapeError(f"{field!r} is not an entry field")
        return updated
    if field not in ("weight", "reps"):
        raise EntryShapeError("set edits target weight or reps")
    setattr(updated.sets[set_index], field, coerce_measure(value))
    return updated
