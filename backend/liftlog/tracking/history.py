"""Looking back at earlier sessions: ordering, previous-session lookup and
the one-line summaries shown next to each exercise.
"""
from __future__ import annotations

import datetime as dt
from typing import Iterable

from liftlog.program.types import DropSetExercise, PlainExercise, SupersetExercise, Workout
from liftlog.schemas.base import CamelModel
from liftlog.schemas.session import (
    ExerciseEntry,
    PlainSet,
    SelectableEntry,
    SessionRecord,
    SupersetSet,
    DropSetSet,
    is_empty,
)

NO_DATA = "No data recorded"

def sort_recent_first(records: Iterable[SessionRecord]) -> list[SessionRecord]:
    """Most recent ``date`` first; undated records sink to the end."""
    return sorted(records, key=lambda r: r.date or dt.date.min, reverse=True)

def find_previous(history: Iterable[SessionRecord], workout_id: str) -> SessionRecord | None:
    """Most recent session of the same workout.

    ``history`` must already be sorted most-recent-first.
    """
    return next((r for r in history if r.workout_id == workout_id), None)

def _field(value) -> str:
    return "?" if is_empty(value) else str(value)

def _plain(s: PlainSet) -> str:
    return f"{_field(s.weight)}×{_field(s.reps)}"

def summarize_plain_sets(sets: Iterable) -> str:
    return " / ".join(
        _plain(s) for s in sets
        if isinstance(s, PlainSet) and not (is_empty(s.weight) and is_empty(s.reps))
    )

def summarize_superset_sets(sets: Iterable) -> str:
    return " | ".join(
        " + ".join(_plain(sub) for sub in s.sub_entries)
        for s in sets if isinstance(s, SupersetSet)
    )

def summarize_drop_sets(sets: Iterable) -> str:
    return " | ".join(
        f"{s.weight}lb: " + "/".join("" if is_empty(r) else str(r) for r in s.phase_reps)
        for s in sets if isinstance(s, DropSetSet) and not is_empty(s.weight)
    )

def summarize_entry(exercise, entry: ExerciseEntry | SelectableEntry) -> str:
    """Render an entry as one line, in the layout of ``exercise``'s variant.

    Sets of the wrong layout are skipped rather than rendered.
    """
    if isinstance(exercise, SupersetExercise):
        return summarize_superset_sets(entry.sets)
    if isinstance(exercise, DropSetExercise):
        return summarize_drop_sets(entry.sets)
    if isinstance(exercise, PlainExercise):
        return summarize_plain_sets(entry.sets)
    raise TypeError(f"unknown exercise variant: {type(exercise).__name__}")

class PreviousPerformance(CamelModel):
    variation: str | None = None
    text: str

class PreviousSession(CamelModel):
    record_id: str
    date: dt.date | None = None
    exercises: dict[str, PreviousPerformance] = {}
    additional_exercises: dict[str, PreviousPerformance] = {}
    replacement_exercises: dict[str, PreviousPerformance] = {}

def previous_performance(workout: Workout, previous: SessionRecord | None) -> PreviousSession | None:
    """Per-exercise summaries of ``previous`` for pre-fill and comparison.

    Exercises the record has no entry for (added to the program later, say)
    are left out. Optional exercises only count when they were selected.
    """
    if previous is None:
        return None
    view = PreviousSession(record_id=previous.id, date=previous.date)
    for ex in workout.core_exercises:
        entry = previous.exercises.get(ex.id)
        if entry is not None and entry.sets:
            view.exercises[ex.id] = PreviousPerformance(
                variation=entry.variation, text=summarize_entry(ex, entry)
            )
    for source, target, catalog in (
        (previous.additional_exercises, view.additional_exercises, workout.additional_exercises),
        (previous.replacement_exercises, view.replacement_exercises, workout.replacement_exercises),
    ):
        for ex in catalog:
            entry = source.get(ex.id)
            if entry is not None and entry.selected and entry.sets:
                target[ex.id] = PreviousPerformance(text=summarize_entry(ex, entry))
    return view

def summarize_record(workout: Workout | None, record: SessionRecord) -> dict[str, str]:
    """Summary line per logged core exercise, for the session detail view."""
    if workout is None:
        return {}
    return {
        ex.id: summarize_entry(ex, record.exercises[ex.id]) or NO_DATA
        for ex in workout.core_exercises
        if ex.id in record.exercises
    }
