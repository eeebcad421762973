"""Logged-session shapes, as stored under ``sessions:<sessionId>``.

Each set is one of three layouts, told apart by its keys:

* plain:     ``{"weight": 135, "reps": 8}``
* superset:  ``{"subEntries": [{"weight": .., "reps": ..}, ...]}``
* drop set:  ``{"weight": 60, "phaseReps": [12, 8, 6]}``

Numbers arrive from form inputs, so numeric strings are accepted and an empty
field is kept as ``""``.
"""
from __future__ import annotations

import math
import time
import datetime as dt
from typing import Annotated, Any, Literal, Union

from pydantic import BeforeValidator, ConfigDict, Discriminator, Field, Tag

from liftlog.schemas.base import CamelModel

EMPTY = ""

def coerce_measure(v: Any) -> int | float | str:
    if v is None:
        return EMPTY
    if isinstance(v, bool):
        raise ValueError("expected a number")
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return EMPTY
        try:
            v = float(v)
        except ValueError:
            raise ValueError(f"expected a number, got {v!r}")
    if not isinstance(v, (int, float)) or (isinstance(v, float) and not math.isfinite(v)):
        raise ValueError("expected a number")
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v

Measure = Annotated[Union[int, float, Literal[""]], BeforeValidator(coerce_measure)]

def is_empty(value: Any) -> bool:
    return value is None or value == EMPTY

class StoredModel(CamelModel):
    """Part of a stored record; unknown client fields survive a round trip."""
    model_config = ConfigDict(extra="allow")

class PlainSet(StoredModel):
    weight: Measure = EMPTY
    reps: Measure = EMPTY

class SupersetSet(StoredModel):
    sub_entries: list[PlainSet]

class DropSetSet(StoredModel):
    weight: Measure = EMPTY
    phase_reps: list[Measure]

def _set_layout(value: Any) -> str:
    keys = value.keys() if isinstance(value, dict) else getattr(value, "__dict__", {}).keys()
    if "subEntries" in keys or "sub_entries" in keys:
        return "superset"
    if "phaseReps" in keys or "phase_reps" in keys:
        return "drop_set"
    return "plain"

SetEntry = Annotated[
    Union[
        Annotated[PlainSet, Tag("plain")],
        Annotated[SupersetSet, Tag("superset")],
        Annotated[DropSetSet, Tag("drop_set")],
    ],
    Discriminator(_set_layout),
]

class ExerciseEntry(StoredModel):
    """Entry state for one core exercise."""
    variation: str | None = None
    sets: list[SetEntry] = Field(default_factory=list)
    exercise_notes: str = ""

class SelectableEntry(StoredModel):
    """Entry state for an additional or replacement exercise."""
    selected: bool = False
    sets: list[PlainSet] = Field(default_factory=list)
    exercise_notes: str = ""

def new_record_id() -> str:
    """Millisecond timestamp; unique enough for a single-user log."""
    return str(time.time_ns() // 1_000_000)

def _record_id(v: Any) -> Any:
    # clients built on Date.now() may send the id as a JSON number
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v

class SessionRecord(StoredModel):
    id: Annotated[str, BeforeValidator(_record_id)] = Field(default_factory=new_record_id)
    session_id: str | None = None
    workout_id: str | None = None
    workout_name: str | None = None
    date: dt.date | None = None
    cycle_day: Annotated[int, Field(ge=1, le=9)] | None = None
    exercises: dict[str, ExerciseEntry] = Field(default_factory=dict)
    additional_exercises: dict[str, SelectableEntry] = Field(default_factory=dict)
    replacement_exercises: dict[str, SelectableEntry] = Field(default_factory=dict)
    notes: str = ""
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

# Request / response bodies

class SessionWrite(CamelModel):
    # presence is checked by the route so a missing field maps to 400, not 422
    session_id: str | None = None
    session: dict[str, Any] | None = None

class SessionList(CamelModel):
    sessions: list[SessionRecord]

class SessionWriteResult(CamelModel):
    success: bool = True
    session: SessionRecord

class DeleteResult(CamelModel):
    success: bool = True
