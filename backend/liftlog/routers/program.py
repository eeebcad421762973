from datetime import date

from fastapi import APIRouter, Depends, Query

from liftlog.errors import NotFoundError
from liftlog.program import CYCLE_DAYS, CYCLE_LENGTH, WORKOUTS, ProgramDay, Workout, cycle_day_for, get_day, get_workout, resolve_cycle_day
from liftlog.schemas.base import CamelModel
from liftlog.settings import Settings, get_settings

router = APIRouter(prefix="/api/program", tags=["program"])

class ProgramRead(CamelModel):
    start_date: date
    days: list[ProgramDay]
    workouts: dict[str, Workout]

class CycleRead(CamelModel):
    cycle_day: int
    auto_cycle_day: int
    override: int | None = None
    day: ProgramDay
    workout: Workout | None = None

@router.get("", response_model=ProgramRead)
def read_program(settings: Settings = Depends(get_settings)):
    return ProgramRead(start_date=settings.PROGRAM_START_DATE, days=list(CYCLE_DAYS), workouts=WORKOUTS)

@router.get("/cycle", response_model=CycleRead)
def read_cycle(
    on: date | None = Query(None, alias="date"),
    override: int | None = Query(None, ge=1, le=CYCLE_LENGTH),
    settings: Settings = Depends(get_settings),
):
    auto = cycle_day_for(on or date.today(), settings.PROGRAM_START_DATE)
    position = resolve_cycle_day(auto, override)
    day = get_day(position)
    return CycleRead(
        cycle_day=position,
        auto_cycle_day=auto,
        override=override,
        day=day,
        workout=get_workout(day.workout_ref) if day.workout_ref else None,
    )

@router.get("/workouts/{workout_id}", response_model=Workout)
def read_workout(workout_id: str):
    workout = get_workout(workout_id)
    if workout is None:
        raise NotFoundError("Workout not found")
    return workout
