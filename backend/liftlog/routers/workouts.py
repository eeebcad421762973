import logging
from datetime import date

from fastapi import APIRouter, Depends, Query

from liftlog.deps.store import get_session_repo
from liftlog.errors import NotFoundError, StoreError, ValidationError
from liftlog.program import CYCLE_LENGTH, cycle_day_for, get_workout, resolve_cycle_day
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.base import CamelModel
from liftlog.schemas.session import SessionRecord
from liftlog.settings import Settings, get_settings
from liftlog.tracking.entries import new_session_record
from liftlog.tracking.history import PreviousSession, find_previous, previous_performance, sort_recent_first

log = logging.getLogger("uvicorn")

router = APIRouter(prefix="/api/workouts", tags=["workouts"])

class DraftRead(CamelModel):
    session: SessionRecord
    previous: PreviousSession | None = None

@router.get("/{workout_id}/draft", response_model=DraftRead)
def draft_session(
    workout_id: str,
    session_id: str | None = Query(None, alias="sessionId"),
    on: date | None = Query(None, alias="date"),
    override: int | None = Query(None, ge=1, le=CYCLE_LENGTH),
    repo: SessionRepository = Depends(get_session_repo),
    settings: Settings = Depends(get_settings),
):
    """Blank, unsaved record for a workout, with last time's numbers alongside."""
    if not session_id:
        raise ValidationError("Session ID required")
    workout = get_workout(workout_id)
    if workout is None:
        raise NotFoundError("Workout not found")

    day = on or date.today()
    cycle_day = resolve_cycle_day(cycle_day_for(day, settings.PROGRAM_START_DATE), override)
    try:
        history = sort_recent_first(repo.list(session_id))
    except StoreError as e:
        log.error("Error fetching sessions for %s: %s", session_id, e)
        raise StoreError("Failed to fetch sessions") from e

    draft = new_session_record(workout, session_id=session_id, day=day, cycle_day=cycle_day)
    return DraftRead(session=draft, previous=previous_performance(workout, find_previous(history, workout.id)))
