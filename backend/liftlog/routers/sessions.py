import logging
from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError as PydanticValidationError

from liftlog.deps.store import get_session_repo
from liftlog.errors import NotFoundError, StoreError, ValidationError
from liftlog.program import get_workout
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.session import DeleteResult, SessionList, SessionRecord, SessionWrite, SessionWriteResult
from liftlog.tracking.history import sort_recent_first, summarize_record

log = logging.getLogger("uvicorn")

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

def _parse_record(raw: dict) -> SessionRecord:
    try:
        return SessionRecord.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError("Invalid session data", details=str(e))

@router.get("", response_model=SessionList)
def list_sessions(
    session_id: str | None = Query(None, alias="sessionId"),
    repo: SessionRepository = Depends(get_session_repo),
):
    if not session_id:
        raise ValidationError("Session ID required")
    try:
        records = repo.list(session_id)
    except StoreError as e:
        log.error("Error fetching sessions for %s: %s", session_id, e)
        raise StoreError("Failed to fetch sessions") from e
    return SessionList(sessions=sort_recent_first(records))

@router.post("", response_model=SessionWriteResult)
def save_session(payload: SessionWrite, repo: SessionRepository = Depends(get_session_repo)):
    if not payload.session_id or payload.session is None:
        raise ValidationError("Session ID and session data required")
    record = _parse_record(payload.session)
    if record.session_id is None:
        record.session_id = payload.session_id
    try:
        saved = repo.append(payload.session_id, record)
    except StoreError as e:
        log.error("Error saving session for %s: %s", payload.session_id, e)
        raise StoreError("Failed to save session", details=e.details or "Unknown error") from e
    return SessionWriteResult(session=saved)

@router.put("", response_model=SessionWriteResult)
def update_session(payload: SessionWrite, repo: SessionRepository = Depends(get_session_repo)):
    if not payload.session_id or payload.session is None or not payload.session.get("id"):
        raise ValidationError("Session ID and session data required")
    record = _parse_record(payload.session)
    try:
        saved = repo.replace(payload.session_id, record.id, record)
    except StoreError as e:
        log.error("Error updating session %s for %s: %s", record.id, payload.session_id, e)
        raise StoreError("Failed to update session", details=e.details or "Unknown error") from e
    return SessionWriteResult(session=saved)

@router.delete("", response_model=DeleteResult)
def delete_session(
    session_id: str | None = Query(None, alias="sessionId"),
    workout_session_id: str | None = Query(None, alias="workoutSessionId"),
    repo: SessionRepository = Depends(get_session_repo),
):
    if not session_id or not workout_session_id:
        raise ValidationError("Session ID and workout session ID required")
    try:
        repo.remove(session_id, workout_session_id)
    except StoreError as e:
        log.error("Error deleting session %s for %s: %s", workout_session_id, session_id, e)
        raise StoreError("Failed to delete session") from e
    return DeleteResult()

@router.get("/{record_id}")
def session_detail(
    record_id: str,
    session_id: str | None = Query(None, alias="sessionId"),
    repo: SessionRepository = Depends(get_session_repo),
):
    if not session_id:
        raise ValidationError("Session ID required")
    try:
        record = repo.get(session_id, record_id)
    except StoreError as e:
        log.error("Error fetching session %s for %s: %s", record_id, session_id, e)
        raise StoreError("Failed to fetch session") from e
    if record is None:
        raise NotFoundError("Session not found")
    return {
        "session": record.model_dump(mode="json", by_alias=True),
        "summary": summarize_record(get_workout(record.workout_id or ""), record),
    }
