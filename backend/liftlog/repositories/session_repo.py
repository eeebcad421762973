from __future__ import annotations
import logging
from datetime import datetime, timezone

from pydantic import TypeAdapter

from liftlog.errors import NotFoundError
from liftlog.repositories.kv_store import KeyValueStore
from liftlog.schemas.session import SessionRecord

log = logging.getLogger(__name__)

_records = TypeAdapter(list[SessionRecord])

def sessions_key(session_id: str) -> str:
    return f"sessions:{session_id}"

class SessionRepository:
    """Session records of one owner, stored as a single list value.

    Every operation reads the whole list, changes it in memory and writes it
    back. There is no locking: two overlapping writers for the same owner race
    and the last write wins for the entire list.
    """
    def __init__(self, store: KeyValueStore):
        self.store = store

    def _read(self, session_id: str) -> list[SessionRecord]:
        raw = self.store.get(sessions_key(session_id))
        return _records.validate_python(raw or [])

    def _write(self, session_id: str, records: list[SessionRecord]) -> None:
        self.store.set(sessions_key(session_id), _records.dump_python(records, mode="json", by_alias=True))
        log.debug("wrote %d session(s) for %s", len(records), session_id)

    # READS
    def list(self, session_id: str) -> list[SessionRecord]:
        """Stored order, unsorted; callers sort by date for display."""
        return self._read(session_id)

    def get(self, session_id: str, record_id: str) -> SessionRecord | None:
        return next((r for r in self._read(session_id) if r.id == record_id), None)

    # WRITES
    def append(self, session_id: str, record: SessionRecord) -> SessionRecord:
        records = self._read(session_id)
        # ids are unique within the list; a re-sent record replaces its older copy
        self._write(session_id, [record, *(r for r in records if r.id != record.id)])
        return record

    def replace(self, session_id: str, record_id: str, record: SessionRecord) -> SessionRecord:
        records = self._read(session_id)
        if not any(r.id == record_id for r in records):
            raise NotFoundError("Session not found")
        stamped = record.model_copy(update={"id": record_id, "updated_at": datetime.now(timezone.utc)})
        self._write(session_id, [stamped if r.id == record_id else r for r in records])
        return stamped

    def remove(self, session_id: str, record_id: str) -> None:
        records = self._read(session_id)
        self._write(session_id, [r for r in records if r.id != record_id])
