import json
import threading
import uuid
from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from liftlog.db import SessionLocal, engine
from liftlog.errors import NotFoundError, StoreError
from liftlog.repositories.kv_store import SqlKeyValueStore
from liftlog.repositories.session_repo import SessionRepository, sessions_key
from liftlog.schemas.session import SessionRecord

def owner(): return f"cm_{uuid.uuid4().hex[:12]}"

def record(id, day="2025-12-01", **kw):
    return SessionRecord(id=id, workout_id="upper_a", date=date.fromisoformat(day), cycle_day=1, **kw)

@pytest.fixture
def db():
    db = SessionLocal()
    yield db
    db.close()

def test_missing_key_lists_empty(db):
    assert SessionRepository(SqlKeyValueStore(db)).list(owner()) == []

def test_append_to_new_owner(db):
    sid = owner()
    repo = SessionRepository(SqlKeyValueStore(db))
    r = record("100")
    repo.append(sid, r)
    assert repo.list(sid) == [r]

def test_append_prepends(db):
    sid = owner()
    repo = SessionRepository(SqlKeyValueStore(db))
    repo.append(sid, record("1", "2025-12-01"))
    repo.append(sid, record("2", "2025-11-20"))
    assert [r.id for r in repo.list(sid)] == ["2", "1"]

def test_append_same_id_keeps_one_copy(db):
    sid = owner()
    repo = SessionRepository(SqlKeyValueStore(db))
    repo.append(sid, record("1", notes="first"))
    repo.append(sid, record("1", notes="again"))
    stored = repo.list(sid)
    assert len(stored) == 1 and stored[0].notes == "again"

def test_replace_stamps_updated_at(db):
    sid = owner()
    repo = SessionRepository(SqlKeyValueStore(db))
    repo.append(sid, record("1"))
    saved = repo.replace(sid, "1", record("1", notes="edited"))
    assert saved.updated_at is not None
    assert repo.get(sid, "1").notes == "edited"

def test_replace_unknown_id_leaves_store_untouched(db):
    sid = owner()
    store = SqlKeyValueStore(db)
    repo = SessionRepository(store)
    repo.append(sid, record("1"))
    before = json.dumps(store.get(sessions_key(sid)), sort_keys=True)
    with pytest.raises(NotFoundError):
        repo.replace(sid, "nope", record("nope"))
    assert json.dumps(store.get(sessions_key(sid)), sort_keys=True) == before

def test_remove_unknown_id_is_noop(db):
    sid = owner()
    repo = SessionRepository(SqlKeyValueStore(db))
    repo.append(sid, record("1"))
    before = repo.list(sid)
    repo.remove(sid, "nope")
    assert repo.list(sid) == before

def test_remove(db):
    sid = owner()
    repo = SessionRepository(SqlKeyValueStore(db))
    repo.append(sid, record("1"))
    repo.append(sid, record("2"))
    repo.remove(sid, "1")
    assert [r.id for r in repo.list(sid)] == ["2"]

def test_overlapping_appends_last_writer_wins(db):
    """A writer that read before another's append overwrites it."""
    sid = owner()
    store = SqlKeyValueStore(db)

    class StaleRead:
        def __init__(self, snapshot): self.snapshot = snapshot
        def get(self, key): return self.snapshot
        def set(self, key, value): store.set(key, value)

    snapshot = store.get(sessions_key(sid))          # both writers see an empty list
    SessionRepository(store).append(sid, record("a"))
    SessionRepository(StaleRead(snapshot)).append(sid, record("b"))
    assert [r.id for r in SessionRepository(store).list(sid)] == ["b"]

def test_store_errors_are_wrapped():
    class BrokenSession:
        def get(self, *a): raise OperationalError("SELECT", {}, Exception("db down"))
        def get_bind(self): return engine
        def execute(self, *a): raise OperationalError("INSERT", {}, Exception("db down"))
        def rollback(self): pass
    store = SqlKeyValueStore(BrokenSession())
    with pytest.raises(StoreError) as exc:
        store.get("sessions:x")
    assert "db down" in exc.value.details
    with pytest.raises(StoreError):
        store.set("sessions:x", [])

def test_concurrent_appends_to_new_owner_last_writer_wins():
    """Both writers read the missing key before either writes; neither fails."""
    sid = owner()
    both_read = threading.Barrier(2, timeout=10)
    errors = []

    class ReadThenWait:
        def __init__(self, inner): self.inner = inner
        def get(self, key):
            value = self.inner.get(key)
            both_read.wait()
            return value
        def set(self, key, value): self.inner.set(key, value)

    def writer(record_id):
        db = SessionLocal()
        try:
            SessionRepository(ReadThenWait(SqlKeyValueStore(db))).append(sid, record(record_id))
        except Exception as e:
            errors.append(e)
        finally:
            db.close()

    threads = [threading.Thread(target=writer, args=(rid,)) for rid in ("a", "b")]
    for t in threads: t.start()
    for t in threads: t.join()

    assert errors == []
    db = SessionLocal()
    stored = SessionRepository(SqlKeyValueStore(db)).list(sid)
    db.close()
    assert len(stored) == 1 and stored[0].id in {"a", "b"}

def test_set_overwrites_existing_key(db):
    store = SqlKeyValueStore(db)
    key = sessions_key(owner())
    store.set(key, [{"id": "1"}])
    store.set(key, [{"id": "2"}])
    assert store.get(key) == [{"id": "2"}]
