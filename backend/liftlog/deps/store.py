# liftlog/deps/store.py
from fastapi import Depends
from sqlalchemy.orm import Session

from liftlog.db import get_db
from liftlog.repositories.kv_store import SqlKeyValueStore
from liftlog.repositories.session_repo import SessionRepository

def get_session_repo(db: Session = Depends(get_db)) -> SessionRepository:
    return SessionRepository(SqlKeyValueStore(db))
