# liftlog/repositories/kv_store.py
from __future__ import annotations
from typing import Any, Protocol

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.errors import StoreError
from liftlog.models import KVEntry

_UPSERTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}

class KeyValueStore(Protocol):
    """The only persistence primitive: whole values addressed by string keys."""
    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any) -> None: ...

class SqlKeyValueStore:
    """KeyValueStore over the ``kv_entries`` table."""
    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Any | None:
        try:
            entry = self.db.get(KVEntry, key)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("Failed to read from store", details=str(e)) from e
        if entry is None:
            return None
        # drop the identity-map copy so the next read sees other writers
        self.db.expunge(entry)
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite in one statement; concurrent writers to a new
        key both succeed and the later one wins."""
        try:
            insert = _UPSERTS.get(self.db.get_bind().dialect.name)
            if insert is None:
                raise StoreError(f"Unsupported database dialect: {self.db.get_bind().dialect.name}")
            stmt = insert(KVEntry).values(key=key, value=value, updated_at=func.now())
            stmt = stmt.on_conflict_do_update(
                index_elements=[KVEntry.key],
                set_={"value": stmt.excluded["value"], "updated_at": func.now()},
            )
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("Failed to write to store", details=str(e)) from e
