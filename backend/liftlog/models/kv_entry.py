from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from liftlog.db import Base

class KVEntry(Base):
    __tablename__ = "kv_entries"
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[object] = mapped_column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    updated_at: Mapped[DateTime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
