"""Document ORM model - one row per document of every collection."""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Integer, JSON
from churchbook.database import Base


def _now():
    return datetime.now(timezone.utc)


class Document(Base):
    __tablename__ = "documents"

    collection = Column(String(64), primary_key=True)
    doc_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    data = Column(JSON, nullable=False, default=dict)
    version = Column(Integer, nullable=False)
    # Python-side, microsecond resolution; collection reads order by created_at.
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)

    # Optimistic locking: a stale UPDATE raises StaleDataError at flush.
    __mapper_args__ = {"version_id_col": version}
