# db/models.py
import enum
from typing import Optional
from uuid import uuid4

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    JSON,
    func,
    text,
)

from .session import Base


class CompletionStatus(str, enum.Enum):
    completed = "completed"
    in_progress = "in_progress"
    failed = "failed"

    @classmethod
    def parse(cls, raw) -> Optional["CompletionStatus"]:
        """Known status for a stored value ('in-progress' and case variants included), else None."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower().replace("-", "_").replace(" ", "_"))
        except ValueError:
            return None


class Interview(Base):
    """
    One voice-interview call. Rows are written by the call ingestion process;
    the dashboard only reads them.
    """
    __tablename__ = "interviews"

    id = Column(String(32), primary_key=True, default=lambda: uuid4().hex)
    call_id = Column(String(255), nullable=False, unique=True, index=True)
    participant_id = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    duration = Column(Integer, nullable=False, default=0, server_default="0")  # milliseconds

    # plain string: the ingester owns the vocabulary, CompletionStatus.parse maps the known values
    completion_status = Column(
        String(32),
        nullable=False,
        default=CompletionStatus.in_progress.value,
        server_default=CompletionStatus.in_progress.value,
    )

    # [{"role": "agent" | "user", "message": "..."}]
    transcript = Column(JSON, nullable=False, default=list, server_default=text("'[]'"))
    # {"is_woman": bool, "favorite_food": str, "food_reason": str}, every key optional
    extracted_variables = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<Interview call_id={self.call_id!r} status={self.completion_status}>"
