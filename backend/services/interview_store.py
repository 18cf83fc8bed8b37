# services/interview_store.py
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models import Interview

logger = logging.getLogger("interview_store")


def get_by_call_id(db: Session, call_id: str) -> Optional[Interview]:
    """The record for ``call_id``, or None. call_id is unique so there is at most one."""
    row = db.execute(
        select(Interview).where(Interview.call_id == call_id).limit(1)
    ).scalar_one_or_none()
    if row is None:
        logger.info("interview not found", extra={"call_id": call_id})
    return row


def list_all(db: Session, limit: Optional[int] = None) -> List[Interview]:
    stmt = select(Interview).order_by(Interview.created_at.desc(), Interview.id.asc())
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())
