# api/deps.py
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from db.session import SessionLocal

logger = logging.getLogger("api")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def store_unavailable(exc: SQLAlchemyError) -> HTTPException:
    logger.exception("interview store query failed", exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Interview store unavailable",
    )
