# backend/api/ops.py
import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from db.session import engine

router = APIRouter(prefix="/ops", tags=["ops"])
logger = logging.getLogger("ops")

@router.get("/db")
def db_status():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"db": "online"}
    except SQLAlchemyError:
        logger.warning("database ping failed", exc_info=True)
        return {"db": "offline"}
