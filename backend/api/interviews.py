# api/interviews.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.deps import get_db, store_unavailable
from schemas.interview import InterviewDetailOut, InterviewOut
from services import interview_store
from services.formatting import format_date, format_duration, format_time
from services.interview_filter import InterviewFilter, filter_interviews

router = APIRouter(prefix="/api/interviews", tags=["interviews"])


@router.get("", response_model=List[InterviewOut])
def list_interviews(
    selector: InterviewFilter = Query(InterviewFilter.all, alias="filter"),
    db: Session = Depends(get_db),
):
    try:
        rows = interview_store.list_all(db)
    except SQLAlchemyError as exc:
        raise store_unavailable(exc)
    return filter_interviews([InterviewOut.model_validate(r) for r in rows], selector)


@router.get("/{call_id:path}", response_model=InterviewDetailOut)
def get_interview(call_id: str, db: Session = Depends(get_db)):
    try:
        row = interview_store.get_by_call_id(db, call_id)
    except SQLAlchemyError as exc:
        raise store_unavailable(exc)
    if not row:
        raise HTTPException(status_code=404, detail="Interview not found")

    interview = InterviewOut.model_validate(row)
    return InterviewDetailOut(
        **interview.model_dump(),
        date=format_date(interview.created_at),
        time=format_time(interview.created_at),
        duration_text=format_duration(interview.duration),
    )
