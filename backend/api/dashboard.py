# api/dashboard.py
import pathlib
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.deps import get_db, store_unavailable
from core.config import settings
from schemas.interview import InterviewOut
from services import interview_store
from services.clipboard import CopyButton
from services.formatting import (
    duration_seconds,
    format_date,
    format_datetime,
    format_duration,
    format_time,
)
from services.interview_filter import (
    FILTER_OPTIONS,
    InterviewFilter,
    count_by_filter,
    filter_interviews,
)

router = APIRouter(tags=["dashboard"])

TEMPLATES_DIR = pathlib.Path(__file__).resolve().parents[1] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

templates.env.filters["date"] = format_date
templates.env.filters["time"] = format_time
templates.env.filters["datetime"] = format_datetime
templates.env.filters["seconds"] = duration_seconds
templates.env.filters["duration"] = format_duration
templates.env.filters["quote_path"] = lambda v: quote(str(v), safe="")
templates.env.globals["CopyButton"] = CopyButton


@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url="/dashboard", status_code=307)


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(
    request: Request,
    selector: InterviewFilter = Query(InterviewFilter.all, alias="filter"),
    db: Session = Depends(get_db),
):
    try:
        rows = interview_store.list_all(db, limit=settings.dashboard_list_limit)
    except SQLAlchemyError as exc:
        raise store_unavailable(exc)

    parsed = [InterviewOut.model_validate(r) for r in rows]
    interviews = filter_interviews(parsed, selector)
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "interviews": interviews,
            "selector": selector,
            "filter_options": FILTER_OPTIONS,
            "counts": count_by_filter(parsed),
        },
    )


@router.get("/interview/{call_id:path}", response_class=HTMLResponse)
def interview_detail(request: Request, call_id: str, db: Session = Depends(get_db)):
    try:
        row = interview_store.get_by_call_id(db, call_id)
    except SQLAlchemyError as exc:
        raise store_unavailable(exc)

    if row is None:
        return templates.TemplateResponse(
            request, "not_found.html", {"call_id": call_id}, status_code=404
        )

    return templates.TemplateResponse(
        request, "interview_detail.html", {"interview": InterviewOut.model_validate(row)}
    )
