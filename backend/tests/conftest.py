# backend/tests/conftest.py
import os
import sys
import pathlib
import tempfile
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# -------------------------------------------------------------------------------------------------
# Path & environment setup (must happen BEFORE importing the app)
# -------------------------------------------------------------------------------------------------

# Ensure project root (backend/) is importable
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Temp SQLite DB file for tests
TEST_DB_FILE = str(pathlib.Path(tempfile.gettempdir()) / "interview_dashboard_test.sqlite")

os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_FILE}"
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")
os.environ["DISPLAY_TIMEZONE"] = "UTC"
os.environ.setdefault("COPY_RESET_SECONDS", "2")
os.environ.setdefault("JSON_LOGS", "true")


# -------------------------------------------------------------------------------------------------
# Import app & modules AFTER env vars
# -------------------------------------------------------------------------------------------------
from main import app
from api import deps
from db import models as m
from db.session import Base

# -------------------------------------------------------------------------------------------------
# Test DB engine + session factory
# -------------------------------------------------------------------------------------------------
engine = create_engine(
    f"sqlite:///{TEST_DB_FILE}", future=True, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

# Fresh schema each test
@pytest.fixture(scope="function", autouse=True)
def reset_db():
    """Drop + recreate DB before each test function to ensure isolation"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db():
    """Yield a fresh DB session per test function."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

def _override_get_db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

# Override the app's DB dependency
app.dependency_overrides[deps.get_db] = _override_get_db


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


BASE_TIME = datetime(2025, 10, 19, 15, 45, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def make_interview(db):
    """
    Insert an interview row. Each call is one hour older than the previous one,
    so list order (newest first) equals insertion order.
    """
    counter = {"n": 0}

    def _make(call_id: str, **kwargs):
        fields = {
            "participant_id": None,
            "duration": 0,
            "completion_status": m.CompletionStatus.completed.value,
            "transcript": [],
            "extracted_variables": None,
            "created_at": BASE_TIME - timedelta(hours=counter["n"]),
        }
        fields.update(kwargs)
        counter["n"] += 1
        row = m.Interview(call_id=call_id, **fields)
        db.add(row)
        db.commit()
        db.refresh(row)
        return row

    return _make
