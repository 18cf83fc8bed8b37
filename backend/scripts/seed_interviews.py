# scripts/seed_interviews.py
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import argparse
from datetime import datetime, timedelta, timezone

from db.session import SessionLocal
from db.init_db import init_db
from db import models as db_models


DEMO = [
    {
        "call_id": "call-demo-001",
        "participant_id": "P-1001",
        "duration": 65000,
        "completion_status": db_models.CompletionStatus.completed.value,
        "extracted_variables": {"is_woman": True, "favorite_food": "pizza", "food_reason": "It reminds me of Naples"},
        "transcript": [
            {"role": "agent", "message": "Hi! Are you a woman?"},
            {"role": "user", "message": "Yes."},
            {"role": "agent", "message": "What's your favorite food, and why?"},
            {"role": "user", "message": "Pizza. It reminds me of Naples."},
        ],
    },
    {
        "call_id": "call-demo-002",
        "participant_id": "P-1002",
        "duration": 42400,
        "completion_status": db_models.CompletionStatus.completed.value,
        "extracted_variables": {"is_woman": False, "favorite_food": "sushi"},
        "transcript": [
            {"role": "agent", "message": "Hi! Are you a woman?"},
            {"role": "user", "message": "No."},
            {"role": "agent", "message": "What's your favorite food?"},
            {"role": "user", "message": "Sushi."},
        ],
    },
    {
        "call_id": "call-demo-003",
        "participant_id": None,
        "duration": 0,
        "completion_status": db_models.CompletionStatus.in_progress.value,
        "extracted_variables": None,
        "transcript": [{"role": "agent", "message": "Hi! Are you a woman?"}],
    },
    {
        "call_id": "call-demo-004",
        "participant_id": "P-1004",
        "duration": 9000,
        "completion_status": db_models.CompletionStatus.failed.value,
        "extracted_variables": {"favorite_food": "tacos"},
        "transcript": [],
    },
]


def main():
    parser = argparse.ArgumentParser(description="Insert demo interview records.")
    parser.add_argument("--create-tables", action="store_true", help="create missing tables first")
    args = parser.parse_args()

    if args.create_tables:
        init_db()

    now = datetime.now(timezone.utc)
    db = SessionLocal()
    try:
        for i, rec in enumerate(DEMO):
            exists = db.query(db_models.Interview).filter(db_models.Interview.call_id == rec["call_id"]).one_or_none()
            if exists:
                print(f"Skipped {rec['call_id']} (already present)")
                continue
            db.add(db_models.Interview(created_at=now - timedelta(hours=i * 5), **rec))
            db.commit()
            print(f"Created interview {rec['call_id']}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
