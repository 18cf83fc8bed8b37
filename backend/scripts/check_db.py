# scripts/check_db.py
import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from db.session import SessionLocal
from services import interview_store
from services.formatting import format_datetime, format_duration

def main():
    db = SessionLocal()
    try:
        rows = interview_store.list_all(db)
        print(f"Interviews ({len(rows)}):")
        for r in rows:
            print(
                f"  call_id={r.call_id} participant={r.participant_id or 'Unknown'} "
                f"status={r.completion_status} at={format_datetime(r.created_at)} "
                f"duration={format_duration(r.duration)} vars={r.extracted_variables}"
            )
    finally:
        db.close()

if __name__ == "__main__":
    main()
