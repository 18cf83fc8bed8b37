# scripts/copy_call_id.py
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import argparse

from core.config import settings
from db.session import SessionLocal
from services import interview_store
from services.clipboard import ClipboardUnavailable, CopyAction, SystemClipboard


def main(argv=None, clipboard=None):
    parser = argparse.ArgumentParser(description="Copy an interview's call ID to the system clipboard.")
    parser.add_argument("call_id")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        row = interview_store.get_by_call_id(db, args.call_id)
    finally:
        db.close()

    if row is None:
        print(f"Interview not found: {args.call_id}", file=sys.stderr)
        return 1

    try:
        clipboard = clipboard or SystemClipboard()
    except ClipboardUnavailable as e:
        print(str(e), file=sys.stderr)
        return 2

    with CopyAction(clipboard, reset_after=settings.copy_reset_seconds) as action:
        action.copy(row.call_id)
        print(f"Copied call ID {row.call_id}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
