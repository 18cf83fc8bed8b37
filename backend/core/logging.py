# backend/core/logging.py
import json
import logging
from typing import Any

from core.request_id import get_request_id

# attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class RequestIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = get_request_id()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # optional extra fields
        for key, val in record.__dict__.items():
            if key in _RESERVED or key.startswith("_"):
                continue
            payload[key] = val
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_json_logging(level: int | str = logging.INFO, json_logs: bool = True):
    root = logging.getLogger()
    root.handlers.clear()
    h = logging.StreamHandler()
    if json_logs:
        h.setFormatter(JsonFormatter())
    else:
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"))
    h.addFilter(RequestIDFilter())
    root.addHandler(h)
    root.setLevel(level.upper() if isinstance(level, str) else level)
