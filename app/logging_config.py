import json
import logging
import sys
from datetime import datetime, UTC
from typing import Any

from app.config import settings
from app.middleware.request_context import get_profile_id, get_request_id

# Domain identifiers and access-log fields copied from `extra=` into the payload
STRUCTURED_EXTRAS = (
    "profile_id",
    "tenant_id",
    "payment_id",
    "property_id",
    "method",
    "path",
    "status_code",
    "latency_ms",
    "tenants_affected",
)


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line.

    Always carries ts, level, logger and message; request_id and profile_id
    come from the request context, other identifiers from STRUCTURED_EXTRAS
    when the call site passed them.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        rid = get_request_id()
        if rid:
            payload["request_id"] = rid

        profile_id = get_profile_id()
        if profile_id:
            payload["profile_id"] = profile_id

        for key in STRUCTURED_EXTRAS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging() -> None:
    """Route every logger through one JSON stdout handler at settings.LOG_LEVEL"""
    level = settings.LOG_LEVEL.upper()

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(settings.SQL_LOG_LEVEL.upper())
