"""JSON log output for the ranking API.

Every record is stamped with the id of the request being served (if any), so the
access line written by the request-id middleware and the adapter/store lines it
triggers can be joined on `request_id`.
"""

import contextvars
import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

from ranking_api.core.config import settings

request_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("request_id", default=None)

_QUIET_LOGGERS = ("uvicorn.access", "httpx", "asyncio")


class RequestIdFilter(logging.Filter):
    """Copy the current request id onto the record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_var.get()
        return True


class RankingJsonFormatter(jsonlogger.JsonFormatter):
    """One JSON object per record: level, logger, event, request_id and any extras."""

    def add_fields(self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["event"] = log_record.pop("message", record.getMessage())
        log_record["env"] = settings.ENV
        if log_record.get("request_id") is None:
            log_record.pop("request_id", None)


def setup_logging() -> None:
    """Route all logging to stdout as JSON at LOG_LEVEL."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(RankingJsonFormatter("%(asctime)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S%z"))
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # DB_ECHO turns on statement logging through the same handler
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DB_ECHO else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
