"""
Central logging configuration.

Goals:
- One shared logging setup for the API process and `python -m` helpers.
- JSON logs to stdout for easy aggregation.
- Correlate logs with request_id / username.
- LOG_SQL=1 routes SQLAlchemy statement logging through the same handler,
  which is the quickest way to see the SQL the fragment builders produce.

No external deps.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.config import dictConfig

from jobly.core.request_context import get_context

# LogRecord attributes that are never copied into the JSON payload
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        base.update(get_context())

        # `extra={...}` fields; anything json can't take is stringified
        for k, v in record.__dict__.items():
            if k in _RECORD_ATTRS or k.startswith("_") or k in base:
                continue
            try:
                json.dumps(v)
                base[k] = v
            except (TypeError, ValueError):
                base[k] = str(v)

        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(level: str | None = None) -> None:
    """
    Call once at process startup. `level` overrides LOG_LEVEL (default INFO).
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    sql_level = "INFO" if _env_flag("LOG_SQL") else "WARNING"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": "jobly.core.logging_config.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": sys.stdout,
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            # Uvicorn loggers
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
            # Statements + bound params
            "sqlalchemy.engine": {"level": sql_level, "handlers": ["console"], "propagate": False},
        },
    }

    dictConfig(logging_config)
