import datetime as dt
import json
import logging
import logging.config
from dataclasses import replace
from typing import Any, Self

from .config import Settings

logger = logging.getLogger("license_notice.logging")

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``error_code`` extras become ``code``."""

    def format(self: Self, record: logging.LogRecord) -> str:
        created = dt.datetime.fromtimestamp(record.created, tz=dt.UTC)
        payload: dict[str, object] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        code = getattr(record, "error_code", None)
        if code:
            payload["code"] = code
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return a ``dictConfig`` mapping; all handlers write to stderr or a file."""
    formatter = "json" if settings.log_json else "plain"
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": formatter,
        },
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": settings.log_file,
            "maxBytes": settings.log_max_bytes,
            "backupCount": settings.log_backup_count,
            "encoding": "utf-8",
            "formatter": "json",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": JsonFormatter},
            "plain": {"format": PLAIN_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": settings.log_level, "handlers": list(handlers)},
    }


def configure_logging(settings: Settings) -> None:
    """Apply ``settings``; an unusable log file degrades to stderr-only logging."""
    try:
        logging.config.dictConfig(build_logging_config(settings))
    except ValueError as exc:
        if not settings.log_file:
            raise
        logging.config.dictConfig(build_logging_config(replace(settings, log_file=None)))
        logger.warning(
            "Cannot log to %s (%s); logging to stderr only",
            settings.log_file,
            exc.__cause__ or exc,
        )
