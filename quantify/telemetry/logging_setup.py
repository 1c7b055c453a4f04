"""Centralized logging configuration for quantify.

Library modules only ever call ``logging.getLogger("quantify.<area>")``;
handlers are attached here, by the CLI or by an embedding application.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=timezone.utc).isoformat().replace("+00:00", "Z")


def _is_jsonable(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    """Yield the ``extra=`` attributes of ``record`` that serialize cleanly."""

    for key, value in vars(record).items():
        if key.startswith("_") or key in _RESERVED_ATTRS:
            continue
        if _is_jsonable(value):
            yield key, value


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, then the extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = dict(_extra_fields(record))
        # core fields are written last so an extra can never shadow them
        payload.update(
            timestamp=_utc_timestamp(record.created),
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    level: str = "INFO",
    log_dir: Path | str | None = None,
    logger_name: str = "quantify",
) -> Logger:
    """Configure the ``quantify`` logger with JSON handlers.

    A stderr stream handler is always attached; when ``log_dir`` is given a
    midnight-rotating ``quantify.jsonl`` file handler is added as well.
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "quantify.jsonl"
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("JSON logging configured", extra={"log_file": str(log_file) if log_file else None})
    return logger


__all__ = ["configure_logging", "JsonFormatter"]
