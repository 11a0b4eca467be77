"""Structured logging configuration.

Provides JSON-formatted logs with persistent context for the application,
or a human-readable format for local development.
"""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
CONTEXT_ATTRS = ("environment",)
PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value.

    Only the names in LOG_LEVELS are accepted, case-insensitively.

    Raises:
        ValueError: If level is not one of LOG_LEVELS
    """
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    return getattr(logging, name)


class JSONFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def __init__(self, context_attrs=CONTEXT_ATTRS):
        super().__init__()
        self.context_attrs = tuple(context_attrs)

    def _payload(self, record: logging.LogRecord) -> Dict[str, Any]:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = dict(
            timestamp=created.isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
            module=record.module,
            function=record.funcName,
            line=record.lineno,
        )
        payload.update(
            (attr, getattr(record, attr))
            for attr in self.context_attrs
            if hasattr(record, attr)
        )
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }
        return payload

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._payload(record), default=str)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that includes context in all log messages.

    Example:
        >>> logger = ContextLogger(base_logger, {"environment": "test"})
        >>> logger.info("Settings loaded")
        # Output includes environment automatically
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Install a single stdout handler on the root logger.

    Any handlers already on the root logger are replaced.

    Args:
        level: One of LOG_LEVELS, any case
        json_format: Use JSONFormatter instead of the plain text format

    Returns:
        Configured root logger

    Raises:
        ValueError: If level is not one of LOG_LEVELS
    """
    numeric_level = resolve_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers[:] = [handler]
    return root_logger


def get_logger(name: str, context: Optional[Dict[str, Any]] = None):
    """Return the named logger, wrapped in a ContextLogger when context is given."""
    base = logging.getLogger(name)
    return ContextLogger(base, context) if context else base
