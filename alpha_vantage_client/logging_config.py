import json
import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_APIKEY_QUERY_RE = re.compile(r"(apikey=)([^&\s]+)", re.IGNORECASE)


class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings for structured logging.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "line": record.lineno,
            "logger": record.name,
        }

        # Merge extra field if available
        if hasattr(record, "context") and isinstance(record.context, dict):  # type: ignore
            log_record.update(record.context)  # type: ignore

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


def configure_logging() -> logging.Logger:
    """
    Configures the root logger based on environment variables.
    ENV: LOG_FORMAT (JSON | TEXT) - Defaults to TEXT if missing
    ENV: LOG_LEVEL (DEBUG | INFO | WARNING | ERROR) - Defaults to INFO
    """
    logger = logging.getLogger()

    # idempotent configuration
    if logger.handlers:
        return logger

    log_format = os.environ.get("LOG_FORMAT", "TEXT").upper()
    log_level_str = os.environ.get("LOG_LEVEL", "INFO").upper()

    level = getattr(logging, log_level_str, logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if log_format == "JSON":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(module)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)

    # httpx logs every request line at INFO, including the apikey query value.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logger


def redact(text: str, api_key: Optional[str] = None) -> str:
    out = text
    if api_key:
        out = out.replace(api_key, "[REDACTED]")
    return _APIKEY_QUERY_RE.sub(r"\1[REDACTED]", out)


def log_event(
    logger: logging.Logger,
    level: int,
    message: str,
    *,
    api_key: Optional[str] = None,
    **context: Any,
) -> None:
    """Log ``message`` with a redacted ``context`` mapping attached as ``extra``."""
    if not logger.isEnabledFor(level):
        return

    def sanitize(value: Any) -> Any:
        if value is None or isinstance(value, (bool, int, float)):
            return value
        if isinstance(value, str):
            return redact(value, api_key)
        if isinstance(value, list):
            return [sanitize(v) for v in value]
        if isinstance(value, dict):
            return {k: sanitize(v) for k, v in value.items()}
        return redact(str(value), api_key)

    safe_context = {k: sanitize(v) for k, v in context.items() if v is not None}
    logger.log(level, message, extra={"context": safe_context})
