from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Fields the request hooks attach through ``extra=``.
_REQUEST_FIELDS = ("method", "url", "status")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _request_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: getattr(record, k) for k in _REQUEST_FIELDS if getattr(record, k, None) is not None}


class ConsoleFormatter(logging.Formatter):
    def __init__(self, colorize: bool = True) -> None:
        super().__init__()
        self.colorize = colorize

    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        parts = [
            md["timestamp"],
            record.levelname,
            md["service"] or "-",
            f"{md['logger']}:{md['function']}:{md['line_number']}",
            record.getMessage(),
        ]
        fields = _request_fields(record)
        fields.update(get_context())
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self.colorize:
            return line
        return f"{_LEVEL_COLORS.get(record.levelname, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        payload.update(_request_fields(record))
        ctx = get_context()
        if ctx:
            payload["context"] = ctx
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
