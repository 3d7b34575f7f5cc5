from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from .levels import LogLevel


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


Message = SupportsStr | Callable[[], SupportsStr]


class StructuredLogger:
    """Thin wrapper over ``logging.Logger`` adding lazy messages, a service tag and SUCCESS."""

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    def _log(self, level: int, msg: Message, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        message = msg() if callable(msg) else msg
        extra = dict(kwargs.pop("extra", None) or {})
        if self._service and "service" not in extra:
            extra["service"] = self._service
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, str(message), *args, extra=extra, **kwargs)

    def debug(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def success(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, *args, **kwargs)

    def warning(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name), service=service)
