from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

ROOT_LOGGER = "riot_api"

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    level: str | int = "INFO",
    console: bool = True,
    log_dir: Optional[Path] = None,
    log_file_name: str = "riot_api.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """Install handlers on the package logger.

    The library itself never calls this; applications (and the bundled CLI)
    opt in. Console output goes to stderr so it never mixes with command
    output on stdout.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers.clear()
    lvl = to_level(level)
    root.setLevel(lvl)

    if console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(lvl)
        handler.setFormatter(ConsoleFormatter(colorize=sys.stderr.isatty()))
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    return root


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
