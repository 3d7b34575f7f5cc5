"""Structured logging on top of the stdlib ``logging`` module."""
from .config import bootstrap_logging, shutdown_logging
from .context import get_context, log_context
from .levels import LogLevel
from .logger import StructuredLogger, get_logger

__all__ = [
    'bootstrap_logging',
    'shutdown_logging',
    'get_context',
    'log_context',
    'LogLevel',
    'StructuredLogger',
    'get_logger',
]
