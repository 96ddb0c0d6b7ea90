"""Structured logging for the bot."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, unbind, context, get_context
from .logger import get_logger, StructuredLogger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "unbind",
    "context",
    "get_context",
    "get_logger",
    "StructuredLogger",
]
