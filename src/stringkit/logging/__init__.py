"""Structured logging module for stringkit.

Provides configurable logging with JSON format support and file rotation.
"""

from stringkit.logging.config import configure_logging
from stringkit.logging.handlers import JSONFormatter, RenderContextFilter

__all__ = [
    "JSONFormatter",
    "RenderContextFilter",
    "configure_logging",
]
