"""Logging setup for chatmemory."""

import logging
import sys
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: str | None = None,
    logger_name: str = "chatmemory",
) -> logging.Logger:
    """
    Set up logging for the chatmemory package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Optional custom format string
        logger_name: Name for the logger

    Returns:
        Configured logger

    Example:
        logger = setup_logging(level="DEBUG")
        logger.debug("Debug message")
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid adding duplicate handlers
    if not logger.handlers:
        logger.addHandler(handler)

    return logger


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds context to log messages.

    Useful for tagging every record from one operation with the
    conversation it concerns.

    Example:
        logger = LoggerAdapter(logging.getLogger(__name__), {"conversation_id": "conv-123"})
        logger.info("Saved history")  # record.conversation_id == "conv-123"
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        """Process the logging message and add extra context."""
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs
