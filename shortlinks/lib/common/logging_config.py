"""Logging configuration for URL shortener."""

import logging
import logging.handlers
import queue
import sys
from typing import Optional


LOGGER_NAME = "shortlinks"

_listener: Optional[logging.handlers.QueueListener] = None


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Setup logging configuration.

    The log file is written from a background listener thread; request
    handlers only enqueue records, so a slow or failing disk never holds up
    a response.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional append-only log file path
        json_format: Whether to use JSON format

    Returns:
        Configured logger
    """
    global _listener

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers
    shutdown_logging()
    logger.handlers.clear()

    if json_format:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (if specified), fed through a queue
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8", delay=True)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)

        log_queue: queue.Queue = queue.Queue(-1)
        logger.addHandler(logging.handlers.QueueHandler(log_queue))
        _listener = logging.handlers.QueueListener(
            log_queue, file_handler, respect_handler_level=True
        )
        _listener.start()

    return logger


def shutdown_logging() -> None:
    """Flush and stop the background file writer, if one is running."""
    global _listener

    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None

