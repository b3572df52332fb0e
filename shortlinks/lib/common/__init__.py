"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_valid_short_code
from .timestamps import utc_now, iso_z
from .url_builder import build_short_url, normalize_base_url
from .logging_config import setup_logging, shutdown_logging

__all__ = [
    "is_valid_url",
    "is_valid_short_code",
    "utc_now",
    "iso_z",
    "build_short_url",
    "normalize_base_url",
    "setup_logging",
    "shutdown_logging",
]
