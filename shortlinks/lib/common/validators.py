"""Validation utilities for URL shortener."""

import re
from urllib.parse import urlparse
from typing import Tuple


MAX_URL_LENGTH = 2048
SHORT_CODE_MIN_LENGTH = 4
SHORT_CODE_MAX_LENGTH = 10

_SHORT_CODE_RE = re.compile(r'[a-zA-Z0-9]+')

# Path segments served by the API itself; a code equal to one would never redirect
RESERVED_SHORT_CODES = frozenset({"shorturls"})


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a target URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    try:
        result = urlparse(url)

        if result.scheme not in ("http", "https"):
            return False, "URL must use http or https protocol"

        # hostname is None for things like "http://:80" or "http://"
        if not result.netloc or not result.hostname:
            return False, "URL must have a valid domain"

        # Accessing port raises ValueError on out-of-range or non-numeric ports
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_valid_short_code(
    short_code: str,
    min_length: int = SHORT_CODE_MIN_LENGTH,
    max_length: int = SHORT_CODE_MAX_LENGTH,
) -> Tuple[bool, str]:
    """Validate a user-supplied short code.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) < min_length:
        return False, f"Short code must be at least {min_length} characters"

    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"

    if not _SHORT_CODE_RE.fullmatch(short_code):
        return False, "Short code can only contain letters and numbers"

    if short_code in RESERVED_SHORT_CODES:
        return False, f"'{short_code}' is a reserved word and cannot be used"

    return True, ""
