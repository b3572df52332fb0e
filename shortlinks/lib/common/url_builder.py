"""URL building utilities for URL shortener."""


def normalize_base_url(base_url: str) -> str:
    """Normalize a configured base URL.

    A bare host such as ``sho.rt`` or ``localhost:3000`` gets an ``http://``
    scheme; trailing slashes are dropped.

    Args:
        base_url: Configured base URL or host

    Returns:
        Base URL without trailing slash
    """
    base = base_url.strip().rstrip("/")
    if "://" not in base:
        base = f"http://{base}"
    return base


def build_short_url(short_code: str, base_url: str) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., https://example.com)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{short_code}"
