"""Header parsing utilities for URL shortener."""

from typing import Mapping, Optional

from ..store.models import DEFAULT_REFERRER


def _lower_keys(headers: Mapping[str, str]) -> dict:
    return {k.lower(): v for k, v in headers.items()}


def extract_referrer(headers: Mapping[str, str]) -> str:
    """Get the click referrer from request headers.

    Checks ``Referer`` and then the ``Referrer`` spelling.

    Args:
        headers: Request headers

    Returns:
        Referrer, or "direct" when neither header is present
    """
    headers_lower = _lower_keys(headers)
    referrer = headers_lower.get("referer") or headers_lower.get("referrer")
    return referrer.strip() if referrer and referrer.strip() else DEFAULT_REFERRER


def client_ip(headers: Mapping[str, str], fallback: Optional[str] = None) -> str:
    """Get the originating client address.

    Uses the first X-Forwarded-For hop when a proxy set one.

    Args:
        headers: Request headers
        fallback: Address of the direct peer

    Returns:
        Client address, or "unknown"
    """
    forwarded_for = _lower_keys(headers).get("x-forwarded-for", "")
    first_hop = forwarded_for.split(",")[0].strip()
    return first_hop or fallback or "unknown"
