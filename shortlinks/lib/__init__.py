"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .store import InMemoryRecordStore
from .service import URLShortenerService

__all__ = ["ShortCodeGenerator", "InMemoryRecordStore", "URLShortenerService"]
