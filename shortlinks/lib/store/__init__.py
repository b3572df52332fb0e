"""Record storage for URL shortener."""

from .base import RecordStoreBase, DEFAULT_VALIDITY_MINUTES
from .memory import InMemoryRecordStore
from .models import URLRecord, ClickEvent, DEFAULT_REFERRER, DEFAULT_GEO

__all__ = [
    "RecordStoreBase",
    "InMemoryRecordStore",
    "URLRecord",
    "ClickEvent",
    "DEFAULT_VALIDITY_MINUTES",
    "DEFAULT_REFERRER",
    "DEFAULT_GEO",
]
