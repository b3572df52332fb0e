"""Data models for URL shortener."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from ..common.timestamps import iso_z, utc_now


DEFAULT_REFERRER = "direct"
DEFAULT_GEO = "unknown"


@dataclass(frozen=True)
class ClickEvent:
    """A single redirect through a short code."""

    time: datetime
    referrer: str = DEFAULT_REFERRER
    geo: str = DEFAULT_GEO

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "time": iso_z(self.time),
            "referrer": self.referrer,
            "geo": self.geo,
        }


@dataclass
class URLRecord:
    """Represents a short code mapping held by the record store."""

    short_code: str
    target_url: str
    created_at: datetime
    expires_at: datetime
    clicks: List[ClickEvent] = field(default_factory=list)

    @property
    def total_clicks(self) -> int:
        return len(self.clicks)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True once the current time reaches expires_at."""
        now = now or utc_now()
        return now >= self.expires_at

    def snapshot(self) -> "URLRecord":
        """Copy with its own click list, safe to hand out of the store."""
        return replace(self, clicks=list(self.clicks))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "shortcode": self.short_code,
            "url": self.target_url,
            "createdAt": iso_z(self.created_at),
            "expiry": iso_z(self.expires_at),
            "clicks": [click.to_dict() for click in self.clicks],
            "totalClicks": self.total_clicks,
        }
