"""Abstract base class for record store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List, Tuple
from datetime import datetime

from .models import URLRecord, DEFAULT_REFERRER, DEFAULT_GEO


DEFAULT_VALIDITY_MINUTES = 30


class RecordStoreBase(ABC):
    """Abstract base class for short code record storage."""

    @abstractmethod
    def create(
        self,
        target_url: str,
        validity_minutes: float = DEFAULT_VALIDITY_MINUTES,
        requested_code: Optional[str] = None,
    ) -> Tuple[str, datetime]:
        """Create a new URL record.

        Args:
            target_url: The original long URL
            validity_minutes: Minutes until the code expires
            requested_code: Optional caller-chosen short code

        Returns:
            Tuple of (short_code, expires_at)

        Raises:
            InvalidURLError: If target_url is not an http(s) URL
            InvalidValidityError: If validity_minutes is not positive
            InvalidShortcodeError: If requested_code has a bad format
            ShortcodeInUseError: If requested_code already exists
            CodeGenerationError: If no free code could be generated
        """
        pass

    @abstractmethod
    def get(self, short_code: str) -> Optional[URLRecord]:
        """Get the record for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            A snapshot of the record, or None if not found
        """
        pass

    @abstractmethod
    def exists(self, short_code: str) -> bool:
        """Check if a short code already exists."""
        pass

    @abstractmethod
    def is_expired(self, short_code: str, now: Optional[datetime] = None) -> bool:
        """Check whether a short code is unusable.

        Args:
            short_code: The short code to check
            now: Reference time (defaults to current UTC time)

        Returns:
            True if the code is unknown or its expiry has been reached
        """
        pass

    @abstractmethod
    def record_click(
        self,
        short_code: str,
        referrer: str = DEFAULT_REFERRER,
        geo: str = DEFAULT_GEO,
    ) -> bool:
        """Append a click event to a live record.

        Args:
            short_code: The short code that was followed
            referrer: Referrer of the click
            geo: Coarse location of the click

        Returns:
            True if recorded, False if the code is unknown or expired
        """
        pass

    @abstractmethod
    def list_all(self) -> List[Tuple[str, URLRecord, int]]:
        """List every record regardless of expiry.

        Returns:
            List of (short_code, record, total_clicks) in insertion order
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of records held."""
        pass
