"""In-memory record store.

Records live for the lifetime of the process. A single re-entrant lock
guards the mapping so that each operation is atomic with respect to the key
set and to every record's click list; nothing here performs I/O.
"""

import logging
import threading
from datetime import datetime
from numbers import Real
from typing import Callable, Dict, List, Optional, Tuple

from .base import RecordStoreBase, DEFAULT_VALIDITY_MINUTES
from .models import ClickEvent, URLRecord, DEFAULT_REFERRER, DEFAULT_GEO
from ..common.timestamps import minutes_after, utc_now
from ..common.validators import is_valid_short_code, is_valid_url, RESERVED_SHORT_CODES
from ..errors import (
    InvalidShortcodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortcodeInUseError,
)
from ..shortcode import ShortCodeGenerator


class InMemoryRecordStore(RecordStoreBase):
    """Dictionary-backed record store."""

    def __init__(
        self,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the store.

        Args:
            short_code_generator: Generator used when no code is requested
            logger: Optional logger
            clock: Returns the current UTC time
        """
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.clock = clock
        # dicts keep insertion order, which list_all relies on
        self._records: Dict[str, URLRecord] = {}
        self._lock = threading.RLock()

    def create(
        self,
        target_url: str,
        validity_minutes: float = DEFAULT_VALIDITY_MINUTES,
        requested_code: Optional[str] = None,
    ) -> Tuple[str, datetime]:
        is_valid, error = is_valid_url(target_url)
        if not is_valid:
            raise InvalidURLError(f"Invalid URL format: {error}")

        if (
            isinstance(validity_minutes, bool)
            or not isinstance(validity_minutes, Real)
            or not validity_minutes > 0
        ):
            raise InvalidValidityError("Validity must be a positive number of minutes")

        if requested_code is not None:
            is_valid, error = is_valid_short_code(requested_code)
            if not is_valid:
                raise InvalidShortcodeError(
                    f"Invalid shortcode format. Must be alphanumeric and 4-10 chars. ({error})"
                )

        with self._lock:
            created_at = self.clock()
            try:
                expires_at = minutes_after(created_at, validity_minutes)
            except OverflowError:
                raise InvalidValidityError("Validity is too large")

            if requested_code is not None:
                if requested_code in self._records:
                    raise ShortcodeInUseError("Shortcode already in use")
                short_code = requested_code
            else:
                short_code = self.generator.generate_unique(self._is_taken)

            record = URLRecord(
                short_code=short_code,
                target_url=target_url,
                created_at=created_at,
                expires_at=expires_at,
            )
            self._records[short_code] = record

        self.logger.debug(f"Stored {short_code} -> {target_url} until {record.expires_at}")
        return short_code, record.expires_at

    def get(self, short_code: str) -> Optional[URLRecord]:
        with self._lock:
            record = self._records.get(short_code)
            return record.snapshot() if record else None

    def exists(self, short_code: str) -> bool:
        with self._lock:
            return short_code in self._records

    def is_expired(self, short_code: str, now: Optional[datetime] = None) -> bool:
        with self._lock:
            record = self._records.get(short_code)
            if record is None:
                return True
            return record.is_expired(now or self.clock())

    def record_click(
        self,
        short_code: str,
        referrer: str = DEFAULT_REFERRER,
        geo: str = DEFAULT_GEO,
    ) -> bool:
        with self._lock:
            record = self._records.get(short_code)
            if record is None:
                return False

            now = self.clock()
            if record.is_expired(now):
                return False

            record.clicks.append(ClickEvent(
                time=now,
                referrer=referrer or DEFAULT_REFERRER,
                geo=geo or DEFAULT_GEO,
            ))
            return True

    def list_all(self) -> List[Tuple[str, URLRecord, int]]:
        with self._lock:
            return [
                (code, record.snapshot(), record.total_clicks)
                for code, record in self._records.items()
            ]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _is_taken(self, short_code: str) -> bool:
        # Caller holds the lock
        return short_code in self._records or short_code in RESERVED_SHORT_CODES
