"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any, List

from .store import RecordStoreBase, URLRecord, DEFAULT_VALIDITY_MINUTES, DEFAULT_REFERRER, DEFAULT_GEO
from .common.url_builder import build_short_url
from .errors import URLShortenerError, ShortcodeNotFoundError, ShortcodeExpiredError


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: RecordStoreBase,
        base_url: str,
        logger: Optional[logging.Logger] = None,
        default_validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
    ):
        """Initialize URL shortener service.

        Args:
            store: Record store instance
            base_url: Base URL embedded in shortlinks
            logger: Optional logger
            default_validity_minutes: Validity used when the caller gives none
        """
        self.store = store
        self.base_url = base_url
        self.logger = logger or logging.getLogger("shortlinks.service")
        self.default_validity_minutes = default_validity_minutes

    def build_short_url(self, short_code: str) -> str:
        return build_short_url(short_code=short_code, base_url=self.base_url)

    async def create_short_url(
        self,
        original_url: str,
        validity: Optional[float] = None,
        custom_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new short URL.

        Args:
            original_url: The original long URL
            validity: Minutes the link stays usable (default applies if None)
            custom_code: Optional custom short code

        Returns:
            Dictionary with short_code, short_url, original_url, expiry

        Raises:
            URLShortenerError: If validation fails or the code is taken
        """
        if validity is None:
            validity = self.default_validity_minutes

        try:
            short_code, expiry = self.store.create(
                original_url,
                validity_minutes=validity,
                requested_code=custom_code,
            )
        except URLShortenerError as e:
            self.logger.error(f"Short URL creation failed: {e.message}")
            raise

        short_url = self.build_short_url(short_code)
        self.logger.info(f"Short URL created: {short_url} -> {original_url}")

        return {
            "short_code": short_code,
            "short_url": short_url,
            "original_url": original_url,
            "expiry": expiry,
        }

    async def resolve(
        self,
        short_code: str,
        referrer: Optional[str] = None,
        geo: Optional[str] = None,
    ) -> str:
        """Resolve a short code for a redirect and record the click.

        Args:
            short_code: The short code that was followed
            referrer: Referrer of the request ("direct" if missing)
            geo: Coarse location ("unknown" if missing)

        Returns:
            The target URL

        Raises:
            ShortcodeNotFoundError: If the code does not exist
            ShortcodeExpiredError: If the code has expired
        """
        record = self.store.get(short_code)
        if record is None:
            self.logger.error(f"Redirect failed: shortcode not found - {short_code}")
            raise ShortcodeNotFoundError("Shortcode not found")

        if self.store.is_expired(short_code):
            self.logger.error(f"Redirect failed: shortcode expired - {short_code}")
            raise ShortcodeExpiredError("Short link has expired")

        referrer = referrer or DEFAULT_REFERRER
        # The redirect proceeds even if the link expired between the checks
        # above and this append; the click is simply not counted.
        recorded = self.store.record_click(short_code, referrer=referrer, geo=geo or DEFAULT_GEO)
        if recorded:
            self.logger.info(f"Redirect: {short_code} clicked. Referrer: {referrer}")
        else:
            self.logger.warning(f"Redirect: click on {short_code} not recorded")

        return record.target_url

    async def get_stats(self, short_code: str) -> URLRecord:
        """Get the record and click log for a short code.

        Raises:
            ShortcodeNotFoundError: If the code does not exist
        """
        record = self.store.get(short_code)
        self.logger.info(
            f"Stats request shortcode: {short_code}, data found: {'yes' if record else 'no'}"
        )
        if record is None:
            self.logger.error(f"Stats retrieval failed: shortcode not found - {short_code}")
            raise ShortcodeNotFoundError("Shortcode not found")
        return record

    async def list_urls(self) -> List[Dict[str, Any]]:
        """List every short URL with its click summary."""
        urls = []
        for short_code, record, total_clicks in self.store.list_all():
            entry = record.to_dict()
            entry["totalClicks"] = total_clicks
            entry["shortlink"] = self.build_short_url(short_code)
            urls.append(entry)

        self.logger.info(f"Stats summary requested. Total entries: {len(urls)}")
        return urls
