"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from shortlinks.config import Config
from shortlinks.lib.store import InMemoryRecordStore
from shortlinks.lib.service import URLShortenerService
from shortlinks.lib.shortcode import ShortCodeGenerator
from shortlinks.lib.common.logging_config import setup_logging
from shortlinks.web_app import create_app


BASE_URL = "http://testserver"


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def store(short_code_generator, logger, clock):
    """Record store driven by the fake clock."""
    return InMemoryRecordStore(
        short_code_generator=short_code_generator,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def service(store, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(store=store, base_url=BASE_URL, logger=logger)


@pytest.fixture
def config():
    return Config(hostname=BASE_URL, log_file=None)


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
