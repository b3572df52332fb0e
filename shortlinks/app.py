#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: uvicorn serves many requests at once on a single event loop. All
state lives in one process-scoped in-memory record store whose operations are
lock-guarded, so the service must run as a single worker process.

Usage:
    shortlinks
    python -m shortlinks.app

Environment variables:
    PORT - Port to listen on (default 3000)
    HOSTNAME - Base URL for shortlinks (default http://localhost:<PORT>)
    HOST - Address to bind to
    DEFAULT_VALIDITY_MINUTES - Validity when a request gives none
    SHORT_CODE_LENGTH - Length of generated codes
    MAX_COLLISION_RETRIES - Attempts before code generation fails
    LOG_LEVEL - Logging level
    LOG_FILE - Append-only request/event log
    LOG_JSON - JSON formatted logs
"""

import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shortlinks.config import Config, load_config
from shortlinks.lib.store import InMemoryRecordStore
from shortlinks.lib.service import URLShortenerService
from shortlinks.lib.shortcode import ShortCodeGenerator
from shortlinks.lib.common.logging_config import setup_logging, shutdown_logging
from shortlinks.web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    config = app.state.config

    logger.info(f"URL Shortener Microservice running on port {config.port}")
    logger.info(f"Shortlinks use base URL {config.base_url}")

    yield

    logger.info(
        f"Shutting down URL shortener service; {app.state.store.count()} records discarded"
    )
    shutdown_logging()


def build_app(config: Config, logger) -> FastAPI:
    """Wire the store, service and web app for one process."""
    generator = ShortCodeGenerator(
        default_length=config.short_code_length,
        max_attempts=config.max_collision_retries,
    )
    store = InMemoryRecordStore(short_code_generator=generator, logger=logger)
    service = URLShortenerService(
        store=store,
        base_url=config.base_url,
        logger=logger,
        default_validity_minutes=config.default_validity_minutes,
    )

    app = create_app(
        store_instance=store,
        service_instance=service,
        config=config,
        lifespan=lifespan,
    )
    app.state.logger = logger
    return app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    app = build_app(config, logger)

    # A single worker: a second process would hold a separate store
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=1,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        shutdown_logging()
        sys.exit(1)


if __name__ == "__main__":
    main()
