"""Exception handlers rendering every failure as {"error": message}."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("shortlinks.web")

_FIELD_MESSAGES = {
    "url": "URL must be a string",
    "validity": "Validity must be a positive integer (minutes)",
    "shortcode": "Shortcode must be a string",
}


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a client-facing message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"

    loc = [part for part in first.get("loc", ()) if part != "body"]
    if not loc:
        return "Request body must be a JSON object"

    field = str(loc[0])
    if first.get("type") == "missing":
        return f"Missing required field: {field}"
    return _FIELD_MESSAGES.get(field, f"Invalid value for field: {field}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        logger.error(f"404 Not Found: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_error(exc)
    logger.error(f"Request validation failed on {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Internal server error: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
