"""API routes implementation."""

from typing import List

from fastapi import APIRouter, Request, HTTPException, status

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    StatsResponse,
    URLListItem,
    ErrorResponse,
)
from shortlinks.lib.common.timestamps import iso_z
from shortlinks.lib.errors import URLShortenerError, CodeGenerationError

router = APIRouter()


def to_http_exception(error: URLShortenerError) -> HTTPException:
    """Map a service error onto the HTTP status it stands for."""
    if isinstance(error, CodeGenerationError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )
    return HTTPException(status_code=error.status_code, detail=error.message)


@router.post(
    "/shorturls",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        409: {"model": ErrorResponse, "description": "Shortcode already in use"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Optionally provide a validity in minutes and a custom short code.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service

    try:
        result = await service.create_short_url(
            original_url=body.url,
            validity=body.validity,
            custom_code=body.shortcode or None,
        )
    except URLShortenerError as e:
        raise to_http_exception(e)

    return ShortenResponse(
        shortlink=result["short_url"],
        expiry=iso_z(result["expiry"]),
    )


@router.get(
    "/shorturls",
    response_model=List[URLListItem],
    summary="List short URLs",
    description="List every short URL, expired or not, with its click log.",
)
async def list_urls(request: Request):
    """List all short URLs."""
    service = request.app.state.service

    return await service.list_urls()


@router.get(
    "/shorturls/{short_code}",
    response_model=StatsResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Shortcode not found"},
    },
    summary="Get URL statistics",
    description="Get the target, lifetime and click log of a short URL.",
)
async def get_url_stats(request: Request, short_code: str):
    """Get statistics for a shortened URL."""
    service = request.app.state.service

    try:
        record = await service.get_stats(short_code)
    except URLShortenerError as e:
        raise to_http_exception(e)

    return StatsResponse(
        originalUrl=record.target_url,
        createdAt=iso_z(record.created_at),
        expiry=iso_z(record.expires_at),
        totalClicks=record.total_clicks,
        clicks=[click.to_dict() for click in record.clicks],
    )
