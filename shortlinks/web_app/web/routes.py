"""Redirect route implementation."""

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from starlette import status

from shortlinks.lib.common.headers import extract_referrer
from shortlinks.lib.errors import URLShortenerError
from shortlinks.lib.store import DEFAULT_GEO
from ..api.routes import to_http_exception

router = APIRouter()


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL, recording the click."""
    service = request.app.state.service

    try:
        original_url = await service.resolve(
            short_code,
            referrer=extract_referrer(request.headers),
            # No geo lookup; every click gets the placeholder
            geo=DEFAULT_GEO,
        )
    except URLShortenerError as e:
        raise to_http_exception(e)

    # Temporary redirect so every visit comes back through here and is counted
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
