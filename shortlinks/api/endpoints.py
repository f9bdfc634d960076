"""
FastAPI Endpoints for Short-Link Service

This module defines all REST API endpoints with minimal logic.
Endpoints only handle:
- Request validation (Pydantic models)
- Rate limiting
- Error handling and HTTP responses
- Delegating to service layer

Design Principles:
- Thin endpoints: Only validation and rate limiting
- Service layer: All business logic
- Error handling: Store exceptions map to HTTP status codes
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from shortlinks.api.dependencies import get_store
from shortlinks.api.schemas import (
    LinkSummaryResponse,
    ShortenRequest,
    ShortenResponse,
    StatsResponse,
)
from shortlinks.core.exceptions import (
    CodeCollisionError,
    CodeSpaceExhaustedError,
    InvalidShortCodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortCodeNotFoundError,
)
from shortlinks.core.rate_limit import RATE_LIMITS, limiter
from shortlinks.core.setting import settings
from shortlinks.core.validators import sanitize_short_code
from shortlinks.services.link_store import ShortLinkStore
from shortlinks.services.redirect_service import RedirectService
from shortlinks.services.stats_service import StatsService

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_DETAIL = "Short URL not found or has expired"


def _require_short_code(short_code: str) -> str:
    sanitized_code = sanitize_short_code(short_code, max_length=settings.MAX_SHORT_CODE_LENGTH)
    if not sanitized_code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid short code format: '{short_code}'. Short codes must contain only alphanumeric characters."
        )
    return sanitized_code


@router.post(
    "/shorturls",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a short URL",
    description="Takes a long URL, an optional validity in minutes and an optional custom code"
)
@limiter.limit(RATE_LIMITS["shorten"])
async def create_short_url(
    request: Request,  # Required for rate limiting (slowapi expects parameter named 'request')
    body: ShortenRequest,
    store: ShortLinkStore = Depends(get_store)
) -> ShortenResponse:
    """
    Create a new short link.

    Returns:
        ShortenResponse with shortcode, short_url, original_url and timestamps
    """
    try:
        record = store.create(
            body.url,
            validity_minutes=body.validity,
            custom_code=body.shortcode or None,
        )
    except (InvalidURLError, InvalidValidityError, InvalidShortCodeError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CodeCollisionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except CodeSpaceExhaustedError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    return ShortenResponse(
        shortcode=record.code,
        short_url=f"{settings.BASE_URL.rstrip('/')}/{record.code}",
        original_url=record.original_url,
        created_at=record.created_at.isoformat(),
        expires_at=record.expires_at.isoformat(),
    )


@router.get(
    "/shorturls",
    response_model=List[LinkSummaryResponse],
    summary="List short URLs",
    description="Returns statistics for every stored link, expired ones included"
)
@limiter.limit(RATE_LIMITS["stats"])
async def list_short_urls(
    request: Request,
    store: ShortLinkStore = Depends(get_store)
) -> List[LinkSummaryResponse]:
    return [LinkSummaryResponse(**stats) for stats in StatsService(store).list_stats()]


@router.get(
    "/shorturls/{short_code}",
    response_model=StatsResponse,
    summary="Get URL statistics",
    description="Returns statistics for a short URL including its click history"
)
@limiter.limit(RATE_LIMITS["stats"])
async def get_url_stats(
    short_code: str,
    request: Request,  # Required for rate limiting
    store: ShortLinkStore = Depends(get_store)
) -> StatsResponse:
    """
    Get statistics for a short URL.

    Raises:
        HTTPException 400: If short code format is invalid
        HTTPException 404: If short code not found or expired
        HTTPException 429: If rate limit exceeded
    """
    short_code = _require_short_code(short_code)

    try:
        stats = StatsService(store).get_stats(short_code)
    except ShortCodeNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

    return StatsResponse(**stats)


@router.get(
    "/{short_code}",
    status_code=status.HTTP_302_FOUND,
    summary="Redirect to original URL",
    description="Takes a short code, records the click and redirects to the original URL"
)
@limiter.limit(RATE_LIMITS["redirect"])
async def redirect_to_url(
    short_code: str,
    request: Request,
    store: ShortLinkStore = Depends(get_store)
) -> RedirectResponse:
    """
    Redirect to the original URL for a given short code.

    The Referer header, if any, is stored with the click.

    Raises:
        HTTPException 400: If short code format is invalid
        HTTPException 404: If short code not found or expired
        HTTPException 429: If rate limit exceeded
    """
    short_code = _require_short_code(short_code)

    try:
        original_url = RedirectService(store).get_redirect_url(
            short_code,
            referrer=request.headers.get("Referer"),
        )
    except ShortCodeNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

    logger.info(f"Redirecting {short_code} to {original_url}")
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
