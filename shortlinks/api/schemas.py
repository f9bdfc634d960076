"""
API Request and Response Schemas

This module defines all Pydantic models for API requests and responses.
Separated from endpoints to keep concerns separated and enable reuse.

The URL and validity are passed through uncoerced: the store validates them
so the API reports the same errors (HTTP 400) as direct store callers.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from shortlinks.core.setting import settings


class ShortenRequest(BaseModel):
    """Request model for link creation endpoint."""
    url: str = Field(..., description="The long URL to shorten")
    validity: Any = Field(
        default=settings.DEFAULT_VALIDITY_MINUTES,
        description="Minutes the short link stays valid"
    )
    shortcode: Optional[str] = Field(
        default=None,
        description="Optional custom short code ([A-Za-z0-9]+)"
    )


class ShortenResponse(BaseModel):
    """Response model for link creation endpoint."""
    shortcode: str = Field(..., description="The short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")
    created_at: str
    expires_at: str


class ClickResponse(BaseModel):
    timestamp: str
    referrer: str
    location: str


class StatsResponse(BaseModel):
    """Response model for statistics endpoint."""
    short_code: str
    original_url: str
    created_at: str
    expires_at: str
    click_count: int
    clicks: List[ClickResponse]


class LinkSummaryResponse(StatsResponse):
    """Statistics entry in the link listing, expired links included."""
    expired: bool
