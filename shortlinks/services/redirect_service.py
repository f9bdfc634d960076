"""
Redirect Service

This service handles URL redirection logic: look up an active link and
record the access against it.

Design Decisions:
- Separate service for redirect operations
- The expiry-aware resolve is the gate; the click is only recorded once
  the link resolved
"""

from typing import Optional

from shortlinks.services.link_store import ShortLinkStore


class RedirectService:
    """Service for handling short link redirections."""

    def __init__(self, store: ShortLinkStore):
        self.store = store

    def get_redirect_url(self, short_code: str, referrer: Optional[str] = None) -> str:
        """
        Get the original URL for redirection and record the click.

        Raises:
            ShortCodeNotFoundError: If the code is unknown or expired
        """
        record = self.store.resolve(short_code)
        self.store.record_click(short_code, referrer)
        return record.original_url
