"""
Statistics Service

This service turns store snapshots into plain dictionaries for the API.

Design Decisions:
- Separate service for statistics operations
- Reads go through the store so snapshots are taken under its lock
- Timestamps are rendered as ISO-8601 strings
"""

from typing import List

from shortlinks.db.models import LinkStatistics
from shortlinks.services.link_store import ShortLinkStore


class StatsService:
    """
    Service for retrieving short link statistics.
    """

    def __init__(self, store: ShortLinkStore):
        self.store = store

    def get_stats(self, short_code: str) -> dict:
        """
        Get statistics for an active short link.

        Returns:
            Dictionary with statistics:
            - short_code: The short code
            - original_url: The original long URL
            - created_at / expires_at: ISO-8601 timestamps
            - click_count: Total number of recorded clicks
            - clicks: Ordered list of {timestamp, referrer, location}

        Raises:
            ShortCodeNotFoundError: If the code is unknown or expired
        """
        return self._to_dict(self.store.get_statistics(short_code))

    def list_stats(self) -> List[dict]:
        """
        Get statistics for every stored link, expired ones included.

        Each entry carries an `expired` flag.
        """
        now = self.store.clock()
        results = []
        for stats in self.store.list_statistics(include_expired=True):
            data = self._to_dict(stats)
            data["expired"] = stats.record.is_expired(now)
            results.append(data)
        return results

    @staticmethod
    def _to_dict(stats: LinkStatistics) -> dict:
        record = stats.record
        return {
            "short_code": record.code,
            "original_url": record.original_url,
            "created_at": record.created_at.isoformat(),
            "expires_at": record.expires_at.isoformat(),
            "click_count": stats.click_count,
            "clicks": [click.to_dict() for click in stats.clicks],
        }
