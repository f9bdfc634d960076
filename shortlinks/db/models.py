"""
Data Models for Short-Link Service

This module defines the in-memory records held by the store:
- LinkRecord: The mapping between a short code and its original URL
- ClickEvent: One recorded access to a short code
- LinkStatistics: Read-only projection returned by statistics lookups

Design Decisions:
- Click events live on their LinkRecord in insertion order (append-only)
- Timestamps are timezone-aware UTC datetimes
- Expiry is a read-time filter; records are never deleted
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

DIRECT_REFERRER = "Direct"


@dataclass(frozen=True)
class ClickEvent:
    """A single access to a short code."""
    timestamp: datetime
    referrer: str = DIRECT_REFERRER
    location: str = "Unknown"

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "referrer": self.referrer,
            "location": self.location,
        }


@dataclass(eq=False)
class LinkRecord:
    """
    Stored association between a short code and its original URL.

    Fields:
    - code: Unique, case-sensitive alphanumeric short code
    - original_url: The long URL that was shortened
    - created_at: When the link was created
    - expires_at: created_at + validity; the link resolves up to and
      including this instant
    - clicks: Read-only view of the append-only click history; only
      append_click() (called by the store under its lock) adds to it
    """
    code: str
    original_url: str
    created_at: datetime
    expires_at: datetime
    _clicks: List[ClickEvent] = field(default_factory=list, init=False, repr=False)

    _FROZEN_FIELDS = ("code", "original_url", "created_at", "expires_at", "_clicks")

    def __setattr__(self, name, value):
        if name in self._FROZEN_FIELDS and name in self.__dict__:
            raise AttributeError(f"LinkRecord.{name} is immutable")
        super().__setattr__(name, value)

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    @property
    def clicks(self) -> Tuple[ClickEvent, ...]:
        return tuple(self._clicks)

    @property
    def latest_click(self) -> Optional[ClickEvent]:
        return self._clicks[-1] if self._clicks else None

    @property
    def click_count(self) -> int:
        return len(self._clicks)

    def append_click(self, click: ClickEvent) -> None:
        self._clicks.append(click)


@dataclass(frozen=True)
class LinkStatistics:
    """Snapshot of a record and its clicks taken under the store lock."""
    record: LinkRecord
    click_count: int
    clicks: Tuple[ClickEvent, ...]
