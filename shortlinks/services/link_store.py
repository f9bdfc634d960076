"""
Short-Link Store

This service holds the core business logic of the short-link service:
- Creating links with random or custom short codes (codes are unique)
- Resolving codes back to their original URL, honouring expiry
- Appending click events to a link's history
- Projecting a link and its clicks into statistics

Design Decisions:
- One store instance per process, created by the application factory and
  injected into request handlers (no module-level singleton)
- A single lock guards every check-then-act sequence (uniqueness check +
  insert, lookup + append), so operations on the same code are linearizable
- Expiry is applied when reading; expired records stay in the repository
  and their codes are never reused
- Clicks are recorded on any existing code, expired or not; only
  resolve/get_statistics filter expired links
"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from shortlinks.core.exceptions import (
    CodeCollisionError,
    CodeSpaceExhaustedError,
    InvalidShortCodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortCodeNotFoundError,
)
from shortlinks.core.validators import is_valid_short_code, is_valid_url
from shortlinks.db.interface import LinkRepository
from shortlinks.db.memory import get_repository
from shortlinks.db.models import (
    DIRECT_REFERRER,
    ClickEvent,
    LinkRecord,
    LinkStatistics,
)
from shortlinks.services.code_generator import CodeGenerator

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ShortLinkStore:
    """
    In-memory keyed store of short links.

    Safe to share between threads. None of the operations block on I/O.
    """

    def __init__(
        self,
        repository: Optional[LinkRepository] = None,
        generator: Optional[CodeGenerator] = None,
        clock: Optional[Clock] = None,
        max_attempts: int = 1000,
        location: str = "Unknown",
        max_url_length: int = 2048,
        max_code_length: int = 20,
    ):
        """
        Initialize the store.

        Args:
            repository: Storage backend (default: in-memory)
            generator: Random code generator (default: 6 chars of base62)
            clock: Callable returning the current aware datetime
            max_attempts: Random codes tried before CodeSpaceExhaustedError
            location: Placeholder location recorded on every click
            max_url_length: Longest original URL accepted
            max_code_length: Longest custom code accepted
        """
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.repository = repository if repository is not None else get_repository()
        self.generator = generator or CodeGenerator()
        self.clock = clock or utc_now
        self.max_attempts = max_attempts
        self.location = location
        self.max_url_length = max_url_length
        self.max_code_length = max_code_length
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self.repository)

    def __contains__(self, code: str) -> bool:
        with self._lock:
            return code in self.repository

    def create(
        self,
        original_url: str,
        validity_minutes: int = 30,
        custom_code: Optional[str] = None
    ) -> LinkRecord:
        """
        Create a new short link.

        Args:
            original_url: The long URL to shorten (absolute http/https)
            validity_minutes: Minutes the link stays resolvable (> 0)
            custom_code: Optional caller-chosen code; a random one is
                generated when omitted

        Returns:
            The stored LinkRecord

        Raises:
            InvalidURLError: If the URL is not a well-formed absolute URL
            InvalidValidityError: If validity_minutes is not a positive int
            InvalidShortCodeError: If custom_code is empty or not alphanumeric
            CodeCollisionError: If custom_code is already in use, even by an
                expired link
            CodeSpaceExhaustedError: If no free random code was found
        """
        if not is_valid_url(original_url, max_length=self.max_url_length):
            raise InvalidURLError(
                original_url,
                reason="Invalid URL format. URL must be absolute and use http:// or https://"
            )

        if (
            isinstance(validity_minutes, bool)
            or not isinstance(validity_minutes, int)
            or validity_minutes <= 0
        ):
            raise InvalidValidityError(validity_minutes)

        if custom_code is not None and not is_valid_short_code(
            custom_code, max_length=self.max_code_length
        ):
            raise InvalidShortCodeError(custom_code)

        with self._lock:
            if custom_code is not None:
                if custom_code in self.repository:
                    logger.warning(f"Short code collision for custom code: {custom_code}")
                    raise CodeCollisionError(custom_code)
                code = custom_code
            else:
                code = self._generate_unique_code()

            now = self.clock()
            record = LinkRecord(
                code=code,
                original_url=original_url,
                created_at=now,
                expires_at=now + timedelta(minutes=validity_minutes),
            )
            self.repository.put(record)

        logger.info(f"Short link created: code={code}, validity={validity_minutes}m")
        return record

    def _generate_unique_code(self) -> str:
        # Caller holds self._lock
        for attempt in range(1, self.max_attempts + 1):
            code = self.generator.generate()
            if code not in self.repository:
                if attempt > 1:
                    logger.debug(f"Generated free code after {attempt} attempts")
                return code

        logger.error(f"Code space exhausted after {self.max_attempts} attempts")
        raise CodeSpaceExhaustedError(self.max_attempts)

    def _get_active(self, code: str) -> LinkRecord:
        # Caller holds self._lock
        record = self.repository.get(code)
        if record is None:
            logger.warning(f"Short link not found: {code}")
            raise ShortCodeNotFoundError(code)
        if record.is_expired(self.clock()):
            logger.warning(f"Short link expired: {code}")
            raise ShortCodeNotFoundError(code)
        return record

    def resolve(self, code: str) -> LinkRecord:
        """
        Look up an active link.

        Raises:
            ShortCodeNotFoundError: If the code is unknown or has expired.
                Both cases are reported identically.
        """
        with self._lock:
            return self._get_active(code)

    def record_click(self, code: str, referrer: Optional[str] = None) -> ClickEvent:
        """
        Append a click to a link's history.

        The link only has to exist; expired links still record clicks.
        An empty or missing referrer is stored as "Direct". Timestamps never
        go backwards within one link's history, even if the clock does.

        Returns:
            The appended ClickEvent

        Raises:
            ShortCodeNotFoundError: If the code was never created
        """
        with self._lock:
            record = self.repository.get(code)
            if record is None:
                logger.warning(f"Click for unknown short code: {code}")
                raise ShortCodeNotFoundError(code)

            timestamp = self.clock()
            latest = record.latest_click
            if latest is not None and latest.timestamp > timestamp:
                timestamp = latest.timestamp

            click = ClickEvent(
                timestamp=timestamp,
                referrer=referrer or DIRECT_REFERRER,
                location=self.location,
            )
            record.append_click(click)

        logger.info(f"Click recorded for short code: {code}")
        return click

    def get_statistics(self, code: str) -> LinkStatistics:
        """
        Return a snapshot of an active link and its clicks.

        Raises:
            ShortCodeNotFoundError: If the code is unknown or has expired
        """
        with self._lock:
            record = self._get_active(code)
            clicks = record.clicks
        return LinkStatistics(record=record, click_count=len(clicks), clicks=clicks)

    def list_records(self, include_expired: bool = True) -> List[LinkRecord]:
        """Return stored records in creation order."""
        with self._lock:
            records = list(self.repository)
            if include_expired:
                return records
            now = self.clock()
            return [record for record in records if not record.is_expired(now)]

    def list_statistics(self, include_expired: bool = True) -> List[LinkStatistics]:
        """Return a statistics snapshot for every stored record, oldest first."""
        with self._lock:
            now = self.clock()
            snapshots = []
            for record in self.repository:
                if not include_expired and record.is_expired(now):
                    continue
                clicks = record.clicks
                snapshots.append(
                    LinkStatistics(record=record, click_count=len(clicks), clicks=clicks)
                )
        return snapshots
